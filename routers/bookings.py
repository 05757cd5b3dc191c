"""
Booking dispatch.

Sends the selected flight, together with the signed-in user, to the PMS
webhook. This is the only route that writes upstream; the payload is POSTed
once and not kept.
"""

import logging

import httpx
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from data_ingestion.webhooks import dispatch_booking, get_webhook_client, response_details
from models.bookings import AuthenticatedUser, SendFlightRequest, SendFlightResponse
from routers.dependencies import booking_rate_limit
from services.booking import build_booking_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Bookings"])

DISPATCHED = "Flight dispatched to PMS successfully."
DISPATCH_FAILED = "Failed to dispatch flight data to PMS."
DISPATCH_ERROR = "Unexpected error while sending flight to PMS."


@router.post(
    "/send-flight",
    response_model=SendFlightResponse,
    response_model_exclude_none=True,
    summary="Send a flight to the PMS",
    responses={
        200: {"content": {"application/json": {"example": {"message": DISPATCHED}}}},
        401: {"description": "No authenticated user forwarded by the gateway"},
        429: {"description": "Booking rate limit exceeded"},
        500: {"content": {"application/json": {"example": {"message": DISPATCH_ERROR}}}},
        502: {
            "content": {
                "application/json": {
                    "example": {"message": DISPATCH_FAILED, "details": {"message": "Workflow could not be started"}}
                }
            }
        },
    },
)
async def send_flight(
    body: SendFlightRequest,
    user: AuthenticatedUser = Depends(booking_rate_limit),
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    try:
        if not settings.send_flight_url:
            raise RuntimeError("PMS booking webhook URL is not configured")

        payload = build_booking_payload(user, body, settings.booking_source)
        response = await dispatch_booking(
            client, settings.send_flight_url, payload, timeout=settings.booking_timeout
        )
    except Exception:
        logger.exception(f"Error sending flight to PMS for user {user.id}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": DISPATCH_ERROR},
        )

    if not response.is_success:
        logger.warning(f"PMS webhook rejected flight dispatch with HTTP {response.status_code}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"message": DISPATCH_FAILED, "details": response_details(response)},
        )

    return SendFlightResponse(message=DISPATCHED)
