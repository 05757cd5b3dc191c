"""
Ground operations pages: baggage, checked-in passengers, NOTAMs and the
safety-measures digest derived from NOTAMs.

Upstream failures never fail the request; the page gets an empty list and
the error message to show.
"""

import httpx
from fastapi import APIRouter, Depends

from config import Settings, get_settings
from data_ingestion.webhooks import as_records, fetch_collection, get_webhook_client
from models.operations import BaggagePage, CheckedInPage, NOTAMPage, SafetyMeasuresPage
from services.operations_summary import (
    annotate_baggage,
    annotate_passenger,
    summarize_baggage,
    summarize_passengers,
)
from services.safety_guidelines import build_safety_guidelines, notam_marker

router = APIRouter(tags=["Operations"])


@router.get(
    "/baggage",
    response_model=BaggagePage,
    summary="Tracked baggage",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "baggages": [
                            {
                                "id": 1,
                                "passenger_id": "1042",
                                "tag": "PR-0001",
                                "flight_number": "PR 102",
                                "destination": "manila",
                                "type": "checked",
                                "weight": 24.5,
                                "max_weight": 23,
                                "status": "Loaded",
                                "status_key": "loaded",
                                "is_overweight": True,
                                "overweight_by": 1.5,
                            }
                        ],
                        "summary": {"total": 1, "loaded_count": 1, "overweight_count": 1, "total_weight": 24.5},
                        "error": None,
                    }
                }
            }
        },
    },
)
async def baggage(
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    payload = await fetch_collection(client, settings.baggages_url, timeout=settings.webhook_timeout)
    bags = as_records(payload["data"])

    return BaggagePage(
        baggages=[annotate_baggage(bag) for bag in bags],
        summary=summarize_baggage(bags),
        error=payload["error"],
    )


@router.get("/checked-in", response_model=CheckedInPage, summary="Checked-in passengers")
async def checked_in(
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    payload = await fetch_collection(client, settings.checked_in_url, timeout=settings.webhook_timeout)
    passengers = as_records(payload["data"])

    return CheckedInPage(
        passengers=[annotate_passenger(p) for p in passengers],
        summary=summarize_passengers(passengers),
        error=payload["error"],
    )


@router.get("/notams", response_model=NOTAMPage, summary="Active NOTAMs")
async def notams(
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    payload = await fetch_collection(client, settings.notams_url, timeout=settings.webhook_timeout)

    return NOTAMPage(
        notams=[
            {**notam, "marker": notam_marker(str(notam.get("message") or ""))}
            for notam in as_records(payload["data"])
        ],
        error=payload["error"],
    )


@router.get(
    "/safety-measures",
    response_model=SafetyMeasuresPage,
    summary="Safety guidelines derived from NOTAMs",
    description=(
        "Classifies each NOTAM as critical, caution or normal and attaches the "
        "recommended ground-operations actions."
    ),
)
async def safety_measures(
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    payload = await fetch_collection(client, settings.notams_url, timeout=settings.webhook_timeout)

    return SafetyMeasuresPage(
        guidelines=build_safety_guidelines(as_records(payload["data"])),
        error=payload["error"],
    )
