"""Booking payload construction for the PMS webhook."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from models.bookings import AuthenticatedUser, SendFlightRequest


def build_booking_payload(
    user: AuthenticatedUser,
    request: SendFlightRequest,
    source: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Assemble the body POSTed to the PMS webhook.

    Only the flight fields the client actually sent are forwarded; optional
    fields that were omitted stay omitted rather than going out as null.
    """
    now = now or datetime.now(timezone.utc)

    return {
        "user": {
            "id": user.id,
            "name": user.name,
            "email": user.email,
        },
        "flight": request.flight.model_dump(exclude_unset=True),
        "search_context": request.search_context or {},
        "meta": {
            "source": source,
            "timestamp": now.isoformat(timespec="seconds"),
        },
    }
