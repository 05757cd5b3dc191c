"""
Flight schedule pages.

Arrivals, departures and the full schedule all come from the same flights
webhook; arrivals and departures are picked out by status code, then every
view is paginated 15 flights per page.
"""

from typing import Callable, Dict, Any, List, Optional

import httpx
from fastapi import APIRouter, Depends, Query

from config import Settings, get_settings
from data_ingestion.webhooks import as_records, fetch_collection, get_webhook_client
from models.flights import FlightPage
from services.flight_schedule import coerce_page, filter_arrivals, filter_departures, paginate

router = APIRouter(tags=["Flight Schedule"])

_PAGE_QUERY = Query("1", description="Page number (1-based); invalid values fall back to 1")


async def _flight_page(
    client: httpx.AsyncClient,
    settings: Settings,
    page: Optional[str],
    select: Optional[Callable[[List[Dict[str, Any]]], List[Dict[str, Any]]]] = None,
) -> FlightPage:
    payload = await fetch_collection(client, settings.flights_url, timeout=settings.webhook_timeout)
    flights = as_records(payload["data"])
    if select is not None:
        flights = select(flights)

    paginated = paginate(flights, coerce_page(page))

    return FlightPage(
        flights=paginated["data"],
        current_page=paginated["current_page"],
        last_page=paginated["last_page"],
        total=paginated["total"],
        per_page=paginated["per_page"],
        error=payload["error"],
    )


@router.get(
    "/arrivals",
    response_model=FlightPage,
    summary="Arriving flights",
    description="Flights whose status code contains `ARR` or `3-`, paginated.",
)
async def arrivals(
    page: Optional[str] = _PAGE_QUERY,
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    return await _flight_page(client, settings, page, filter_arrivals)


@router.get(
    "/departures",
    response_model=FlightPage,
    summary="Departing flights",
    description="Flights whose status code contains `DEP` or `2-`, paginated.",
)
async def departures(
    page: Optional[str] = _PAGE_QUERY,
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    return await _flight_page(client, settings, page, filter_departures)


@router.get(
    "/flight-schedule",
    response_model=FlightPage,
    summary="Full flight schedule",
    description="Every flight returned by the flights webhook, paginated.",
)
async def flight_schedule(
    page: Optional[str] = _PAGE_QUERY,
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    return await _flight_page(client, settings, page)
