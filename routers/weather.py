"""
Weather lookups by city, proxied to the weather webhook.

``/weather-updates`` backs the weather page and always renders, carrying any
error in the body. ``/api/weather`` is the JSON endpoint used by the dashboard
panel and reports failures through the status code.
"""

import httpx
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from data_ingestion.webhooks import fetch_weather, get_webhook_client
from models.weather import WeatherLookupResponse, WeatherUpdatesPage
from services.weather_summary import extract_weather_summary

router = APIRouter(tags=["Weather"])


@router.get("/weather-updates", response_model=WeatherUpdatesPage, summary="Weather page for a city")
async def weather_updates(
    city: str = Query("", description="City to look up; blank shows the empty search page"),
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    city = city.strip()
    if not city:
        return WeatherUpdatesPage(query="")

    payload = await fetch_weather(client, settings.weather_url, city, timeout=settings.webhook_timeout)
    summary = None
    if payload["error"] is None:
        summary = extract_weather_summary(payload["data"], fallback_city=city)

    return WeatherUpdatesPage(
        query=city,
        weather=payload["data"],
        summary=summary,
        error=payload["error"],
    )


@router.get(
    "/api/weather",
    response_model=WeatherLookupResponse,
    summary="Weather lookup",
    responses={
        422: {"description": "City is missing", "content": {"application/json": {"example": {"error": "City is required."}}}},
        502: {
            "description": "Weather webhook failed",
            "content": {"application/json": {"example": {"error": "Unable to fetch weather data (HTTP 500)."}}},
        },
    },
)
async def weather_lookup(
    city: str = Query("", description="City to look up"),
    client: httpx.AsyncClient = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
):
    city = city.strip()
    if not city:
        return JSONResponse(
            status_code=422,
            content={"error": "City is required."},
        )

    payload = await fetch_weather(client, settings.weather_url, city, timeout=settings.webhook_timeout)
    if payload["error"]:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"error": payload["error"]},
        )

    return WeatherLookupResponse(
        data=payload["data"],
        summary=extract_weather_summary(payload["data"], fallback_city=city),
    )
