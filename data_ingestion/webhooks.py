"""
n8n webhook proxy.

Every dashboard data source is an externally owned n8n webhook. Lookups are a
single bounded-timeout attempt and never raise: failures are folded into a
``{"data": ..., "error": ...}`` dict that the routers hand straight to the view.

Booking dispatch is the one outbound write and is the only call allowed to
raise; the booking router decides how to report it.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "The data source is not configured."
UNREACHABLE = "Unable to reach the data source."
WEATHER_NOT_CONFIGURED = "Weather endpoint is not configured."
WEATHER_UNREACHABLE = "Unable to reach the weather service."

_HEADERS = {"Accept": "application/json"}

# InvalidURL is raised while the request is built and is not an HTTPError
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)

# Reusable client
_client: Optional[httpx.AsyncClient] = None


async def get_webhook_client() -> httpx.AsyncClient:
    """Return a reusable httpx client."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(headers=_HEADERS, follow_redirects=True)
    return _client


async def close_webhook_client() -> None:
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
    _client = None


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def as_records(payload: Any) -> List[Dict[str, Any]]:
    """Coerce a webhook body into a list of record dicts.

    n8n answers with a bare object instead of a one-element array when a
    workflow yields a single item, so an object counts as one record.
    """
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    if isinstance(payload, dict):
        return [payload]
    return []


async def fetch_collection(
    client: httpx.AsyncClient,
    url: Optional[str],
    timeout: float = 10.0,
) -> Dict[str, Any]:
    """GET a collection from a webhook.

    Returns ``{"data": <array|object>, "error": None}`` on success, otherwise
    ``{"data": [], "error": <message>}``.
    """
    if not url or not url.strip():
        logger.warning("Webhook fetch skipped: data source URL is not configured")
        return {"data": [], "error": NOT_CONFIGURED}

    try:
        response = await client.get(url, timeout=timeout)
    except REQUEST_ERRORS as e:
        logger.warning(f"Unable to reach webhook {url}: {e!r}")
        return {"data": [], "error": UNREACHABLE}

    if not response.is_success:
        logger.warning(f"Webhook {url} returned HTTP {response.status_code}")
        return {"data": [], "error": f"Failed to load data (HTTP {response.status_code})."}

    data = _json_or_none(response)
    if not isinstance(data, (list, dict)):
        logger.info(f"Webhook {url} returned a non-collection body, treating as empty")
        data = []

    logger.info(f"Fetched {len(data)} entries from {url}")
    return {"data": data, "error": None}


async def fetch_weather(
    client: httpx.AsyncClient,
    url: Optional[str],
    city: str,
    timeout: float = 10.0,
) -> Dict[str, Any]:
    """Look up weather for a city. ``data`` is the raw JSON body (or None)."""
    if not url or not url.strip():
        logger.warning("Weather lookup skipped: weather endpoint is not configured")
        return {"data": None, "error": WEATHER_NOT_CONFIGURED}

    try:
        response = await client.get(url, params={"city": city}, timeout=timeout)
    except REQUEST_ERRORS as e:
        logger.warning(f"Unable to reach weather webhook for {city}: {e!r}")
        return {"data": None, "error": WEATHER_UNREACHABLE}

    if not response.is_success:
        logger.warning(f"Weather webhook returned HTTP {response.status_code} for {city}")
        return {
            "data": None,
            "error": f"Unable to fetch weather data (HTTP {response.status_code}).",
        }

    logger.info(f"Fetched weather for {city}")
    return {"data": _json_or_none(response), "error": None}


async def dispatch_booking(
    client: httpx.AsyncClient,
    url: str,
    payload: Dict[str, Any],
    timeout: float = 30.0,
) -> httpx.Response:
    """POST a booking payload once. Transport errors propagate."""
    response = await client.post(url, json=payload, timeout=timeout)
    logger.info(f"Booking webhook answered HTTP {response.status_code}")
    return response


def response_details(response: httpx.Response) -> Any:
    """Upstream body for error reporting: decoded JSON, or None."""
    return _json_or_none(response)
