import httpx
import pytest
from fastapi.testclient import TestClient

import services.rate_limiter as rate_limiter
from config import Settings, get_settings
from data_ingestion.webhooks import get_webhook_client
from main import app

WEBHOOK_BASE = "https://hooks.test/webhook"


def make_settings(**overrides) -> Settings:
    values = dict(
        flights_url=f"{WEBHOOK_BASE}/flights",
        notams_url=f"{WEBHOOK_BASE}/notams",
        baggages_url=f"{WEBHOOK_BASE}/baggages",
        checked_in_url=f"{WEBHOOK_BASE}/checked-in",
        weather_url=f"{WEBHOOK_BASE}/weather",
        send_flight_url=f"{WEBHOOK_BASE}/send-flight-to-pms",
        webhook_timeout=1.0,
        booking_timeout=1.0,
        booking_rate_limit=10,
        booking_rate_window=60.0,
    )
    values.update(overrides)
    return Settings(**values)


class Upstream:
    """Fake n8n: answers mocked webhook requests by path and records them."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, name, status_code=200, json=None, text=None, error=None):
        self.routes[f"/webhook/{name}"] = (status_code, json, text, error)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "webhook not registered"})

        status_code, json, text, error = route
        if error is not None:
            raise error("upstream failure", request=request)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json)


@pytest.fixture(autouse=True)
def _reset_booking_limiter():
    rate_limiter._booking_limiter = None
    yield
    rate_limiter._booking_limiter = None


@pytest.fixture
def upstream():
    return Upstream()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(upstream, settings):
    async def _webhook_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as webhook_client:
            yield webhook_client

    app.dependency_overrides[get_webhook_client] = _webhook_client
    app.dependency_overrides[get_settings] = lambda: settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def flight(flight_id, status_code, **fields):
    record = {
        "id": flight_id,
        "flight_number": f"PR {100 + flight_id}",
        "airline_code": "PR",
        "origin_code": "MNL",
        "destination_code": "CEB",
        "aircraft_icao_code": "A321",
        "scheduled_departure_time": "2026-10-19T08:00:00Z",
        "scheduled_arrival_time": "2026-10-19T09:20:00Z",
        "fk_id_terminal_code": "T3",
        "fk_id_gate_code": "G12",
        "fk_id_status_code": status_code,
    }
    record.update(fields)
    return record
