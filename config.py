"""
Environment-driven settings for the operations dashboard.

Every upstream data source is an n8n webhook; each URL can be overridden
(or blanked out to disable the source) through the environment.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

N8N_BASE = "https://n8n.larable.dev/webhook"


def _env(name: str, default: Optional[str] = None):
    """Read ``name`` when a Settings instance is built, not at import."""
    return field(default_factory=lambda: os.getenv(name, default))


def _env_float(name: str, default: str):
    return field(default_factory=lambda: float(os.getenv(name, default)))


def _env_int(name: str, default: str):
    return field(default_factory=lambda: int(os.getenv(name, default)))


@dataclass
class Settings:
    flights_url: Optional[str] = _env("N8N_GET_FLIGHTS", f"{N8N_BASE}/flights")
    notams_url: Optional[str] = _env("N8N_GET_NOTAMS", f"{N8N_BASE}/notams")
    baggages_url: Optional[str] = _env("N8N_GET_BAGGAGES", f"{N8N_BASE}/baggages")
    checked_in_url: Optional[str] = _env("N8N_GET_CHECKED_IN", f"{N8N_BASE}/checked-in")
    weather_url: Optional[str] = _env(
        "N8N_GET_WEATHER", f"{N8N_BASE}/eb549b24-047c-4a02-a9b3-eeb33f8e7a11"
    )
    send_flight_url: Optional[str] = _env(
        "N8N_SEND_FLIGHT_TO_PMS", f"{N8N_BASE}/send-flight-to-pms"
    )

    # Seconds
    webhook_timeout: float = _env_float("WEBHOOK_TIMEOUT", "10")
    booking_timeout: float = _env_float("BOOKING_TIMEOUT", "30")

    booking_rate_limit: int = _env_int("BOOKING_RATE_LIMIT", "10")
    booking_rate_window: float = _env_float("BOOKING_RATE_WINDOW", "60")

    booking_source: str = "iaos-ops-dashboard"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
PORT = int(os.getenv("PORT", "8000"))
