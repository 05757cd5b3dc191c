"""
Weather payload shaping.

The weather webhook has no fixed schema: depending on the upstream provider it
returns an object, a list of objects, or nested structures with the
interesting values buried a level or two down. These helpers reduce whatever
comes back to a flat summary for the weather panel.
"""

from typing import Any, Dict, Iterable, Optional, Union

Primitive = Union[str, int, float]

CONDITION_KEYS = ("condition", "weather", "status", "summary", "main")
TEMPERATURE_KEYS = ("temperature", "temp", "temp_c", "temp_f", "temperature (c)", "main")
HUMIDITY_KEYS = ("humidity", "relative_humidity", "humid", "main")
WIND_KEYS = ("wind", "wind_speed", "wind_kts", "wind_mph")
UPDATED_KEYS = ("updated_at", "timestamp", "time", "observed_at", "dt", "sys")
CITY_KEYS = ("city", "location", "name")

CONDITION_HINTS = ("condition", "status", "description")
TEMPERATURE_HINTS = ("temp", "temperature", "value", "feels_like")
HUMIDITY_HINTS = ("humidity", "relative", "value", "percent")
WIND_HINTS = ("speed", "value", "knots", "kt", "gust")
UPDATED_HINTS = ("time", "timestamp", "updated", "dt")


def to_weather_record(payload: Any) -> Optional[Dict[str, Any]]:
    """Pick the record to display out of an arbitrary JSON payload."""
    if not payload:
        return None
    if isinstance(payload, dict):
        return payload
    if isinstance(payload, list):
        for entry in payload:
            if isinstance(entry, dict):
                return entry
        return {"records": payload}
    return {"value": payload}


def normalize_weather_record(record: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if not record:
        return {}
    return {str(key).lower(): value for key, value in record.items()}


def coerce_primitive(value: Any, hints: Iterable[str] = ()) -> Optional[Primitive]:
    """
    Dig the first displayable scalar out of ``value``.

    Objects are searched by ``hints`` first, then by value order; lists yield
    their first usable element. Booleans render as Yes/No.
    """
    hints = tuple(hints)

    if value is None:
        return None
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (int, float, str)):
        return value
    if isinstance(value, list):
        for item in value:
            result = coerce_primitive(item, hints)
            if result is not None:
                return result
        return None
    if isinstance(value, dict):
        for hint in hints:
            if hint in value:
                result = coerce_primitive(value[hint], hints)
                if result is not None:
                    return result
        for entry in value.values():
            result = coerce_primitive(entry, hints)
            if result is not None:
                return result
    return None


def _first_present(record: Dict[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def extract_weather_summary(payload: Any, fallback_city: Optional[str] = None) -> Dict[str, Any]:
    normalized = normalize_weather_record(to_weather_record(payload))

    city = coerce_primitive(_first_present(normalized, CITY_KEYS))
    if city is None:
        city = fallback_city

    condition = coerce_primitive(_first_present(normalized, CONDITION_KEYS), CONDITION_HINTS)

    return {
        "city": None if city is None else str(city),
        "condition": None if condition is None else str(condition),
        "temperature": coerce_primitive(_first_present(normalized, TEMPERATURE_KEYS), TEMPERATURE_HINTS),
        "humidity": coerce_primitive(_first_present(normalized, HUMIDITY_KEYS), HUMIDITY_HINTS),
        "wind": coerce_primitive(_first_present(normalized, WIND_KEYS), WIND_HINTS),
        "updated_at": coerce_primitive(_first_present(normalized, UPDATED_KEYS), UPDATED_HINTS),
    }
