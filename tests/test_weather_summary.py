from services.weather_summary import (
    coerce_primitive,
    extract_weather_summary,
    normalize_weather_record,
    to_weather_record,
)


def test_to_weather_record_shapes():
    assert to_weather_record(None) is None
    assert to_weather_record([]) is None
    assert to_weather_record({"temp": 30}) == {"temp": 30}
    assert to_weather_record([1, {"temp": 30}, {"temp": 10}]) == {"temp": 30}
    assert to_weather_record([1, 2]) == {"records": [1, 2]}
    assert to_weather_record("sunny") == {"value": "sunny"}


def test_normalize_lowercases_keys():
    assert normalize_weather_record({"City": "Manila", "TEMP": 31}) == {"city": "Manila", "temp": 31}
    assert normalize_weather_record(None) == {}


def test_coerce_primitive_uses_hints_then_values():
    assert coerce_primitive({"feels_like": 33, "temp": 31}, ["temp", "feels_like"]) == 31
    assert coerce_primitive({"nested": {"deep": "x"}}) == "x"
    assert coerce_primitive([None, {"speed": 12}], ["speed"]) == 12
    assert coerce_primitive(True) == "Yes"
    assert coerce_primitive(False) == "No"
    assert coerce_primitive(None) is None
    assert coerce_primitive({}) is None


def test_openweather_style_payload():
    payload = {
        "name": "Manila",
        "weather": [{"main": "Clouds", "description": "scattered clouds"}],
        "main": {"temp": 31.2, "feels_like": 36.0, "humidity": 70},
        "wind": {"speed": 4.1, "deg": 120},
        "dt": 1760860800,
    }

    summary = extract_weather_summary(payload)

    assert summary == {
        "city": "Manila",
        "condition": "scattered clouds",
        "temperature": 31.2,
        "humidity": 70,
        "wind": 4.1,
        "updated_at": 1760860800,
    }


def test_flat_payload_in_a_list():
    payload = [{"City": "Cebu", "Condition": "Light rain", "Temperature": "28 C", "Humidity": "80%", "Wind_Speed": 9}]

    summary = extract_weather_summary(payload)

    assert summary["city"] == "Cebu"
    assert summary["condition"] == "Light rain"
    assert summary["temperature"] == "28 C"
    assert summary["humidity"] == "80%"
    assert summary["wind"] == 9
    assert summary["updated_at"] is None


def test_fallback_city():
    assert extract_weather_summary({"temp": 20}, fallback_city="Davao")["city"] == "Davao"
    assert extract_weather_summary(None, fallback_city="Davao") == {
        "city": "Davao",
        "condition": None,
        "temperature": None,
        "humidity": None,
        "wind": None,
        "updated_at": None,
    }
