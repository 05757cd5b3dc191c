from services.operations_summary import (
    annotate_baggage,
    annotate_passenger,
    summarize_baggage,
    summarize_passengers,
)


def test_annotate_overweight_bag():
    bag = annotate_baggage({"tag": "PR-1", "weight": 25.5, "max_weight": 23, "status": "Loaded"})

    assert bag["tag"] == "PR-1"
    assert bag["status_key"] == "loaded"
    assert bag["is_overweight"] is True
    assert bag["overweight_by"] == 2.5


def test_annotate_bag_without_status_or_weights():
    bag = annotate_baggage({"tag": "PR-2", "status": ""})

    assert bag["status_key"] == "pending"
    assert bag["is_overweight"] is False
    assert bag["overweight_by"] is None


def test_string_weights_are_compared_numerically():
    assert annotate_baggage({"weight": "9", "max_weight": "10"})["is_overweight"] is False
    assert annotate_baggage({"weight": "12", "max_weight": "10"})["is_overweight"] is True


def test_baggage_summary():
    bags = [
        {"weight": 20, "max_weight": 23, "status": "loaded"},
        {"weight": 30, "max_weight": 23, "status": "LOADED"},
        {"weight": 12.5, "max_weight": 23, "status": "unloaded"},
        {"weight": None, "max_weight": 23, "status": None},
    ]

    assert summarize_baggage(bags) == {
        "total": 4,
        "loaded_count": 2,
        "overweight_count": 1,
        "total_weight": 62.5,
    }


def test_passenger_status_key_defaults_to_checked_in():
    assert annotate_passenger({"passenger_status": "Cancelled"})["status_key"] == "cancelled"
    assert annotate_passenger({})["status_key"] == "checked-in"


def test_passenger_summary():
    passengers = [
        {"passenger_status": "Checked-in", "destination_code": "CEB"},
        {"passenger_status": "checked-in", "destination_code": "DVO"},
        {"passenger_status": "Cancelled", "destination_code": "CEB"},
        {"passenger_status": None, "destination_code": "ILO"},
    ]

    assert summarize_passengers(passengers) == {
        "total": 4,
        "checked_in_count": 2,
        "cancelled_count": 1,
        "destination_count": 3,
    }


def test_empty_summaries():
    assert summarize_baggage([]) == {"total": 0, "loaded_count": 0, "overweight_count": 0, "total_weight": 0}
    assert summarize_passengers([])["destination_count"] == 0
