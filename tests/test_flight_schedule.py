import math

import pytest

from conftest import flight
from services.flight_schedule import (
    ITEMS_PER_PAGE,
    coerce_page,
    filter_arrivals,
    filter_departures,
    is_arrival,
    is_departure,
    paginate,
)


@pytest.mark.parametrize("status_code", ["3-ARR", "ARR", "LANDED-ARR", "3-ONBLOCK"])
def test_arrival_status_codes(status_code):
    assert is_arrival(flight(1, status_code))


@pytest.mark.parametrize("status_code", ["2-DEP", "DEP", "2-BOARDING", "DEPARTED"])
def test_departure_status_codes(status_code):
    assert is_departure(flight(1, status_code))


def test_status_match_is_case_sensitive():
    assert not is_arrival(flight(1, "arr"))
    assert not is_departure(flight(2, "dep"))


def test_missing_status_matches_neither():
    record = flight(1, None)
    del record["fk_id_status_code"]

    assert not is_arrival(record)
    assert not is_departure(record)
    assert not is_arrival(flight(2, None))


def test_arrivals_and_departures_are_disjoint():
    flights = [
        flight(1, "3-ARR"),
        flight(2, "2-DEP"),
        flight(3, "1-SCH"),
        flight(4, "ARR"),
        flight(5, "DEP"),
        flight(6, ""),
        flight(7, "4-CNL"),
    ]

    arrivals = filter_arrivals(flights)
    departures = filter_departures(flights)

    assert [f["id"] for f in arrivals] == [1, 4]
    assert [f["id"] for f in departures] == [2, 5]
    assert not {f["id"] for f in arrivals} & {f["id"] for f in departures}


def test_filters_keep_upstream_order():
    flights = [flight(i, "3-ARR" if i % 2 else "2-DEP") for i in range(1, 11)]

    assert [f["id"] for f in filter_arrivals(flights)] == [1, 3, 5, 7, 9]
    assert [f["id"] for f in filter_departures(flights)] == [2, 4, 6, 8, 10]


def test_paginate_empty_input():
    result = paginate([], 1)

    assert result == {"data": [], "current_page": 1, "last_page": 1, "total": 0, "per_page": 15}


def test_paginate_slices_pages():
    items = list(range(40))

    first = paginate(items, 1)
    third = paginate(items, 3)

    assert first["data"] == list(range(15))
    assert first["last_page"] == 3
    assert third["data"] == list(range(30, 40))
    assert third["current_page"] == 3


def test_paginate_clamps_out_of_range_pages():
    items = list(range(20))

    assert paginate(items, 9)["current_page"] == 2
    assert paginate(items, 9)["data"] == list(range(15, 20))
    assert paginate(items, 0)["current_page"] == 1
    assert paginate(items, -4)["data"] == list(range(15))


def test_pagination_metadata_formula():
    for total in range(0, 50):
        items = list(range(total))
        for page in range(-2, 6):
            result = paginate(items, page)
            expected_last = max(1, math.ceil(total / ITEMS_PER_PAGE))

            assert result["last_page"] == expected_last
            assert result["current_page"] == min(max(1, page), expected_last)
            assert result["total"] == total
            assert len(result["data"]) <= ITEMS_PER_PAGE


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3", 3),
        (" 2 ", 2),
        ("3abc", 3),
        ("2.5", 2),
        ("+4", 4),
        ("0", 1),
        ("-5", 1),
        ("abc", 1),
        ("", 1),
        (None, 1),
        (7, 7),
    ],
)
def test_coerce_page(value, expected):
    assert coerce_page(value) == expected
