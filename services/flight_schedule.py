"""
Flight schedule shaping: arrival/departure filtering and fixed-size pagination.

Status codes come from the flights webhook as short tags such as ``3-ARR`` or
``2-DEP`` and are matched by case-sensitive substring.
"""

import math
import re
from typing import Any, Dict, List, Optional, Sequence

ITEMS_PER_PAGE = 15

ARRIVAL_MARKERS = ("ARR", "3-")
DEPARTURE_MARKERS = ("DEP", "2-")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _status_code(flight: Dict[str, Any]) -> str:
    status = flight.get("fk_id_status_code")
    return "" if status is None else str(status)


def _matches(flight: Dict[str, Any], markers: Sequence[str]) -> bool:
    status = _status_code(flight)
    return any(marker in status for marker in markers)


def is_arrival(flight: Dict[str, Any]) -> bool:
    return _matches(flight, ARRIVAL_MARKERS)


def is_departure(flight: Dict[str, Any]) -> bool:
    return _matches(flight, DEPARTURE_MARKERS)


def filter_arrivals(flights: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [flight for flight in flights if is_arrival(flight)]


def filter_departures(flights: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [flight for flight in flights if is_departure(flight)]


def coerce_page(value: Optional[Any]) -> int:
    """
    Parse a ``page`` query value by its leading integer, so ``"3abc"`` is 3
    and ``"2.5"`` is 2. Anything without one means page 1.
    """
    match = _LEADING_INT.match("" if value is None else str(value))
    if not match:
        return 1
    return max(1, int(match.group(1)))


def paginate(items: List[Any], page: int, per_page: int = ITEMS_PER_PAGE) -> Dict[str, Any]:
    """
    Slice ``items`` into the requested page.

    ``last_page`` is never below 1 and ``current_page`` is clamped into
    ``[1, last_page]``, so an out-of-range page returns the last page.
    """
    total = len(items)
    last_page = max(1, math.ceil(total / per_page))
    current_page = min(max(1, page), last_page)
    offset = (current_page - 1) * per_page

    return {
        "data": list(items[offset:offset + per_page]),
        "current_page": current_page,
        "last_page": last_page,
        "total": total,
        "per_page": per_page,
    }
