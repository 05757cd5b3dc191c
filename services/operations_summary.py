"""Status keys and headline counts for the baggage and checked-in pages."""

from typing import Any, Dict, List, Optional


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _status_key(value: Any, default: str) -> str:
    if value is None:
        return default
    key = str(value).strip().lower()
    return key or default


def annotate_baggage(bag: Dict[str, Any]) -> Dict[str, Any]:
    """Add ``status_key``, ``is_overweight`` and ``overweight_by`` to a bag record."""
    weight = _to_float(bag.get("weight"))
    max_weight = _to_float(bag.get("max_weight"))
    overweight = weight is not None and max_weight is not None and weight > max_weight

    return {
        **bag,
        "status_key": _status_key(bag.get("status"), "pending"),
        "is_overweight": overweight,
        "overweight_by": round(weight - max_weight, 1) if overweight else None,
    }


def summarize_baggage(baggages: List[Dict[str, Any]]) -> Dict[str, Any]:
    annotated = [annotate_baggage(bag) for bag in baggages]
    return {
        "total": len(annotated),
        "loaded_count": sum(1 for bag in annotated if bag["status_key"] == "loaded"),
        "overweight_count": sum(1 for bag in annotated if bag["is_overweight"]),
        "total_weight": round(sum(_to_float(bag.get("weight")) or 0.0 for bag in annotated), 2),
    }


def annotate_passenger(passenger: Dict[str, Any]) -> Dict[str, Any]:
    return {
        **passenger,
        "status_key": _status_key(passenger.get("passenger_status"), "checked-in"),
    }


def summarize_passengers(passengers: List[Dict[str, Any]]) -> Dict[str, Any]:
    # Counts use the raw status; a passenger with no status is not counted as checked in
    statuses = [str(p.get("passenger_status") or "").lower() for p in passengers]
    # repr keeps unhashable upstream values (objects, lists) countable
    destinations = {repr(p.get("destination_code")) for p in passengers}

    return {
        "total": len(passengers),
        "checked_in_count": statuses.count("checked-in"),
        "cancelled_count": statuses.count("cancelled"),
        "destination_count": len(destinations),
    }
