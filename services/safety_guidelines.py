"""
NOTAM advisory classification.

Maps free-text NOTAM messages to a severity tier and a list of canned
recommendations for the safety-measures page, and to the badge shown on the
NOTAM list. Keyword sets are literal English phrases matched on the
lowercased message.
"""

from typing import Any, Dict, List

CRITICAL = "critical"
CAUTION = "caution"
NORMAL = "normal"

SUMMARY_LIMIT = 220

CRITICAL_KEYWORDS = ("severe", "thunderstorm", "not advised")
CAUTION_KEYWORDS = ("delay", "light rain", "scattered clouds")

# (keywords, tips) checked in order; a group applies if any keyword is present
RECOMMENDATION_RULES = (
    (
        ("thunderstorm",),
        (
            "Suspend ramp operations and secure ground equipment until lightning clears.",
            "Coordinate with ATC for reroutes or slot swaps due to convective weather.",
        ),
    ),
    (
        ("delay",),
        (
            "Provide updated ETAs to gate agents and passengers every 15 minutes.",
            "Re-sequence departures/arrivals to minimize taxi congestion.",
        ),
    ),
    (
        ("light rain",),
        ("Increase braking action advisories and ensure runway friction data is current.",),
    ),
    (
        ("clear sky", "few clouds"),
        ("Maintain standard visual separation and continue routine safety sweeps.",),
    ),
)

CLOSING_RECOMMENDATIONS = {
    CRITICAL: "Activate the airport emergency response checklist and keep ops supervisors on standby.",
    CAUTION: "Heighten monitoring cadence and keep maintenance crews on alert.",
    NORMAL: "Continue normal operations while monitoring NOTAM updates hourly.",
}

# NOTAM list badge; a narrower keyword set than the severity tiers
MARKER_CRITICAL_KEYWORDS = ("severe", "not advised")
MARKER_CAUTION_KEYWORDS = ("delay", "light rain")


def _contains_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def determine_severity(message: str) -> str:
    normalized = (message or "").lower()

    if _contains_any(normalized, CRITICAL_KEYWORDS):
        return CRITICAL
    if _contains_any(normalized, CAUTION_KEYWORDS):
        return CAUTION
    return NORMAL


def recommendations_from_message(message: str, severity: str) -> List[str]:
    normalized = (message or "").lower()
    tips: List[str] = []

    for keywords, group in RECOMMENDATION_RULES:
        if _contains_any(normalized, keywords):
            tips.extend(group)

    tips.append(CLOSING_RECOMMENDATIONS.get(severity, CLOSING_RECOMMENDATIONS[NORMAL]))

    # dict preserves first-seen order
    return list(dict.fromkeys(tips))


def summarize(message: str, limit: int = SUMMARY_LIMIT) -> str:
    """Truncate to ``limit`` characters, marking the cut with an ellipsis."""
    if len(message) <= limit:
        return message
    return message[:limit].rstrip() + "..."


def build_safety_guideline(notam: Dict[str, Any]) -> Dict[str, Any]:
    message = notam.get("message")
    message = "" if message is None else str(message)
    severity = determine_severity(message)

    airport_id = notam.get("airport_id")
    city = notam.get("city")

    return {
        "airport_id": "N/A" if airport_id is None else str(airport_id),
        "city": "Unknown" if city is None else str(city),
        "severity": severity,
        "summary": summarize(message),
        "recommendations": recommendations_from_message(message, severity),
    }


def build_safety_guidelines(notams: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [build_safety_guideline(notam) for notam in notams]


def notam_marker(message: str) -> str:
    """Badge label for the NOTAM list: Critical, Caution or Advisory."""
    normalized = (message or "").lower()

    if _contains_any(normalized, MARKER_CRITICAL_KEYWORDS):
        return "Critical"
    if _contains_any(normalized, MARKER_CAUTION_KEYWORDS):
        return "Caution"
    return "Advisory"
