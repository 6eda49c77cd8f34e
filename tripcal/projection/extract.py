"""Field extraction from free-text segment data."""

import re

from tripcal.models.document import Segment

_FLIGHT_CODE_RE = re.compile(r"([A-Z]{2})(\d+)")
_ADDRESS_RE = re.compile(r"—\s*(.+?)(?:\s*—|$)")
_LOCATION_CODE_RE = re.compile(r"\b([A-Z]{3})\b")

# City name (substring match) -> flag label
CITY_FLAGS: dict[str, str] = {
    "Tokyo": "🇯🇵 Tokyo",
    "Joetsu": "⛷️ Joetsu",
    "Myoko": "⛷️ Myoko",
    "Manila": "🇵🇭 Manila",
    "Bacolod": "🇵🇭 Bacolod",
    "San Francisco": "🇺🇸 San Francisco",
    "Denver": "🇺🇸 Denver",
    "Miami": "🇺🇸 Miami",
}


def airline_code(details: str | None) -> str | None:
    """Two-letter carrier code from text like `PR103 Manila`."""
    if not details:
        return None
    match = _FLIGHT_CODE_RE.search(details)
    return match.group(1) if match else None


def flight_number(details: str | None) -> str | None:
    """Full flight number from text like `PR103 Manila`."""
    if not details:
        return None
    match = _FLIGHT_CODE_RE.search(details)
    return match.group(0) if match else None


def address_from_details(details: str | None) -> str | None:
    """Address written after an em-dash, e.g. `Hotel X — 1 Main St`."""
    if not details:
        return None
    match = _ADDRESS_RE.search(details)
    return match.group(1).strip() if match else None


def segment_location(segment: Segment) -> str | None:
    """Segment location, else the destination half of its `A → B` route."""
    if segment.location:
        return segment.location
    if segment.route:
        parts = segment.route.split("→")
        if len(parts) > 1:
            return parts[1].strip() or None
    return None


def location_flag(location: str | None) -> str | None:
    """Flag key for a location.

    A standalone three-letter code wins, then the city table, then the raw string.
    """
    if not location:
        return None

    code_match = _LOCATION_CODE_RE.search(location)
    if code_match:
        return code_match.group(1)

    for city, flag in CITY_FLAGS.items():
        if city in location:
            return flag

    return location
