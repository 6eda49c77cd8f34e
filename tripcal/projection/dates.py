"""Calendar-day arithmetic and display formatting.

Dates are naive calendar days. Ranges are computed with `datetime.date`
ordinals, so no time of day or daylight-saving shift is ever involved.
"""

import logging
from datetime import date, datetime, timedelta

from tripcal.config import get_settings

logger = logging.getLogger(__name__)

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def parse_day(value: str | None) -> date | None:
    """Parse a strict `YYYY-MM-DD` string; None if absent or unparseable.

    Compact (`20260202`), week (`2026-W05-1`) and unpadded (`2026-2-2`)
    forms are rejected.
    """
    if not value:
        return None
    text = value.strip()
    try:
        parsed = datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None
    # strptime accepts single-digit month and day
    if parsed.isoformat() != text:
        return None
    return parsed


def expand_range(start: str | None, end: str | None = None, *, limit: int | None = None) -> list[str]:
    """List every date from start to end, inclusive, as ISO keys.

    Args:
        start: First date (YYYY-MM-DD)
        end: Last date; absent means a single-day range
        limit: Maximum number of dates; defaults to Settings.max_span_days

    Returns:
        Ordered ISO date keys. Empty when either bound is unparseable,
        when end precedes start, or when the span exceeds the limit.
    """
    if limit is None:
        limit = get_settings().max_span_days

    first = parse_day(start)
    last = parse_day(end) if end else first
    if first is None or last is None:
        logger.debug(f"[expand_range] unparseable span {start!r}..{end!r}")
        return []

    span = (last - first).days + 1
    if span <= 0:
        logger.debug(f"[expand_range] reversed span {start}..{end}")
        return []
    if span > limit:
        logger.warning(f"[expand_range] span {start}..{end} is {span} days, over the {limit}-day cap")
        return []

    return [(first + timedelta(days=offset)).isoformat() for offset in range(span)]


def format_date_display(date_key: str) -> str:
    """Render a date key as e.g. `Fri, Jan 30, 2026`."""
    day = parse_day(date_key)
    if day is None:
        return date_key
    return f"{_WEEKDAYS[day.weekday()]}, {_MONTHS[day.month - 1]} {day.day}, {day.year}"


def format_short_date(date_key: str) -> str:
    """Render a date key as e.g. `Jan 30, 2026`."""
    day = parse_day(date_key)
    if day is None:
        return date_key
    return f"{_MONTHS[day.month - 1]} {day.day}, {day.year}"


def format_time_range(start: str | None, end: str | None) -> str | None:
    """`start → end`, or just `start` when there is no distinct end."""
    if not start:
        return None
    if end and end != start:
        return f"{start} → {end}"
    return start
