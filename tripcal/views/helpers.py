"""Read-only helpers for consumers of projected days."""

import hashlib
import json
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

from pydantic import BaseModel

from tripcal.budget.rollup import activity_identity
from tripcal.config import get_settings
from tripcal.models.day import ActivityItem, DayEntry
from tripcal.models.document import Budget, ItineraryDocument
from tripcal.projection.dates import format_short_date

MANUAL_ACTIVITY_ID_PREFIX = "manual-"


class TripMeta(BaseModel):
    """Document-level trip metadata with defaults applied."""

    trip_name: str
    budget: Budget
    travelers: list[Any]


def is_manual_activity_id(activity_id: str | None) -> bool:
    """True for ids of user-added activities."""
    return bool(activity_id) and activity_id.startswith(MANUAL_ACTIVITY_ID_PREFIX)


def merge_day_activities(
    day: DayEntry,
    user_activities: Sequence[ActivityItem] = (),
    deleted_ids: Sequence[str] = (),
) -> list[ActivityItem]:
    """Day's activities minus soft-deleted ones, followed by user-added ones.

    Returns a new list; the day entry is not modified.
    """
    kept = [a for a in day.activities if activity_identity(a, day.date_key) not in deleted_ids]
    return kept + list(user_activities)


def filter_days(days: Sequence[DayEntry], query: str) -> list[DayEntry]:
    """Days whose display date, summary or timezone contains the query."""
    if not query.strip():
        return list(days)

    needle = query.lower()
    return [
        day
        for day in days
        if needle in day.date_display.lower()
        or needle in day.summary.lower()
        or needle in day.timezone.lower()
    ]


def trip_date_range_display(days: Sequence[DayEntry]) -> str:
    """`Jan 15, 2024 – Jan 22, 2024` for a sorted list of days."""
    if not days:
        return ""
    return f"{format_short_date(days[0].date_key)} – {format_short_date(days[-1].date_key)}"


def segments_by_type(day: DayEntry, kind: str) -> list[Any]:
    """Items of one section of a day: travel, shelter, meals or activities."""
    section = kind.lower()
    if section == "travel":
        return list(day.travel)
    if section == "shelter":
        return [day.shelter] if day.shelter is not None else []
    if section == "meals":
        return list(day.meals)
    if section == "activities":
        return list(day.activities)
    return []


def find_today(days: Sequence[DayEntry], today: date | str) -> str | None:
    """Date key of the caller's today if it is in the calendar."""
    today_key = today.isoformat() if isinstance(today, date) else today
    for day in days:
        if day.date_key == today_key:
            return today_key
    return None


def trip_meta(document: ItineraryDocument) -> TripMeta:
    """Trip name, budget and travelers with defaults applied."""
    settings = get_settings()
    return TripMeta(
        trip_name=document.trip_name or settings.default_trip_name,
        budget=document.budget or Budget(total=0, currency=settings.default_currency),
        travelers=list(document.travelers),
    )


def document_digest(document: ItineraryDocument | Mapping[str, Any]) -> str:
    """Content hash of a document, usable as a memoization key."""
    if isinstance(document, ItineraryDocument):
        payload: Any = document.model_dump(mode="json", by_alias=True)
    else:
        payload = document
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
