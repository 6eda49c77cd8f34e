"""Tests for read-only view helpers over projected days."""

from datetime import date
from typing import Any

from tripcal.models import ActivityItem, ItineraryDocument
from tripcal.projection.projector import project
from tripcal.views.helpers import (
    document_digest,
    filter_days,
    find_today,
    is_manual_activity_id,
    merge_day_activities,
    segments_by_type,
    trip_date_range_display,
    trip_meta,
)


def test_is_manual_activity_id() -> None:
    """Test the user-added id prefix check."""
    assert is_manual_activity_id("manual-1700000000")
    assert not is_manual_activity_id("explore-1-Skytree")
    assert not is_manual_activity_id(None)
    assert not is_manual_activity_id("")


def test_merge_day_activities(sample_document: dict[str, Any]) -> None:
    """Test soft-deletes are dropped and user additions appended."""
    day = {d.date_key: d for d in project(sample_document)}["2026-02-02"]
    extra = ActivityItem(id="manual-1", name="Karaoke")

    merged = merge_day_activities(day, [extra], ["explore-1-Senso-ji"])

    assert [a.name for a in merged] == ["Skytree", "Karaoke"]
    # Day entry is left alone
    assert [a.name for a in day.activities] == ["Senso-ji", "Skytree"]


def test_filter_days(sample_document: dict[str, Any]) -> None:
    """Test case-insensitive search over display date, summary and timezone."""
    days = project(sample_document)

    # 2026-02-04 was opened by the Tokyo stay's checkout, so it keeps that summary
    assert [d.date_key for d in filter_days(days, "myoko")] == ["2026-02-05", "2026-02-06"]
    assert [d.date_key for d in filter_days(days, "asia/tokyo")] == ["2026-02-02", "2026-02-03", "2026-02-04"]
    assert [d.date_key for d in filter_days(days, "Jan 31")] == ["2026-01-31"]
    assert len(filter_days(days, "  ")) == len(days)
    assert filter_days(days, "lisbon") == []


def test_trip_date_range_display(sample_document: dict[str, Any]) -> None:
    """Test the first-to-last date label."""
    days = project(sample_document)

    assert trip_date_range_display(days) == "Jan 30, 2026 – Feb 6, 2026"
    assert trip_date_range_display([]) == ""


def test_segments_by_type(sample_document: dict[str, Any]) -> None:
    """Test per-section lookup on a day."""
    day = {d.date_key: d for d in project(sample_document)}["2026-02-01"]

    assert len(segments_by_type(day, "travel")) == 1
    assert segments_by_type(day, "Shelter")[0].name == "Hotel Gracery"
    assert len(segments_by_type(day, "meals")) == 1
    assert segments_by_type(day, "activities") == []
    assert segments_by_type(day, "unknown") == []


def test_find_today(sample_document: dict[str, Any]) -> None:
    """Test locating the caller's date in the calendar."""
    days = project(sample_document)

    assert find_today(days, date(2026, 2, 3)) == "2026-02-03"
    assert find_today(days, "2026-02-06") == "2026-02-06"
    assert find_today(days, "2026-03-01") is None


def test_trip_meta_defaults() -> None:
    """Test defaults for a document without name or budget."""
    meta = trip_meta(ItineraryDocument.model_validate({"trips": []}))

    assert meta.trip_name == "Travel Itinerary"
    assert meta.budget.total == 0
    assert meta.budget.currency == "USD"
    assert meta.travelers == []


def test_trip_meta_from_document(sample_document: dict[str, Any]) -> None:
    """Test values present on the document are kept."""
    meta = trip_meta(ItineraryDocument.model_validate(sample_document))

    assert meta.trip_name == "Winter in Japan"
    assert meta.budget.total == 5000
    assert meta.travelers == [{"name": "Sam"}]


def test_document_digest_stable_across_forms(sample_document: dict[str, Any]) -> None:
    """Test digest is key-order independent and changes with content."""
    reordered = dict(reversed(list(sample_document.items())))

    assert document_digest(sample_document) == document_digest(reordered)
    assert len(document_digest(sample_document)) == 64

    changed = {**sample_document, "tripName": "Another trip"}
    assert document_digest(changed) != document_digest(sample_document)
