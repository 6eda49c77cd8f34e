"""Segment projector: itinerary document → day-indexed calendar.

One pass walks every segment of every trip in source order, expands the
segment's date span, and for each date applies exactly one dispatch rule
(by category) plus the day-metadata aggregation rules.

Field ownership on a day under construction:
    timezone, tz, location, region, summary, shelter  write-once (first segment wins;
                                                      a nameless shelter does not count)
    travel, meals, activities                         append-only
    metadata counters and flags                       accumulate on every contribution
"""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from pydantic import ValidationError

from tripcal.config import get_settings
from tripcal.models.common import SegmentCategory, SegmentStatus, normalize_type
from tripcal.models.day import (
    ActivityItem,
    DayEntry,
    DayMetadata,
    InFlightDetails,
    MealItem,
    ShelterInfo,
    TravelItem,
)
from tripcal.models.document import ItineraryDocument, Segment, Trip
from tripcal.projection.backup import generate_backup_plan
from tripcal.projection.dates import expand_range, format_date_display, format_time_range
from tripcal.projection.extract import (
    address_from_details,
    airline_code,
    flight_number,
    location_flag,
    segment_location,
)
from tripcal.utils.logging import StructuredPassLogger

logger = logging.getLogger(__name__)

DATELINE_NOTE = "Crossing International Date Line"


class InvalidDocumentError(ValueError):
    """Input is not an itinerary document at all."""


@dataclass(frozen=True)
class SpanPosition:
    """Where a date sits inside a segment's span."""

    index: int
    length: int

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.length - 1

    @property
    def is_multi_day(self) -> bool:
        return self.length > 1


@dataclass
class _DayBuilder:
    """Working state for one date during a single projection pass."""

    date_key: str
    summary: str
    region: str | None = None
    timezone: str | None = None
    tz: str | None = None
    location: str | None = None
    shelter: ShelterInfo | None = None
    travel: list[TravelItem] = field(default_factory=list)
    meals: list[MealItem] = field(default_factory=list)
    activities: list[ActivityItem] = field(default_factory=list)
    is_in_flight: bool = False
    in_flight_details: InFlightDetails | None = None
    has_travel: bool = False
    location_flags: list[str] = field(default_factory=list)
    estimated_cost: float = 0.0
    currencies: dict[str, None] = field(default_factory=dict)  # insertion-ordered set
    unbooked_count: int = 0

    def claim_context(self, segment: Segment) -> None:
        """Fill the write-once context fields this segment can supply."""
        if self.timezone is None:
            self.timezone = segment.tz_label or segment.tz_from or segment.tz
        if self.tz is None:
            self.tz = segment.tz
        if self.location is None:
            self.location = segment_location(segment)

    def build(self, today_key: str | None, default_timezone: str) -> DayEntry:
        return DayEntry(
            date_key=self.date_key,
            date_display=format_date_display(self.date_key),
            timezone=self.timezone or default_timezone,
            tz=self.tz,
            region=self.region,
            summary=self.summary,
            location=self.location,
            travel=self.travel,
            shelter=self.shelter,
            meals=self.meals,
            activities=self.activities,
            is_in_flight=self.is_in_flight,
            in_flight_details=self.in_flight_details,
            is_today=today_key == self.date_key,
            metadata=DayMetadata(
                has_travel=self.has_travel,
                location_flags=list(self.location_flags),
                estimated_cost=self.estimated_cost,
                cost_currencies=list(self.currencies),
                unbooted_count=self.unbooked_count,
                has_unbooked=self.unbooked_count > 0,
            ),
        )


def coerce_document(raw: ItineraryDocument | Mapping[str, Any]) -> ItineraryDocument:
    """Validate raw input at the boundary.

    Raises:
        InvalidDocumentError: If the input is not a mapping with a `trips` list,
            or the document does not validate
    """
    if isinstance(raw, ItineraryDocument):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidDocumentError(f"itinerary document must be an object, got {type(raw).__name__}")
    if not isinstance(raw.get("trips"), list):
        raise InvalidDocumentError("itinerary document has no 'trips' array")
    try:
        return ItineraryDocument.model_validate(raw)
    except ValidationError as e:
        raise InvalidDocumentError(f"itinerary document is malformed: {e.error_count()} error(s)") from e


def project(
    document: ItineraryDocument | Mapping[str, Any],
    *,
    today: date | str | None = None,
    limit: int | None = None,
) -> list[DayEntry]:
    """Project every trip segment onto the calendar days it touches.

    Args:
        document: Itinerary document (model or raw mapping)
        today: Caller-supplied current date; only used to set `is_today`
        limit: Span cap override; defaults to Settings.max_span_days

    Returns:
        One DayEntry per distinct date, sorted by date key

    Raises:
        InvalidDocumentError: If `document` is not an itinerary document
    """
    doc = coerce_document(document)
    settings = get_settings()
    started = time.perf_counter()

    days: dict[str, _DayBuilder] = {}
    segment_count = 0
    skipped = 0

    for trip in doc.trips:
        for segment in trip.segments:
            segment_count += 1
            date_keys = expand_range(segment.date, segment.date_end, limit=limit)
            if not date_keys:
                skipped += 1
                logger.debug(f"[project] segment {segment.id} has an empty span, skipping")
                continue
            _project_segment(days, trip, segment, date_keys)

    today_key = today.isoformat() if isinstance(today, date) else today
    entries = finalize(days, today_key, settings.default_timezone)

    StructuredPassLogger().log_pass(
        "project",
        inputs=segment_count,
        outputs=len(entries),
        skipped=skipped,
        latency_ms=(time.perf_counter() - started) * 1000,
        trips=len(doc.trips),
    )
    return entries


def finalize(days: dict[str, _DayBuilder], today_key: str | None, default_timezone: str) -> list[DayEntry]:
    """Freeze working days into entries sorted by date key."""
    return [days[key].build(today_key, default_timezone) for key in sorted(days)]


def _project_segment(days: dict[str, _DayBuilder], trip: Trip, segment: Segment, date_keys: list[str]) -> None:
    kind = normalize_type(segment.type)
    category = SegmentCategory.from_type(kind)

    for index, date_key in enumerate(date_keys):
        day = days.get(date_key)
        if day is None:
            day = _DayBuilder(date_key=date_key, summary=trip.name, region=trip.region)
            days[date_key] = day

        position = SpanPosition(index=index, length=len(date_keys))
        day.claim_context(segment)
        _aggregate(day, segment, category, position)
        _dispatch(day, segment, kind, category, position)


def _aggregate(day: _DayBuilder, segment: Segment, category: SegmentCategory, position: SpanPosition) -> None:
    """Update day metadata; independent of the dispatch rule's own first-date policy."""
    if category is SegmentCategory.TRAVEL:
        day.has_travel = True

    # Once per segment, on its first date
    if segment.status == SegmentStatus.TO_BOOK.value and position.is_first:
        day.unbooked_count += 1

    if segment.estimated_cost and position.is_first:
        day.estimated_cost += segment.estimated_cost
        if segment.currency:
            day.currencies[segment.currency] = None

    flag = location_flag(segment.location)
    if flag and flag not in day.location_flags:
        day.location_flags.append(flag)


def _dispatch(
    day: _DayBuilder,
    segment: Segment,
    kind: str,
    category: SegmentCategory,
    position: SpanPosition,
) -> None:
    if category is SegmentCategory.TRAVEL:
        _apply_travel(day, segment, kind, position)
    elif category is SegmentCategory.SHELTER:
        _apply_shelter(day, segment, position)
    elif not position.is_first:
        # Everything else occupies a single logical day
        return
    elif category is SegmentCategory.MEAL:
        day.meals.append(_meal_item(segment))
    elif category is SegmentCategory.ACTIVITY:
        day.activities.extend(_activity_items(segment))
    elif category is SegmentCategory.LAYOVER:
        day.activities.append(_segment_activity(segment, name=f"Layover: {segment.details}", type_="layover"))
    elif segment.details:
        day.activities.append(_segment_activity(segment))


def _apply_travel(day: _DayBuilder, segment: Segment, kind: str, position: SpanPosition) -> None:
    is_flight = kind == "flight"
    crosses_dateline = is_flight and position.is_multi_day

    if crosses_dateline and not position.is_first and not position.is_last:
        day.is_in_flight = True
        day.in_flight_details = InFlightDetails(
            route=segment.route,
            flight=segment.flight or segment.details,
            note=DATELINE_NOTE,
        )
        return

    is_arrival = crosses_dateline and position.is_last
    if not (position.is_first or is_arrival):
        return

    day.travel.append(
        _travel_item(
            segment,
            position,
            is_departure=position.is_first,
            is_arrival=is_arrival and not position.is_first,
            crosses_dateline=crosses_dateline,
            backup_plan=generate_backup_plan(segment) if is_flight and position.is_first else None,
        )
    )


def _apply_shelter(day: _DayBuilder, segment: Segment, position: SpanPosition) -> None:
    # The last date of an explicit span is checkout; leave it for the next stay
    if segment.date_end and position.is_last:
        return
    # A nameless shelter does not claim the night
    if day.shelter is not None and day.shelter.name:
        return

    stay_fields: dict[str, Any] = {
        "is_multi_day_stay": position.is_multi_day,
        "day_of_stay": position.index + 1,
        "total_stay_days": position.length - 1,
        "estimated_cost": segment.estimated_cost or None,
        "currency": segment.currency,
    }

    payload = segment.shelter
    if payload is not None:
        day.shelter = ShelterInfo(
            name=payload.name,
            address=payload.address,
            type=payload.type,
            notes=payload.notes,
            host=payload.host,
            check_in=(segment.time_start or payload.check_in) if position.is_first else None,
            check_out=payload.check_out,
            coordinates=payload.coordinates,
            **stay_fields,
        )
    else:
        day.shelter = ShelterInfo(
            name=segment.location or segment.details,
            address=address_from_details(segment.details),
            notes=segment.note,
            check_in=segment.time_start if position.is_first else None,
            **stay_fields,
        )


def _travel_item(segment: Segment, position: SpanPosition, **flags: Any) -> TravelItem:
    return TravelItem(
        id=segment.id,
        type=segment.type,
        route=segment.route,
        time=format_time_range(segment.time_start, segment.time_end),
        duration=segment.duration,
        status=segment.status_code,
        details=segment.details,
        name=segment.details,
        airline=segment.airline or airline_code(segment.details),
        flight=segment.flight or flight_number(segment.details),
        aircraft=segment.aircraft,
        cabin_class=segment.cabin_class,
        departure_airport=segment.departure_airport,
        arrival_airport=segment.arrival_airport,
        location=segment.location,
        estimated_cost=segment.estimated_cost or None,
        currency=segment.currency,
        is_multi_day=position.is_multi_day,
        day_of_span=position.index + 1,
        total_days=position.length,
        **flags,
    )


def _meal_item(segment: Segment) -> MealItem:
    return MealItem(
        id=segment.id,
        type=segment.details,
        location=segment.location,
        time=format_time_range(segment.time_start, segment.time_end),
        details=segment.details,
    )


def _activity_items(segment: Segment) -> list[ActivityItem]:
    """Expand structured sub-activities, or wrap the segment itself."""
    if segment.activities is None:
        return [_segment_activity(segment)]

    return [
        ActivityItem(
            id=f"{segment.id}-{sub.name}",
            name=sub.name,
            location=sub.location or segment.location,
            time=format_time_range(sub.time_start, sub.time_end),
            time_start=sub.time_start,
            time_end=sub.time_end,
            description=sub.notes or sub.name,
            type=sub.category or segment.type,
            icon=sub.icon,
            priority=sub.priority,
            category=sub.category,
            estimated_cost=sub.estimated_cost,
            currency=sub.currency,
            notes=sub.notes,
            coordinates=sub.coordinates,
        )
        for sub in segment.activities
    ]


def _segment_activity(segment: Segment, name: str | None = None, type_: str | None = None) -> ActivityItem:
    return ActivityItem(
        id=segment.id,
        name=name if name is not None else segment.details,
        location=segment.location,
        time=format_time_range(segment.time_start, segment.time_end),
        description=segment.details,
        type=type_ or segment.type,
        estimated_cost=segment.estimated_cost,
        currency=segment.currency,
    )
