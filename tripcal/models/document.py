"""Input document models - trips and their segments as supplied by storage."""

from typing import Any

from pydantic import Field

from tripcal.models.common import CamelModel, JsonValue, SegmentStatus


class Budget(CamelModel):
    """Trip budget."""

    total: float = 0
    currency: str = "USD"


class ShelterPayload(CamelModel):
    """Structured lodging details attached to a stay segment."""

    name: str | None = None
    address: str | None = None
    type: str | None = None
    notes: str | None = None
    host: str | None = None
    check_in: str | None = None
    check_out: str | None = None
    coordinates: JsonValue = None


class ActivityPayload(CamelModel):
    """One sub-item of an activity segment's `activities[]` list."""

    name: str = ""
    location: str | None = None
    time_start: str | None = None
    time_end: str | None = None
    notes: str | None = None
    category: str | None = None
    icon: str | None = None
    priority: JsonValue = None
    estimated_cost: float | None = None
    currency: str | None = None
    coordinates: JsonValue = None


class Segment(CamelModel):
    """Atomic planned unit: a flight, stay, meal, activity, layover or buffer.

    `date` and `date_end` are kept as raw strings; an unparseable or reversed
    span projects to no days instead of failing validation.
    """

    id: str | None = None
    type: str = ""
    date: str = ""
    date_end: str | None = None
    status: str | None = None
    time_start: str | None = None
    time_end: str | None = None
    duration: str | None = None
    location: str | None = None
    route: str | None = None
    details: str | None = None
    note: str | None = None
    estimated_cost: float | None = None
    currency: str | None = None

    # Timezone labels
    tz: str | None = None
    tz_from: str | None = None
    tz_label: str | None = None

    # Type-specific payloads
    shelter: ShelterPayload | None = None
    activities: list[ActivityPayload] | None = None

    # Flight fields
    airline: str | None = None
    flight: str | None = None
    aircraft: str | None = None
    cabin_class: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None

    @property
    def status_code(self) -> SegmentStatus:
        """Normalized status."""
        return SegmentStatus.parse(self.status)


class Trip(CamelModel):
    """A named trip owning an ordered list of segments."""

    name: str = ""
    region: str | None = None
    segments: list[Segment] = Field(default_factory=list)


class ItineraryDocument(CamelModel):
    """Complete itinerary document."""

    trip_name: str | None = None
    budget: Budget | None = None
    travelers: list[Any] = Field(default_factory=list)
    trips: list[Trip]
