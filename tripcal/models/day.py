"""Day entry models - the per-date calendar produced by the projector."""

from typing import Any

from pydantic import Field, SerializationInfo, field_serializer, field_validator

from tripcal.models.common import CamelModel, JsonValue, SegmentStatus


class BackupOption(CamelModel):
    """One fallback option of a flight backup plan."""

    id: str
    priority: int
    title: str
    description: str
    status: SegmentStatus = SegmentStatus.TO_BOOK
    contact: str


class BackupPlan(CamelModel):
    """Fixed fallback plan attached to a flight's departure entry."""

    trigger: str
    options: list[BackupOption]


class TravelItem(CamelModel):
    """Standardized view of a travel segment on its departure or arrival date."""

    id: str | None = None
    type: str = ""
    route: str | None = None
    time: str | None = None
    duration: str | None = None
    status: SegmentStatus = SegmentStatus.UNSET
    details: str | None = None
    name: str | None = None
    airline: str | None = None
    flight: str | None = None
    aircraft: str | None = None
    cabin_class: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    location: str | None = None
    estimated_cost: float | None = None
    currency: str | None = None
    is_multi_day: bool = False
    day_of_span: int = 1
    total_days: int = 1
    is_departure: bool = False
    is_arrival: bool = False
    crosses_dateline: bool = False
    backup_plan: BackupPlan | None = None


class ShelterInfo(CamelModel):
    """Where the traveler sleeps on a given night."""

    name: str | None = None
    address: str | None = None
    type: str | None = None
    notes: str | None = None
    host: str | None = None
    check_in: str | None = None
    check_out: str | None = None
    is_multi_day_stay: bool = False
    day_of_stay: int = 1
    total_stay_days: int = 0
    estimated_cost: float | None = None
    currency: str | None = None
    coordinates: JsonValue = None


class MealItem(CamelModel):
    """Meal on a day."""

    id: str | None = None
    type: str | None = None
    location: str | None = None
    time: str | None = None
    details: str | None = None


class ActivityItem(CamelModel):
    """Activity on a day; also the shape of user-added activities."""

    id: str | None = None
    name: str | None = None
    location: str | None = None
    time: str | None = None
    time_start: str | None = None
    time_end: str | None = None
    description: str | None = None
    type: str | None = None
    icon: str | None = None
    priority: JsonValue = None
    category: str | None = None
    estimated_cost: float | None = None
    currency: str | None = None
    notes: str | None = None
    coordinates: JsonValue = None


class InFlightDetails(CamelModel):
    """Marker for a date spent entirely in the air."""

    route: str | None = None
    flight: str | None = None
    note: str


class DayMetadata(CamelModel):
    """Derived aggregates for one day."""

    has_travel: bool = False
    location_flags: list[str] = Field(default_factory=list)
    estimated_cost: float = 0
    cost_currencies: list[str] = Field(default_factory=list)
    unbooted_count: int = 0
    has_unbooked: bool = False


class DayEntry(CamelModel):
    """All segment data touching one calendar date."""

    date_key: str
    date_display: str
    timezone: str
    tz: str | None = None
    region: str | None = None
    summary: str = ""
    location: str | None = None
    travel: list[TravelItem] = Field(default_factory=list)
    shelter: ShelterInfo | None = None
    meals: list[MealItem] = Field(default_factory=list)
    activities: list[ActivityItem] = Field(default_factory=list)
    is_in_flight: bool = False
    in_flight_details: InFlightDetails | None = None
    is_today: bool = False
    metadata: DayMetadata = Field(default_factory=DayMetadata)

    @field_validator("shelter", mode="before")
    @classmethod
    def empty_shelter_is_none(cls, v: Any) -> Any:
        """Accept the wire form `{}` for a night with no shelter."""
        if isinstance(v, dict) and not v:
            return None
        return v

    @field_serializer("shelter")
    def serialize_shelter(self, shelter: ShelterInfo | None, info: SerializationInfo) -> dict[str, Any]:
        """Write an empty shelter as `{}`."""
        if shelter is None:
            return {}
        return shelter.model_dump(mode=info.mode, by_alias=info.by_alias)
