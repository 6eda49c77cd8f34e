"""Common types and enums shared across all models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# JSON-serializable value types for free-form payload fields
JsonValue = str | int | float | bool | None | dict[str, Any] | list[Any]


class CamelModel(BaseModel):
    """Base model that reads and writes the document's camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SegmentStatus(str, Enum):
    """Booking status of a segment."""

    BOOKED = "BOOKED"
    PLANNED = "PLANNED"
    PLANNED_WARN = "PLANNED_WARN"
    BUFFER = "BUFFER"
    TO_BOOK = "TO_BOOK"
    WEEKEND_SKI = "WEEKEND_SKI"
    OPTIONAL = "OPTIONAL"
    IF_CONDITIONAL = "IF_CONDITIONAL"
    UNSET = "UNSET"

    @classmethod
    def parse(cls, raw: str | None) -> "SegmentStatus":
        """Map a raw status string to the vocabulary; anything else is UNSET."""
        if not raw:
            return cls.UNSET
        try:
            return cls(raw)
        except ValueError:
            return cls.UNSET


class SegmentCategory(str, Enum):
    """Dispatch category of a segment, derived from its open `type` string."""

    TRAVEL = "travel"
    SHELTER = "shelter"
    MEAL = "meal"
    ACTIVITY = "activity"
    LAYOVER = "layover"
    GENERIC = "generic"

    @classmethod
    def from_type(cls, raw_type: str | None) -> "SegmentCategory":
        """Classify a segment type, case-insensitively.

        Unrecognized types fall through to GENERIC rather than being rejected.
        """
        return _TYPE_CATEGORIES.get(normalize_type(raw_type), cls.GENERIC)


def normalize_type(raw_type: str | None) -> str:
    """Lowercase, trimmed segment type."""
    return (raw_type or "").strip().lower()


_TYPE_CATEGORIES: dict[str, SegmentCategory] = {
    "flight": SegmentCategory.TRAVEL,
    "travel": SegmentCategory.TRAVEL,
    "transit": SegmentCategory.TRAVEL,
    "bus": SegmentCategory.TRAVEL,
    "airport": SegmentCategory.TRAVEL,
    "stay": SegmentCategory.SHELTER,
    "check-in": SegmentCategory.SHELTER,
    "meal": SegmentCategory.MEAL,
    "activity": SegmentCategory.ACTIVITY,
    "explore": SegmentCategory.ACTIVITY,
    "prep": SegmentCategory.ACTIVITY,
    "ski setup": SegmentCategory.ACTIVITY,
    "activities": SegmentCategory.ACTIVITY,
    "layover": SegmentCategory.LAYOVER,
}


class BudgetHealth(str, Enum):
    """Coarse budget state for display."""

    ON_TRACK = "on_track"
    NEAR_LIMIT = "near_limit"
    OVER_BUDGET = "over_budget"
