"""Models package - re-exports for convenience."""

from tripcal.models.budget import BudgetSummary
from tripcal.models.common import (
    BudgetHealth,
    CamelModel,
    JsonValue,
    SegmentCategory,
    SegmentStatus,
)
from tripcal.models.day import (
    ActivityItem,
    BackupOption,
    BackupPlan,
    DayEntry,
    DayMetadata,
    InFlightDetails,
    MealItem,
    ShelterInfo,
    TravelItem,
)
from tripcal.models.document import (
    ActivityPayload,
    Budget,
    ItineraryDocument,
    Segment,
    ShelterPayload,
    Trip,
)

__all__ = [
    # Common
    "CamelModel",
    "JsonValue",
    "SegmentStatus",
    "SegmentCategory",
    "BudgetHealth",
    # Document
    "ItineraryDocument",
    "Trip",
    "Segment",
    "Budget",
    "ShelterPayload",
    "ActivityPayload",
    # Day
    "DayEntry",
    "DayMetadata",
    "TravelItem",
    "ShelterInfo",
    "MealItem",
    "ActivityItem",
    "InFlightDetails",
    "BackupPlan",
    "BackupOption",
    # Budget
    "BudgetSummary",
]
