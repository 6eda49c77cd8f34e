"""Backup plan generation for flights."""

from tripcal.models.common import SegmentStatus
from tripcal.models.day import BackupOption, BackupPlan
from tripcal.models.document import Segment

BACKUP_TRIGGER = "Flight delay (>2 hrs) or cancellation"

# Raw statuses that get a plan; PLANNED, PLANNED_WARN etc. do not
_PLANNABLE_STATUSES = {None, "", SegmentStatus.BOOKED.value, SegmentStatus.TO_BOOK.value}

# (priority, title, description, contact)
_OPTIONS: tuple[tuple[int, str, str, str], ...] = (
    (
        1,
        "Next available flight same route",
        "Rebook on next available flight to same destination",
        "Airline customer service / online rebooking",
    ),
    (
        2,
        "Alternate route via different hub",
        "Consider booking via alternate routing if available",
        "Airline customer service",
    ),
    (
        3,
        "Ground transportation alternative",
        "Use ground transport if delay < 24hrs and destination reachable",
        "Local transportation providers",
    ),
)


def generate_backup_plan(segment: Segment) -> BackupPlan | None:
    """Build the fixed three-option fallback plan for a flight segment.

    Args:
        segment: Flight segment

    Returns:
        BackupPlan when the status is absent, BOOKED or TO_BOOK; None otherwise
    """
    if segment.status not in _PLANNABLE_STATUSES:
        return None

    return BackupPlan(
        trigger=BACKUP_TRIGGER,
        options=[
            BackupOption(
                id=f"bp-{segment.id}-{priority}",
                priority=priority,
                title=title,
                description=description,
                status=SegmentStatus.TO_BOOK,
                contact=contact,
            )
            for priority, title, description, contact in _OPTIONS
        ],
    )
