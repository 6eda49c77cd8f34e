"""Calendar endpoints - POST /calendar/days, POST /calendar/budget."""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query
from pydantic import Field

from tripcal.budget.rollup import roll_up_budget
from tripcal.models.budget import BudgetSummary
from tripcal.models.common import CamelModel
from tripcal.models.day import ActivityItem, DayEntry
from tripcal.models.document import ItineraryDocument
from tripcal.projection.projector import InvalidDocumentError, project
from tripcal.views.helpers import document_digest, trip_date_range_display, trip_meta

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calendar", tags=["calendar"])


class CalendarResponse(CamelModel):
    """Response for POST /calendar/days."""

    trip_name: str
    date_range: str
    digest: str
    days: list[DayEntry]


class BudgetRequest(CamelModel):
    """Request body for POST /calendar/budget."""

    document: ItineraryDocument
    user_activities: dict[str, list[ActivityItem]] = Field(default_factory=dict)
    deleted_activities: dict[str, list[str]] = Field(default_factory=dict)


def _project_or_422(document: ItineraryDocument, today: date | None = None) -> list[DayEntry]:
    try:
        return project(document, today=today)
    except InvalidDocumentError as e:
        logger.warning(f"[calendar] rejected document: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/days", response_model=CalendarResponse)
async def calendar_days(
    document: ItineraryDocument,
    today: Annotated[date | None, Query(description="Caller's current date")] = None,
) -> CalendarResponse:
    """Project an itinerary document onto calendar days.

    Args:
        document: Itinerary document
        today: Optional current date used to flag the matching day

    Returns:
        Trip name, date range, content digest and sorted day entries
    """
    days = _project_or_422(document, today)
    logger.info(f"[POST /calendar/days] trips={len(document.trips)} days={len(days)}")

    return CalendarResponse(
        trip_name=trip_meta(document).trip_name,
        date_range=trip_date_range_display(days),
        digest=document_digest(document),
        days=days,
    )


@router.post("/budget", response_model=BudgetSummary)
async def calendar_budget(request: BudgetRequest) -> BudgetSummary:
    """Roll up trip spending against the document's budget.

    Args:
        request: Document plus user-added and soft-deleted activity overlays

    Returns:
        Budget summary
    """
    days = _project_or_422(request.document)
    summary = roll_up_budget(
        days,
        budget=trip_meta(request.document).budget,
        user_activities=request.user_activities,
        deleted_activity_ids=request.deleted_activities,
    )
    logger.info(f"[POST /calendar/budget] total={summary.total:.2f} {summary.currency}")
    return summary
