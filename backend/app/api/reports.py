"""
Roster report and audit trail endpoints.
"""
from fastapi import APIRouter, HTTPException, status, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.api.errors import to_http_exception
from app.config import get_settings
from app.core.audit import AuditService
from app.core.errors import DutyTrackerError
from app.core.reports import build_roster, summarize_roster, roster_to_csv
from app.db.database import get_db
from app.schemas.report import (
    RosterEntryResponse,
    RosterResponse,
    RosterSummaryResponse,
    AuditLogResponse
)


logger = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])


@router.get("/reports/summary", response_model=RosterSummaryResponse)
async def get_roster_summary(db: Session = Depends(get_db)):
    """Get roster-wide statistics."""
    try:
        return summarize_roster(db).to_dict()
    except Exception as e:
        logger.error(f"Error computing roster summary: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compute summary: {str(e)}"
        )


@router.get("/reports/roster", response_model=RosterResponse)
async def get_roster(status_filter: str = "all", db: Session = Depends(get_db)):
    """Get the roster filtered by career status (all, active, retired, unassigned)."""
    try:
        entries = build_roster(db, status_filter)
    except DutyTrackerError as e:
        raise to_http_exception(e)

    return RosterResponse(
        status_filter=status_filter,
        entries=[RosterEntryResponse.model_validate(entry) for entry in entries]
    )


@router.get("/reports/roster.csv")
async def export_roster_csv(status_filter: str = "all", db: Session = Depends(get_db)):
    """Export the roster as a CSV file."""
    try:
        entries = build_roster(db, status_filter)
    except DutyTrackerError as e:
        raise to_http_exception(e)

    return Response(
        content=roster_to_csv(entries),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=stargate-roster.csv"}
    )


@router.get("/audit", response_model=List[AuditLogResponse])
async def get_audit_log(
    limit: Optional[int] = None,
    level: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Get the most recent audit trail entries."""
    limit = limit or get_settings().audit_page_size
    return AuditService(db).recent(limit=limit, level=level)
