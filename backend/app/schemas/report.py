"""
Pydantic schemas for roster reports and the audit trail.
"""
from pydantic import BaseModel
from datetime import date, datetime
from typing import List, Optional


class RosterEntryResponse(BaseModel):
    """Schema for one roster row."""
    person_id: int
    name: str
    status: str
    current_rank: Optional[str] = None
    current_duty_title: Optional[str] = None
    career_start_date: Optional[date] = None
    career_end_date: Optional[date] = None

    class Config:
        from_attributes = True


class RosterResponse(BaseModel):
    """Schema for the roster listing."""
    status_filter: str
    entries: List[RosterEntryResponse]


class RosterSummaryResponse(BaseModel):
    """Schema for roster summary statistics."""
    total_people: int
    active_astronauts: int
    retired_astronauts: int
    unassigned_people: int
    average_career_days: Optional[float] = None
    utilization_percentage: float = 0.0


class AuditLogResponse(BaseModel):
    """Schema for an audit trail entry."""
    id: int
    action: str
    entity_type: str
    entity_id: str
    details: str
    user_id: str
    timestamp: datetime
    level: str
    message: str

    class Config:
        from_attributes = True
