"""
Pydantic schemas for astronaut duties.
"""
from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import List, Optional

from app.models.astronaut_duty import DutyStatus
from app.schemas.person import PersonAstronaut


class AstronautDutyCreate(BaseModel):
    """Schema for assigning a duty."""
    name: str = Field(..., description="Name of an existing person")
    rank: str = Field(..., description="Rank held during the duty")
    duty_title: str = Field(..., description="Duty title, free text")
    duty_start_date: date = Field(..., description="First day of the duty")
    duty_status: Optional[DutyStatus] = Field(
        None, description="ACTIVE or RETIRED; derived from the title when omitted"
    )

    @field_validator("duty_start_date", mode="before")
    @classmethod
    def truncate_to_date(cls, value):
        """Accept full timestamps and keep only the date part."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and ("T" in value or " " in value.strip()):
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
        return value


class AstronautDutyResponse(BaseModel):
    """Schema for a duty history entry."""
    id: int
    person_id: int
    rank: str
    duty_title: str
    duty_status: DutyStatus
    duty_start_date: date
    duty_end_date: Optional[date] = None

    class Config:
        from_attributes = True


class AstronautDutiesResponse(BaseModel):
    """A person with their duty history, most recent first."""
    person: PersonAstronaut
    astronaut_duties: List[AstronautDutyResponse]
