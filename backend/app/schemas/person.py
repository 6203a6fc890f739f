"""
Pydantic schemas for Person and its astronaut detail.
"""
from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional

from app.models.astronaut_duty import DutyStatus


class PersonCreate(BaseModel):
    """Schema for creating a person."""
    name: str = Field(..., description="Unique person name")


class PersonUpdate(BaseModel):
    """Schema for renaming a person."""
    new_name: str = Field(..., description="New unique person name")


class PersonAstronaut(BaseModel):
    """A person joined with their astronaut detail (if any)."""
    person_id: int
    name: str
    current_rank: Optional[str] = None
    current_duty_title: Optional[str] = None
    current_duty_status: Optional[DutyStatus] = None
    career_start_date: Optional[date] = None
    career_end_date: Optional[date] = None

    @classmethod
    def from_models(cls, person, detail=None) -> "PersonAstronaut":
        if detail is None:
            return cls(person_id=person.id, name=person.name)
        return cls(
            person_id=person.id,
            name=person.name,
            current_rank=detail.current_rank,
            current_duty_title=detail.current_duty_title,
            current_duty_status=detail.current_duty_status,
            career_start_date=detail.career_start_date,
            career_end_date=detail.career_end_date,
        )


class PersonListResponse(BaseModel):
    """Schema for the people listing."""
    people: List[PersonAstronaut]
    total: int


class MutationResponse(BaseModel):
    """Schema returned by create/update operations."""
    id: int
    message: str
