"""
Astronaut duty endpoints.

Provides endpoints for:
- Reading a person's duty history
- Assigning a new duty
"""
from fastapi import APIRouter, status, Depends
from sqlalchemy.orm import Session
import logging

from app.api.errors import to_http_exception
from app.core.duty_assignment import DutyAssignmentService
from app.core.duty_history import DutyHistory
from app.core.errors import DutyTrackerError
from app.db.database import get_db
from app.schemas.person import PersonAstronaut, MutationResponse
from app.schemas.duty import (
    AstronautDutyCreate,
    AstronautDutyResponse,
    AstronautDutiesResponse
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/duties", tags=["duties"])


@router.get("/{name}", response_model=AstronautDutiesResponse)
async def get_astronaut_duties_by_name(name: str, db: Session = Depends(get_db)):
    """Get a person's career summary and duties, most recent first."""
    try:
        result = DutyHistory(db).get_duties_by_name(name)
    except DutyTrackerError as e:
        raise to_http_exception(e)

    return AstronautDutiesResponse(
        person=PersonAstronaut.from_models(result.person, result.detail),
        astronaut_duties=[
            AstronautDutyResponse.model_validate(duty) for duty in result.duties
        ]
    )


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def create_astronaut_duty(request: AstronautDutyCreate, db: Session = Depends(get_db)):
    """Assign a new duty to a person, closing their current one."""
    try:
        duty_id = DutyAssignmentService(db).assign_duty(
            name=request.name,
            rank=request.rank,
            duty_title=request.duty_title,
            duty_start_date=request.duty_start_date,
            status=request.duty_status
        )
    except DutyTrackerError as e:
        raise to_http_exception(e)

    return MutationResponse(
        id=duty_id,
        message=f"Duty '{request.duty_title}' assigned to '{request.name}' successfully."
    )
