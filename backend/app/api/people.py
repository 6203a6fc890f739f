"""
Person directory endpoints.

Provides endpoints for:
- Listing people with their career summary
- Looking up a person by name
- Creating a person
- Renaming a person
"""
from fastapi import APIRouter, HTTPException, status, Depends
from sqlalchemy.orm import Session
import logging

from app.api.errors import to_http_exception
from app.core.errors import DutyTrackerError
from app.core.person_directory import PersonDirectory
from app.db.crud import astronaut_detail_crud
from app.db.database import get_db
from app.schemas.person import (
    PersonCreate,
    PersonUpdate,
    PersonAstronaut,
    PersonListResponse,
    MutationResponse
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/people", tags=["people"])


@router.get("", response_model=PersonListResponse)
async def get_people(db: Session = Depends(get_db)):
    """Get all people with their astronaut detail."""
    try:
        rows = PersonDirectory(db).list_people()
        people = [PersonAstronaut.from_models(person, detail) for person, detail in rows]
        return PersonListResponse(people=people, total=len(people))
    except Exception as e:
        logger.error(f"Error fetching people: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch people: {str(e)}"
        )


@router.get("/{name}", response_model=PersonAstronaut)
async def get_person_by_name(name: str, db: Session = Depends(get_db)):
    """Get a person by exact name."""
    person = PersonDirectory(db).find_by_name(name)
    if not person:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Person '{name}' not found"
        )
    detail = astronaut_detail_crud.get_by_person(db, person.id)
    return PersonAstronaut.from_models(person, detail)


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def create_person(request: PersonCreate, db: Session = Depends(get_db)):
    """Create a new person."""
    try:
        person = PersonDirectory(db).create(request.name)
        return MutationResponse(
            id=person.id,
            message=f"Person '{person.name}' created successfully."
        )
    except DutyTrackerError as e:
        raise to_http_exception(e)


@router.put("/{name}", response_model=MutationResponse)
async def update_person(name: str, request: PersonUpdate, db: Session = Depends(get_db)):
    """Rename an existing person."""
    try:
        person = PersonDirectory(db).rename(name, request.new_name)
        return MutationResponse(
            id=person.id,
            message=f"Person '{name}' updated to '{request.new_name}' successfully."
        )
    except DutyTrackerError as e:
        raise to_http_exception(e)
