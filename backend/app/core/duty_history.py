"""
Read-only queries over the duty history.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.db.crud import astronaut_detail_crud, astronaut_duty_crud, person_crud
from app.models.astronaut_detail import AstronautDetail
from app.models.astronaut_duty import AstronautDuty
from app.models.person import Person


@dataclass
class PersonDuties:
    """A person, their career summary and their duties (newest first)."""
    person: Person
    detail: Optional[AstronautDetail]
    duties: List[AstronautDuty] = field(default_factory=list)


class DutyHistory:
    """Query surface for duty history."""

    def __init__(self, db: Session):
        self.db = db

    def list_duties(self, person_id: int) -> List[AstronautDuty]:
        """All duties of a person ordered by start date, most recent first."""
        return astronaut_duty_crud.list_for_person(self.db, person_id)

    def get_open_duty(self, person_id: int) -> Optional[AstronautDuty]:
        """The current (open-ended) duty of a person, if any."""
        return astronaut_duty_crud.get_open_for_person(self.db, person_id)

    def get_duties_by_name(self, name: str) -> PersonDuties:
        """
        Look up a person by name with their career summary and duty history.

        Raises:
            NotFoundError: If no person has this name
        """
        person = person_crud.get_by_name(self.db, name)
        if person is None:
            raise NotFoundError(f"Person with name '{name}' not found.")
        return PersonDuties(
            person=person,
            detail=astronaut_detail_crud.get_by_person(self.db, person.id),
            duties=self.list_duties(person.id),
        )
