"""
Person directory: creation, rename and lookup of people by unique name.

Names are matched exactly (case-sensitive). Read paths return None for an
unknown name; only mutating paths treat absence as an error.
"""
from typing import List, Optional, Tuple
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.audit import AuditService
from app.core.errors import (
    ConflictError,
    DutyTrackerError,
    InternalError,
    NotFoundError,
    require_text,
)
from app.db.crud import person_crud
from app.models.astronaut_detail import AstronautDetail
from app.models.person import Person


logger = logging.getLogger(__name__)


class PersonDirectory:
    """Mapping of unique person name to person identity."""

    def __init__(self, db: Session, audit: Optional[AuditService] = None):
        self.db = db
        self.audit = audit or AuditService(db)

    def find_by_name(self, name: str) -> Optional[Person]:
        """Return the person with this exact name, or None."""
        if name is None:
            return None
        return person_crud.get_by_name(self.db, name)

    def list_people(self) -> List[Tuple[Person, Optional[AstronautDetail]]]:
        """All people with their astronaut detail (None if never assigned)."""
        return person_crud.list_with_details(self.db)

    def create(self, name: str) -> Person:
        """
        Create a person.

        Args:
            name: Unique, non-blank name

        Returns:
            The new Person

        Raises:
            ValidationError: If name is blank
            ConflictError: If the name is taken
            InternalError: On storage failure
        """
        try:
            require_text(name, "Person name")
            if person_crud.get_by_name(self.db, name) is not None:
                raise ConflictError(f"Person with name '{name}' already exists.")

            person = person_crud.add(self.db, Person(name=name))
            self.db.commit()
        except DutyTrackerError as e:
            self.db.rollback()
            self.audit.record_failure("CREATE_PERSON", "Person", name, e)
            raise
        except IntegrityError as e:
            self.db.rollback()
            conflict = ConflictError(f"Person with name '{name}' already exists.")
            self.audit.record_failure("CREATE_PERSON", "Person", name, conflict)
            raise conflict from e
        except SQLAlchemyError as e:
            self.db.rollback()
            self.audit.record_failure("CREATE_PERSON", "Person", name, e)
            raise InternalError(f"Failed to create person: {e}") from e
        except Exception as e:
            self.db.rollback()
            logger.error(f"Unexpected error creating '{name}': {e}")
            self.audit.record_failure("CREATE_PERSON", "Person", name, e)
            raise InternalError(f"Failed to create person: {e}") from e

        logger.info(f"Created person {person.id} '{name}'")
        self.audit.record_success(
            "CREATE_PERSON", "Person", person.id, f"Created person: {name}"
        )
        return person

    def rename(self, current_name: str, new_name: str) -> Person:
        """
        Rename a person in place; the ID is unchanged.

        Raises:
            ValidationError: If either name is blank
            NotFoundError: If no person has current_name
            ConflictError: If new_name belongs to another person
            InternalError: On storage failure
        """
        try:
            require_text(current_name, "Person name")
            require_text(new_name, "New name")

            person = person_crud.get_by_name(self.db, current_name, for_update=True)
            if person is None:
                raise NotFoundError(f"Person with name '{current_name}' not found.")

            if new_name != current_name:
                if person_crud.get_by_name(self.db, new_name) is not None:
                    raise ConflictError(f"Person with name '{new_name}' already exists.")
                person.name = new_name
                self.db.flush()
            self.db.commit()
        except DutyTrackerError as e:
            self.db.rollback()
            self.audit.record_failure("UPDATE_PERSON", "Person", current_name, e)
            raise
        except IntegrityError as e:
            self.db.rollback()
            conflict = ConflictError(f"Person with name '{new_name}' already exists.")
            self.audit.record_failure("UPDATE_PERSON", "Person", current_name, conflict)
            raise conflict from e
        except SQLAlchemyError as e:
            self.db.rollback()
            self.audit.record_failure("UPDATE_PERSON", "Person", current_name, e)
            raise InternalError(f"Failed to update person: {e}") from e
        except Exception as e:
            self.db.rollback()
            logger.error(f"Unexpected error renaming '{current_name}': {e}")
            self.audit.record_failure("UPDATE_PERSON", "Person", current_name, e)
            raise InternalError(f"Failed to update person: {e}") from e

        logger.info(f"Renamed person {person.id} '{current_name}' -> '{new_name}'")
        self.audit.record_success(
            "UPDATE_PERSON", "Person", person.id,
            f"Renamed person: {current_name} -> {new_name}"
        )
        return person
