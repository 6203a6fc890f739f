"""
Data access helpers for the duty tracker models.

The helpers only stage changes (add + flush); committing is left to the
service that owns the transaction.
"""
from typing import TypeVar, Generic, Type, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, func

from app.models.person import Person
from app.models.astronaut_detail import AstronautDetail
from app.models.astronaut_duty import AstronautDuty

ModelType = TypeVar("ModelType")


class CRUDBase(Generic[ModelType]):
    """Base data access operations shared by all models."""

    def __init__(self, model: Type[ModelType]):
        """
        Initialize CRUD object.

        Args:
            model: SQLAlchemy model class
        """
        self.model = model

    def get(self, db: Session, id: int) -> Optional[ModelType]:
        """
        Get a single record by ID.

        Args:
            db: Database session
            id: Record ID

        Returns:
            Model instance or None
        """
        return db.get(self.model, id)

    def add(self, db: Session, db_obj: ModelType) -> ModelType:
        """
        Stage a new record and flush it so its ID is assigned.

        Args:
            db: Database session
            db_obj: Transient model instance

        Returns:
            The same instance, now persistent within the transaction
        """
        db.add(db_obj)
        db.flush()
        return db_obj

    def count(self, db: Session) -> int:
        """Count total records."""
        return db.scalar(select(func.count()).select_from(self.model)) or 0


class CRUDPerson(CRUDBase[Person]):
    """Person lookups by exact-match name."""

    def get_by_name(
        self,
        db: Session,
        name: str,
        for_update: bool = False
    ) -> Optional[Person]:
        """
        Find a person by exact (case-sensitive) name.

        Args:
            db: Database session
            name: Person name
            for_update: Lock the row for the rest of the transaction

        Returns:
            Person or None
        """
        stmt = select(Person).where(Person.name == name)
        if for_update:
            stmt = stmt.with_for_update()
        return db.scalars(stmt).first()

    def list_with_details(self, db: Session) -> List[tuple]:
        """Return (person, detail-or-None) pairs ordered by name."""
        stmt = (
            select(Person, AstronautDetail)
            .outerjoin(AstronautDetail, AstronautDetail.person_id == Person.id)
            .order_by(Person.name)
        )
        return [(row[0], row[1]) for row in db.execute(stmt).all()]


class CRUDAstronautDetail(CRUDBase[AstronautDetail]):
    """Astronaut detail lookups."""

    def get_by_person(self, db: Session, person_id: int) -> Optional[AstronautDetail]:
        stmt = select(AstronautDetail).where(AstronautDetail.person_id == person_id)
        return db.scalars(stmt).first()


class CRUDAstronautDuty(CRUDBase[AstronautDuty]):
    """Duty history lookups."""

    def get_open_for_person(self, db: Session, person_id: int) -> Optional[AstronautDuty]:
        """
        Get the duty with no end date for a person.

        Args:
            db: Database session
            person_id: Owning person ID

        Returns:
            The current duty or None
        """
        stmt = select(AstronautDuty).where(
            AstronautDuty.person_id == person_id,
            AstronautDuty.duty_end_date.is_(None)
        )
        return db.scalars(stmt).first()

    def list_for_person(self, db: Session, person_id: int) -> List[AstronautDuty]:
        """All duties for a person, most recent start date first."""
        stmt = (
            select(AstronautDuty)
            .where(AstronautDuty.person_id == person_id)
            .order_by(AstronautDuty.duty_start_date.desc(), AstronautDuty.id.desc())
        )
        return list(db.scalars(stmt).all())

    def count_open_for_person(self, db: Session, person_id: int) -> int:
        stmt = select(func.count()).select_from(AstronautDuty).where(
            AstronautDuty.person_id == person_id,
            AstronautDuty.duty_end_date.is_(None)
        )
        return db.scalar(stmt) or 0


person_crud = CRUDPerson(Person)
astronaut_detail_crud = CRUDAstronautDetail(AstronautDetail)
astronaut_duty_crud = CRUDAstronautDuty(AstronautDuty)
