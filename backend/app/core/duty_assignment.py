"""
Duty assignment engine.

Assigning a duty to a person is a single read-modify-write transaction:

1. validate the request and lock the person row,
2. reject the request if it collides with the person's current duty,
3. create or update the astronaut detail projection,
4. close the current duty the day before the new one starts,
5. open the new duty.

All dates are handled at day granularity, so consecutive duties of a person
are adjacent: the earlier one ends the day before the later one starts.

The one-open-duty-per-person rule is also enforced by a partial unique index
on ``astronaut_duties``; a violation raised by the database is reported as a
ConflictError.
"""
from datetime import date, datetime, timedelta
from typing import Optional, Union
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.audit import AuditService
from app.core.errors import (
    ConflictError,
    DutyTrackerError,
    InternalError,
    NotFoundError,
    ValidationError,
    require_text,
)
from app.db.crud import astronaut_detail_crud, astronaut_duty_crud, person_crud
from app.models.astronaut_detail import AstronautDetail
from app.models.astronaut_duty import AstronautDuty, DutyStatus


logger = logging.getLogger(__name__)

ACTION = "CREATE_ASTRONAUT_DUTY"
ENTITY_TYPE = "AstronautDuty"
OPEN_DUTY_INDEX = "ix_astronaut_duties_one_open_per_person"

ONE_DAY = timedelta(days=1)

DateLike = Union[date, datetime, str]


def as_date(value: DateLike) -> date:
    """
    Truncate a date-like value to day granularity.

    Accepts ``date``, ``datetime`` and ISO 8601 strings (date or datetime).

    Raises:
        ValidationError: If the value is missing or cannot be parsed
    """
    if value is None:
        raise ValidationError("Duty start date is required.")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if "T" in text or " " in text:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            return date.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"Invalid duty start date: '{value}'.")
    raise ValidationError(f"Invalid duty start date: {value!r}.")


def resolve_status(
    duty_title: str,
    status: Optional[Union[DutyStatus, str]] = None,
    retired_title: Optional[str] = None
) -> DutyStatus:
    """
    Return the duty status, deriving it from the title when not given.

    Raises:
        ValidationError: If an explicit status is not a known DutyStatus
    """
    if status is None:
        retired_title = retired_title or get_settings().retired_duty_title
        return DutyStatus.from_title(duty_title, retired_title)
    if isinstance(status, DutyStatus):
        return status
    try:
        return DutyStatus(str(status).upper())
    except ValueError:
        raise ValidationError(f"Invalid duty status: '{status}'.")


class DutyAssignmentService:
    """
    Assigns duties to people and maintains the astronaut detail projection.

    Args:
        db: Database session; the service commits or rolls it back
        audit: Audit sink, defaults to one bound to the same session
        conflict_policy: ``chronological`` or ``strict``, defaults to settings
    """

    def __init__(
        self,
        db: Session,
        audit: Optional[AuditService] = None,
        conflict_policy: Optional[str] = None
    ):
        settings = get_settings()
        self.db = db
        self.audit = audit or AuditService(db)
        self.conflict_policy = conflict_policy or settings.duty_conflict_policy
        self.retired_title = settings.retired_duty_title

    def assign_duty(
        self,
        name: str,
        rank: str,
        duty_title: str,
        duty_start_date: DateLike,
        status: Optional[Union[DutyStatus, str]] = None
    ) -> int:
        """
        Assign a new duty to a person.

        Args:
            name: Exact name of an existing person
            rank: Rank held during the new duty
            duty_title: Free-text duty title
            duty_start_date: First day of the duty (truncated to a date)
            status: Explicit duty status; derived from the title when omitted

        Returns:
            ID of the new duty

        Raises:
            ValidationError: Blank name/rank/title, bad date or status
            NotFoundError: No person with this name
            ConflictError: The request collides with the current duty
            InternalError: Storage failure
        """
        try:
            require_text(name, "Person name")
            require_text(rank, "Rank")
            require_text(duty_title, "Duty title")
            start = as_date(duty_start_date)
            duty_status = resolve_status(duty_title, status, self.retired_title)

            person = person_crud.get_by_name(self.db, name, for_update=True)
            if person is None:
                raise NotFoundError(f"Person with name '{name}' not found.")

            current = astronaut_duty_crud.get_open_for_person(self.db, person.id)
            self._check_conflict(name, current, start)

            self._update_detail(person.id, rank, duty_title, duty_status, start)

            if current is not None:
                current.duty_end_date = start - ONE_DAY
                # the close must reach the database before the new open duty
                self.db.flush()

            duty = astronaut_duty_crud.add(self.db, AstronautDuty(
                person_id=person.id,
                rank=rank,
                duty_title=duty_title,
                duty_status=duty_status,
                duty_start_date=start,
                duty_end_date=None
            ))
            self.db.commit()

        except DutyTrackerError as e:
            self.db.rollback()
            logger.warning(f"Duty assignment for '{name}' rejected: {e}")
            self.audit.record_failure(ACTION, ENTITY_TYPE, name, e)
            raise
        except IntegrityError as e:
            self.db.rollback()
            if OPEN_DUTY_INDEX in str(e.orig) or "astronaut_duties.person_id" in str(e.orig):
                conflict = ConflictError(
                    f"Person '{name}' already has an active duty. "
                    f"Cannot assign new duty without ending current one."
                )
            else:
                conflict = ConflictError(
                    f"Duty assignment for '{name}' conflicts with a concurrent change."
                )
            logger.warning(f"Concurrent duty assignment for '{name}': {e}")
            self.audit.record_failure(ACTION, ENTITY_TYPE, name, conflict)
            raise conflict from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Duty assignment for '{name}' failed: {e}")
            self.audit.record_failure(ACTION, ENTITY_TYPE, name, e)
            raise InternalError(f"Failed to assign duty: {e}") from e
        except Exception as e:
            self.db.rollback()
            logger.error(f"Unexpected error assigning duty to '{name}': {e}")
            self.audit.record_failure(ACTION, ENTITY_TYPE, name, e)
            raise InternalError(f"Failed to assign duty: {e}") from e

        logger.info(f"Assigned duty {duty.id} '{duty_title}' to '{name}' from {start}")
        self.audit.record_success(
            ACTION, ENTITY_TYPE, duty.id, f"Created duty: {duty_title} for {name}"
        )
        return duty.id

    def _check_conflict(
        self,
        name: str,
        current: Optional[AstronautDuty],
        start: date
    ) -> None:
        if current is None:
            return
        if (self.conflict_policy == "strict"
                and current.duty_status != DutyStatus.RETIRED):
            raise ConflictError(
                f"Person '{name}' already has an active duty '{current.duty_title}'. "
                f"Cannot assign new duty without ending current one."
            )
        if start <= current.duty_start_date:
            raise ConflictError(
                f"Person '{name}' already has an active duty '{current.duty_title}' "
                f"starting {current.duty_start_date.isoformat()}. "
                f"A new duty must start after it."
            )

    def _update_detail(
        self,
        person_id: int,
        rank: str,
        duty_title: str,
        duty_status: DutyStatus,
        start: date
    ) -> AstronautDetail:
        detail = astronaut_detail_crud.get_by_person(self.db, person_id)
        if detail is None:
            detail = AstronautDetail(
                person_id=person_id,
                career_start_date=start
            )
            self.db.add(detail)

        detail.current_rank = rank
        detail.current_duty_title = duty_title
        detail.current_duty_status = duty_status

        # Career ends the day before retirement; any later duty reopens it
        if duty_status == DutyStatus.RETIRED:
            detail.career_end_date = start - ONE_DAY
        else:
            detail.career_end_date = None
        return detail
