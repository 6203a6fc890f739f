"""
Roster reports over the astronaut detail projection.

Provides:
- Roster rows with a derived career status
- Summary statistics (active / retired / unassigned counts, career length)
- CSV export of the roster
"""
from dataclasses import dataclass, asdict
from datetime import date
from io import StringIO
from typing import List, Optional
import csv

from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.db.crud import person_crud
from app.models.astronaut_duty import DutyStatus


STATUS_ACTIVE = "active"
STATUS_RETIRED = "retired"
STATUS_UNASSIGNED = "unassigned"
ROSTER_FILTERS = ("all", STATUS_ACTIVE, STATUS_RETIRED, STATUS_UNASSIGNED)

CSV_COLUMNS = [
    "name",
    "current_rank",
    "current_duty_title",
    "status",
    "career_start_date",
    "career_end_date",
]


@dataclass
class RosterEntry:
    """One row of the roster."""
    person_id: int
    name: str
    status: str
    current_rank: Optional[str] = None
    current_duty_title: Optional[str] = None
    career_start_date: Optional[date] = None
    career_end_date: Optional[date] = None

    def career_days(self, today: date) -> Optional[int]:
        """Length of the career window in days, up to today while it is open."""
        if self.career_start_date is None:
            return None
        end = self.career_end_date or today
        return max((end - self.career_start_date).days, 0)


@dataclass
class RosterSummary:
    """Roster-wide statistics.

    Attributes:
        total_people: Number of people in the directory
        active_astronauts: People whose current duty is active
        retired_astronauts: People whose current duty is a retirement
        unassigned_people: People never assigned a duty
        average_career_days: Mean career length of assigned people
        utilization_percentage: Share of people ever assigned a duty, 0-100
    """
    total_people: int
    active_astronauts: int
    retired_astronauts: int
    unassigned_people: int
    average_career_days: Optional[float]
    utilization_percentage: float

    def to_dict(self) -> dict:
        return asdict(self)


def build_roster(db: Session, status_filter: str = "all") -> List[RosterEntry]:
    """
    Build the roster, optionally filtered by career status.

    Args:
        db: Database session
        status_filter: One of all, active, retired, unassigned

    Returns:
        Roster entries ordered by name

    Raises:
        ValidationError: If status_filter is unknown
    """
    if status_filter not in ROSTER_FILTERS:
        raise ValidationError(
            f"Unknown status filter '{status_filter}'. "
            f"Expected one of: {', '.join(ROSTER_FILTERS)}"
        )

    entries = []
    for person, detail in person_crud.list_with_details(db):
        if detail is None:
            entries.append(RosterEntry(
                person_id=person.id, name=person.name, status=STATUS_UNASSIGNED
            ))
            continue
        status = (STATUS_RETIRED if detail.current_duty_status == DutyStatus.RETIRED
                  else STATUS_ACTIVE)
        entries.append(RosterEntry(
            person_id=person.id,
            name=person.name,
            status=status,
            current_rank=detail.current_rank,
            current_duty_title=detail.current_duty_title,
            career_start_date=detail.career_start_date,
            career_end_date=detail.career_end_date,
        ))

    if status_filter == "all":
        return entries
    return [e for e in entries if e.status == status_filter]


def summarize_roster(db: Session, today: Optional[date] = None) -> RosterSummary:
    """Compute roster summary statistics."""
    today = today or date.today()
    entries = build_roster(db)

    career_lengths = [
        days for days in (e.career_days(today) for e in entries) if days is not None
    ]
    average = sum(career_lengths) / len(career_lengths) if career_lengths else None
    assigned = sum(1 for e in entries if e.status != STATUS_UNASSIGNED)
    utilization = round(assigned / len(entries) * 100, 2) if entries else 0.0

    return RosterSummary(
        total_people=len(entries),
        active_astronauts=sum(1 for e in entries if e.status == STATUS_ACTIVE),
        retired_astronauts=sum(1 for e in entries if e.status == STATUS_RETIRED),
        unassigned_people=sum(1 for e in entries if e.status == STATUS_UNASSIGNED),
        average_career_days=average,
        utilization_percentage=utilization,
    )


def roster_to_csv(entries: List[RosterEntry]) -> str:
    """Render roster entries as CSV text with a header row."""
    buffer = StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for entry in entries:
        writer.writerow({
            "name": entry.name,
            "current_rank": entry.current_rank or "",
            "current_duty_title": entry.current_duty_title or "",
            "status": entry.status,
            "career_start_date": entry.career_start_date.isoformat() if entry.career_start_date else "",
            "career_end_date": entry.career_end_date.isoformat() if entry.career_end_date else "",
        })
    return buffer.getvalue()
