"""
Astronaut duty history model.
"""
import enum

from sqlalchemy import Column, Integer, String, Date, Enum, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from app.db.database import Base


class DutyStatus(str, enum.Enum):
    """Status carried by a duty, independent of its free-text title."""
    ACTIVE = "ACTIVE"
    RETIRED = "RETIRED"

    @classmethod
    def from_title(cls, duty_title: str, retired_title: str = "RETIRED") -> "DutyStatus":
        """Derive the status of a duty that did not state one explicitly."""
        return cls.RETIRED if duty_title == retired_title else cls.ACTIVE


class AstronautDuty(Base):
    """
    Model for one entry of a person's duty history.

    Attributes:
        id: Primary key
        person_id: Owning person
        rank: Rank held during the duty
        duty_title: Free-text duty title
        duty_status: ACTIVE or RETIRED
        duty_start_date: First day of the duty
        duty_end_date: Last day of the duty, NULL while the duty is current
    """
    __tablename__ = "astronaut_duties"

    id = Column(Integer, primary_key=True, index=True)
    person_id = Column(Integer, ForeignKey("people.id"), nullable=False, index=True)
    rank = Column(String(50), nullable=False)
    duty_title = Column(String(100), nullable=False)
    duty_status = Column(
        Enum(DutyStatus, name="duty_status", native_enum=False),
        nullable=False,
        default=DutyStatus.ACTIVE
    )
    duty_start_date = Column(Date, nullable=False)
    duty_end_date = Column(Date, nullable=True)

    # Relationships
    person = relationship("Person", back_populates="astronaut_duties")

    __table_args__ = (
        # At most one open duty per person
        Index(
            "ix_astronaut_duties_one_open_per_person",
            "person_id",
            unique=True,
            sqlite_where=text("duty_end_date IS NULL"),
            postgresql_where=text("duty_end_date IS NULL"),
        ),
    )

    def __repr__(self) -> str:
        return (f"<AstronautDuty(id={self.id}, person_id={self.person_id}, "
                f"title='{self.duty_title}', start={self.duty_start_date}, "
                f"end={self.duty_end_date})>")
