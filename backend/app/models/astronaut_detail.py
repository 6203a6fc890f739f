"""
Astronaut detail (career summary) model.
"""
from sqlalchemy import Column, Integer, String, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.db.database import Base
from app.models.astronaut_duty import DutyStatus


class AstronautDetail(Base):
    """
    Single-row-per-person projection of the duty history.

    Written only by the duty assignment engine.

    Attributes:
        id: Primary key
        person_id: Owning person (unique)
        current_rank: Rank of the current duty
        current_duty_title: Title of the current duty
        current_duty_status: Status of the current duty
        career_start_date: Start date of the first duty ever assigned
        career_end_date: Day before the retirement duty started, NULL otherwise
    """
    __tablename__ = "astronaut_details"

    id = Column(Integer, primary_key=True, index=True)
    person_id = Column(Integer, ForeignKey("people.id"), nullable=False, unique=True)
    current_rank = Column(String(50), nullable=False)
    current_duty_title = Column(String(100), nullable=False)
    current_duty_status = Column(
        Enum(DutyStatus, name="duty_status", native_enum=False),
        nullable=False,
        default=DutyStatus.ACTIVE
    )
    career_start_date = Column(Date, nullable=False)
    career_end_date = Column(Date, nullable=True)

    # Relationships
    person = relationship("Person", back_populates="astronaut_detail")

    def __repr__(self) -> str:
        return (f"<AstronautDetail(person_id={self.person_id}, "
                f"rank='{self.current_rank}', title='{self.current_duty_title}')>")
