"""
Person data model.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.database import Base


class Person(Base):
    """
    Model for a tracked person.

    Attributes:
        id: Primary key, system-assigned and immutable
        name: Unique name (exact, case-sensitive match)
        astronaut_detail: Career summary, present once a duty was assigned
        astronaut_duties: Duty history
    """
    __tablename__ = "people"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True, index=True)

    # Relationships
    astronaut_detail = relationship(
        "AstronautDetail", back_populates="person", uselist=False
    )
    astronaut_duties = relationship(
        "AstronautDuty",
        back_populates="person",
        order_by="AstronautDuty.duty_start_date.desc()"
    )

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name='{self.name}')>"
