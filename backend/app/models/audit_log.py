"""
Audit log model.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from datetime import datetime, timezone
from app.db.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AuditLog(Base):
    """
    Model for storing audit trail entries.

    Attributes:
        id: Primary key
        action: Action name, e.g. CREATE_PERSON
        entity_type: Type of the affected entity
        entity_id: Identifier of the affected entity (id or name)
        details: Free-text details or the error text
        user_id: Actor that performed the action
        timestamp: UTC timestamp
        level: Information or Error
        message: One-line summary
    """
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    action = Column(String(100), nullable=False)
    entity_type = Column(String(100), nullable=False, default="")
    entity_id = Column(String(255), nullable=False, default="")
    details = Column(Text, nullable=False, default="")
    user_id = Column(String(100), nullable=False, default="")
    timestamp = Column(DateTime, default=_utcnow, nullable=False, index=True)
    level = Column(String(20), nullable=False, default="Information", index=True)
    message = Column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<AuditLog(id={self.id}, action='{self.action}', level='{self.level}')>"
