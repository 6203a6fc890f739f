"""
Audit trail service.

Writes one AuditLog row per audited action and mirrors it to the application
logger. Audit writes never fail the caller: a failed write is rolled back and
logged.
"""
from typing import List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.models.audit_log import AuditLog


logger = logging.getLogger(__name__)

LEVEL_INFORMATION = "Information"
LEVEL_ERROR = "Error"


class AuditService:
    """Audit sink bound to a database session."""

    def __init__(self, db: Session, actor: Optional[str] = None):
        self.db = db
        self.actor = actor or get_settings().audit_actor

    def record_success(
        self,
        action: str,
        entity_type: str,
        entity_id,
        details: str = "",
        actor: Optional[str] = None
    ) -> Optional[AuditLog]:
        """Record a successful action."""
        entry = AuditLog(
            action=action,
            entity_type=entity_type,
            entity_id=str(entity_id),
            details=details,
            user_id=actor or self.actor,
            level=LEVEL_INFORMATION,
            message=f"Success: {action} for {entity_type} {entity_id}"
        )
        logger.info(f"Audit: {action} for {entity_type} {entity_id} - {details}")
        return self._write(entry)

    def record_failure(
        self,
        action: str,
        entity_type: str,
        entity_id,
        error: Exception,
        actor: Optional[str] = None
    ) -> Optional[AuditLog]:
        """Record a failed action together with the error that caused it."""
        entry = AuditLog(
            action=action,
            entity_type=entity_type,
            entity_id=str(entity_id),
            details=f"{type(error).__name__}: {error}",
            user_id=actor or self.actor,
            level=LEVEL_ERROR,
            message=f"Error: {action} for {entity_type} {entity_id} - {error}"
        )
        logger.error(f"Audit Error: {action} for {entity_type} {entity_id}: {error}")
        return self._write(entry)

    def record_info(
        self,
        action: str,
        message: str,
        actor: Optional[str] = None
    ) -> Optional[AuditLog]:
        """Record a general system event."""
        entry = AuditLog(
            action=action,
            entity_type="System",
            entity_id="",
            details=message,
            user_id=actor or self.actor,
            level=LEVEL_INFORMATION,
            message=f"Info: {action} - {message}"
        )
        logger.info(f"Audit Info: {action} - {message}")
        return self._write(entry)

    def recent(self, limit: int = 100, level: Optional[str] = None) -> List[AuditLog]:
        """Most recent audit entries first."""
        stmt = select(AuditLog)
        if level:
            stmt = stmt.where(AuditLog.level == level)
        stmt = stmt.order_by(AuditLog.timestamp.desc(), AuditLog.id.desc()).limit(limit)
        return list(self.db.scalars(stmt).all())

    def _write(self, entry: AuditLog) -> Optional[AuditLog]:
        try:
            self.db.add(entry)
            self.db.commit()
            return entry
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to write audit entry {entry.action}: {e}")
            return None
