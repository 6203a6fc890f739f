"""
SQLAlchemy models package.
"""
from app.models.person import Person
from app.models.astronaut_detail import AstronautDetail
from app.models.astronaut_duty import AstronautDuty, DutyStatus
from app.models.audit_log import AuditLog

__all__ = [
    "Person",
    "AstronautDetail",
    "AstronautDuty",
    "DutyStatus",
    "AuditLog"
]
