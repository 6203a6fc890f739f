"""
Pydantic schemas package.
"""
from app.schemas.person import (
    PersonCreate,
    PersonUpdate,
    PersonAstronaut,
    PersonListResponse,
    MutationResponse
)
from app.schemas.duty import (
    AstronautDutyCreate,
    AstronautDutyResponse,
    AstronautDutiesResponse
)
from app.schemas.report import (
    RosterEntryResponse,
    RosterResponse,
    RosterSummaryResponse,
    AuditLogResponse
)

__all__ = [
    "PersonCreate",
    "PersonUpdate",
    "PersonAstronaut",
    "PersonListResponse",
    "MutationResponse",
    "AstronautDutyCreate",
    "AstronautDutyResponse",
    "AstronautDutiesResponse",
    "RosterEntryResponse",
    "RosterResponse",
    "RosterSummaryResponse",
    "AuditLogResponse"
]
