"""
Translation of service errors to HTTP errors.
"""
from fastapi import HTTPException, status

from app.core.errors import DutyTrackerError


STATUS_BY_KIND = {
    "Validation": status.HTTP_400_BAD_REQUEST,
    "NotFound": status.HTTP_404_NOT_FOUND,
    "Conflict": status.HTTP_409_CONFLICT,
    "Internal": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: DutyTrackerError) -> HTTPException:
    """Map a service error to an HTTPException carrying its kind and message."""
    return HTTPException(
        status_code=STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail=error.to_dict()
    )
