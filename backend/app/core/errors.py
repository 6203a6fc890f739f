"""
Error taxonomy for the duty tracker services.

Every service raises a subclass of DutyTrackerError; the ``kind`` attribute is
what the HTTP layer maps to a status code.
"""


class DutyTrackerError(Exception):
    """Base class for errors raised by the duty tracker services."""
    kind = "Internal"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class ValidationError(DutyTrackerError):
    """Malformed or missing input."""
    kind = "Validation"


class NotFoundError(DutyTrackerError):
    """Referenced person does not exist."""
    kind = "NotFound"


class ConflictError(DutyTrackerError):
    """Duplicate name, or a duty assignment that collides with the current duty."""
    kind = "Conflict"


class InternalError(DutyTrackerError):
    """Storage failure or unexpected fault."""
    kind = "Internal"


def require_text(value, field: str) -> None:
    """Raise ValidationError when value is missing or whitespace-only."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} cannot be null or empty.")
