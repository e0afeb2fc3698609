"""Domain exceptions.

Every exception carries the HTTP status code the API layer answers with.
"""


class CheckinServiceError(Exception):
    """Base exception for business rule and storage failures."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or self.__class__.__doc__


class ValidationError(CheckinServiceError):
    """Input data is invalid."""

    status_code = 400


class NotFound(CheckinServiceError):
    """Requested record does not exist."""

    status_code = 404


class EventNotFound(NotFound):
    """Event not found"""


class NoCheckins(NotFound):
    """No check-ins found"""


class Conflict(CheckinServiceError):
    """Request conflicts with existing data."""

    status_code = 409


class DuplicateCheckin(Conflict):
    """You've already checked in for this event."""


class Forbidden(CheckinServiceError):
    """Operation is not allowed in the current state."""

    status_code = 403


class CheckinsClosed(Forbidden):
    """Check-ins are closed for this event"""


class InternalError(CheckinServiceError):
    """Internal server error"""

    status_code = 500


class StorageError(InternalError):
    """Storage backend is unavailable"""
