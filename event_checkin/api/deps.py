"""Shared API dependencies."""
from zoneinfo import ZoneInfo

from fastapi import HTTPException, Request

from event_checkin.core.config import settings
from event_checkin.core.exceptions import CheckinServiceError
from event_checkin.storage import RecordStore


def get_store(request: Request) -> RecordStore:
    """Dependency returning the record store chosen at startup."""
    return request.app.state.store


def get_timezone() -> ZoneInfo:
    """Timezone that decides which event dates are in the past."""
    return settings.tz


def http_error(exc: CheckinServiceError) -> HTTPException:
    """Translate a domain exception into the matching HTTP error."""
    return HTTPException(status_code=exc.status_code, detail=exc.message)


__all__ = ["get_store", "get_timezone", "http_error"]
