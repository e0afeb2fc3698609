"""Pydantic schemas for records and request/response validation."""
from event_checkin.schemas.event import (
    Event,
    EventCreate,
    EventUpdate,
    EventArchiveUpdate,
    EventStats,
    EventSummary,
    VerifyAdminRequest,
    VerifyAdminResponse,
)
from event_checkin.schemas.checkin import Checkin, CheckinCreate, CheckinWithEvent
from event_checkin.schemas.common import SuccessResponse

__all__ = [
    "Event",
    "EventCreate",
    "EventUpdate",
    "EventArchiveUpdate",
    "EventStats",
    "EventSummary",
    "VerifyAdminRequest",
    "VerifyAdminResponse",
    "Checkin",
    "CheckinCreate",
    "CheckinWithEvent",
    "SuccessResponse",
]
