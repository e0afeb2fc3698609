"""Event schemas."""
import datetime as dt
from typing import Optional
from pydantic import Field, StrictBool, field_validator, model_validator

from event_checkin.core.constants import MAX_ADMIN_PASSWORD_LENGTH, MAX_EVENT_NAME_LENGTH
from event_checkin.core.sanitization import sanitize_event_name
from event_checkin.core.utils import to_utc
from event_checkin.schemas.common import CamelModel


class Event(CamelModel):
    """Stored event record."""

    id: str
    name: str
    date: dt.date
    password_protected: bool = False
    # Never serialized; only the verify-admin endpoint reads it
    admin_password: Optional[str] = Field(None, exclude=True)
    archived: bool = False
    created_at: dt.datetime

    @field_validator('created_at')
    @classmethod
    def ensure_utc(cls, v: dt.datetime) -> dt.datetime:
        return to_utc(v)


class EventCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=MAX_EVENT_NAME_LENGTH)
    date: dt.date
    password_protected: bool = False
    admin_password: Optional[str] = Field(None, max_length=MAX_ADMIN_PASSWORD_LENGTH)

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: str) -> str:
        """Sanitize and validate event name."""
        return sanitize_event_name(v)

    @model_validator(mode='after')
    def check_password(self) -> "EventCreate":
        if self.password_protected and not self.admin_password:
            raise ValueError("Admin password is required for password-protected events")
        return self


class EventUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=MAX_EVENT_NAME_LENGTH)
    date: Optional[dt.date] = None

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return sanitize_event_name(v)
        return v


class EventArchiveUpdate(CamelModel):
    archived: StrictBool


class VerifyAdminRequest(CamelModel):
    password: str = Field(..., max_length=MAX_ADMIN_PASSWORD_LENGTH)


class VerifyAdminResponse(CamelModel):
    valid: bool


class EventStats(CamelModel):
    total_events: int
    password_protected: int
    archived: int
    recent: int


class EventSummary(CamelModel):
    event_id: str
    total_checkins: int
    last_checkin_at: Optional[dt.datetime] = None
