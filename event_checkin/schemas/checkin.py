"""Check-in schemas."""
from datetime import datetime
from pydantic import Field, field_validator

from event_checkin.core.sanitization import validate_employee_id
from event_checkin.core.utils import to_utc
from event_checkin.schemas.common import CamelModel
from event_checkin.schemas.event import Event


class Checkin(CamelModel):
    """Stored check-in record."""

    id: str
    event_id: str
    employee_id: str
    timestamp: datetime

    @field_validator('timestamp')
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return to_utc(v)


class CheckinWithEvent(Checkin):
    """Check-in joined with its parent event."""

    event: Event


class CheckinCreate(CamelModel):
    event_id: str = Field(..., min_length=1)
    employee_id: str = Field(..., max_length=20)

    @field_validator('employee_id')
    @classmethod
    def validate_employee_id_field(cls, v: str) -> str:
        """Employee IDs are six digits and never 000000."""
        return validate_employee_id(v)
