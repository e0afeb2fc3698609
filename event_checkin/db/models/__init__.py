"""Database models."""
from event_checkin.db.models.event import Event
from event_checkin.db.models.checkin import Checkin

__all__ = ["Event", "Checkin"]
