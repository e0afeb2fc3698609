"""Database package."""
from event_checkin.db.session import make_engine, make_session_factory
from event_checkin.db.base import Base

__all__ = ["make_engine", "make_session_factory", "Base"]
