"""Event model."""
import uuid
from datetime import datetime, timezone as tz
from sqlalchemy import Column, String, Date, DateTime, Boolean
from sqlalchemy.orm import relationship

from event_checkin.db.base import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False, index=True)
    date = Column(Date, nullable=False)
    password_protected = Column(Boolean, nullable=False, default=False)
    admin_password = Column(String(255), nullable=True)  # Argon2 hash
    archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    checkins = relationship("Checkin", back_populates="event", cascade="all, delete-orphan")
