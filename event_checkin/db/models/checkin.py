"""Checkin model."""
import uuid
from datetime import datetime, timezone as tz
from sqlalchemy import Column, String, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from event_checkin.db.base import Base


class Checkin(Base):
    __tablename__ = "checkins"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String(36), ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    employee_id = Column(String(6), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    event = relationship("Event", back_populates="checkins")

    __table_args__ = (
        Index("idx_checkins_event", "event_id"),
        UniqueConstraint("event_id", "employee_id", name="uq_checkin_event_employee"),
    )
