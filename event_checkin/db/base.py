"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here for Alembic to detect them
from event_checkin.db.models.event import Event  # noqa: F401, E402
from event_checkin.db.models.checkin import Checkin  # noqa: F401, E402
