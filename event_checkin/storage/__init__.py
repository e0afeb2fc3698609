"""Record store implementations."""
from event_checkin.core.config import Settings
from event_checkin.core.constants import STORAGE_DATABASE
from event_checkin.core.logging_config import get_logger
from event_checkin.db import Base, make_engine, make_session_factory
from event_checkin.storage.base import RecordStore
from event_checkin.storage.memory import MemoryStore
from event_checkin.storage.database import DatabaseStore

logger = get_logger(__name__)


def create_store(settings: Settings) -> RecordStore:
    """Build the store selected by ``STORAGE_BACKEND``."""
    if settings.STORAGE_BACKEND == STORAGE_DATABASE:
        engine = make_engine(settings)
        if settings.DB_AUTO_CREATE:
            Base.metadata.create_all(bind=engine)
        logger.info("store_configured", backend="database", dialect=engine.dialect.name)
        return DatabaseStore(make_session_factory(engine))

    logger.info("store_configured", backend="memory")
    return MemoryStore()


__all__ = ["RecordStore", "MemoryStore", "DatabaseStore", "create_store"]
