"""SQLAlchemy-backed record store."""
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, contains_eager, sessionmaker

from event_checkin.core.exceptions import DuplicateCheckin, EventNotFound, StorageError
from event_checkin.core.logging_config import get_logger
from event_checkin.db import models
from event_checkin.schemas import Checkin, CheckinCreate, CheckinWithEvent, Event, EventCreate
from event_checkin.storage.base import RecordStore, filter_event_changes

logger = get_logger(__name__)


class DatabaseStore(RecordStore):
    """
    Store backed by the ``events`` and ``checkins`` tables.

    Every call runs in its own session and commits or rolls back before
    returning, so callers never see partially applied writes. Rows are
    converted to pydantic records before the session closes.

    Duplicate check-ins are rejected by the ``uq_checkin_event_employee``
    unique constraint, which also covers concurrent submissions.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except IntegrityError:
            db.rollback()
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("storage_error", error=str(e), error_type=type(e).__name__)
            raise StorageError() from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_event(self, data: EventCreate) -> Event:
        with self._session() as db:
            event = models.Event(
                name=data.name,
                date=data.date,
                password_protected=data.password_protected,
                admin_password=data.admin_password,
                archived=False,
            )
            db.add(event)
            db.flush()
            return Event.model_validate(event)

    def get_event(self, event_id: str) -> Optional[Event]:
        with self._session() as db:
            event = db.get(models.Event, event_id)
            return Event.model_validate(event) if event else None

    def get_event_by_name(self, name: str) -> Optional[Event]:
        with self._session() as db:
            event = db.query(models.Event).filter(
                models.Event.name == name
            ).order_by(models.Event.created_at).first()
            return Event.model_validate(event) if event else None

    def get_all_events(self) -> List[Event]:
        with self._session() as db:
            return [Event.model_validate(e) for e in db.query(models.Event).all()]

    def update_event(self, event_id: str, changes: Dict[str, Any]) -> Event:
        with self._session() as db:
            event = db.get(models.Event, event_id)
            if not event:
                raise EventNotFound()
            for field, value in filter_event_changes(changes).items():
                setattr(event, field, value)
            db.flush()
            return Event.model_validate(event)

    def update_event_archive_status(self, event_id: str, archived: bool) -> Event:
        with self._session() as db:
            event = db.get(models.Event, event_id)
            if not event:
                raise EventNotFound()
            event.archived = archived
            db.flush()
            return Event.model_validate(event)

    def delete_event(self, event_id: str) -> bool:
        with self._session() as db:
            event = db.get(models.Event, event_id)
            if not event:
                return False
            # ORM cascade removes check-ins even where the database
            # does not enforce ON DELETE CASCADE (SQLite without the pragma)
            db.delete(event)
            return True

    def create_checkin(self, data: CheckinCreate) -> Checkin:
        try:
            with self._session() as db:
                checkin = models.Checkin(
                    event_id=data.event_id,
                    employee_id=data.employee_id,
                )
                db.add(checkin)
                db.flush()
                return Checkin.model_validate(checkin)
        except IntegrityError as e:
            if self.get_event(data.event_id) is None:
                raise EventNotFound() from e
            raise DuplicateCheckin() from e

    def get_checkins_by_event(self, event_id: str) -> List[Checkin]:
        with self._session() as db:
            rows = db.query(models.Checkin).filter(models.Checkin.event_id == event_id).all()
            return [Checkin.model_validate(c) for c in rows]

    def get_checkins_with_event(self, event_id: str) -> List[CheckinWithEvent]:
        with self._session() as db:
            rows = db.query(models.Checkin).join(models.Checkin.event).options(
                contains_eager(models.Checkin.event)
            ).filter(models.Checkin.event_id == event_id).all()
            return [CheckinWithEvent.model_validate(c) for c in rows]

    def get_checkin_by_event_and_employee(self, event_id: str, employee_id: str) -> Optional[Checkin]:
        with self._session() as db:
            checkin = db.query(models.Checkin).filter(
                models.Checkin.event_id == event_id,
                models.Checkin.employee_id == employee_id
            ).first()
            return Checkin.model_validate(checkin) if checkin else None

    def ping(self) -> None:
        with self._session() as db:
            db.execute(text("SELECT 1"))
