"""In-memory record store."""
import threading
import uuid
from typing import Any, Dict, List, Optional

from event_checkin.core.exceptions import DuplicateCheckin, EventNotFound
from event_checkin.core.utils import utcnow
from event_checkin.schemas import Checkin, CheckinCreate, CheckinWithEvent, Event, EventCreate
from event_checkin.storage.base import RecordStore, filter_event_changes


class MemoryStore(RecordStore):
    """Dict-backed store keyed by id. Data lives as long as the process."""

    def __init__(self):
        self._events: Dict[str, Event] = {}
        self._checkins: Dict[str, Checkin] = {}
        self._lock = threading.Lock()

    def create_event(self, data: EventCreate) -> Event:
        event = Event(
            id=str(uuid.uuid4()),
            name=data.name,
            date=data.date,
            password_protected=data.password_protected,
            admin_password=data.admin_password,
            archived=False,
            created_at=utcnow(),
        )
        with self._lock:
            self._events[event.id] = event
        return event

    def get_event(self, event_id: str) -> Optional[Event]:
        with self._lock:
            return self._events.get(event_id)

    def get_event_by_name(self, name: str) -> Optional[Event]:
        with self._lock:
            return next((e for e in self._events.values() if e.name == name), None)

    def get_all_events(self) -> List[Event]:
        with self._lock:
            return list(self._events.values())

    def update_event(self, event_id: str, changes: Dict[str, Any]) -> Event:
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                raise EventNotFound()
            updated = event.model_copy(update=filter_event_changes(changes))
            self._events[event_id] = updated
            return updated

    def update_event_archive_status(self, event_id: str, archived: bool) -> Event:
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                raise EventNotFound()
            updated = event.model_copy(update={"archived": archived})
            self._events[event_id] = updated
            return updated

    def delete_event(self, event_id: str) -> bool:
        with self._lock:
            if self._events.pop(event_id, None) is None:
                return False
            self._checkins = {
                checkin_id: checkin
                for checkin_id, checkin in self._checkins.items()
                if checkin.event_id != event_id
            }
            return True

    def create_checkin(self, data: CheckinCreate) -> Checkin:
        with self._lock:
            if self._find_checkin(data.event_id, data.employee_id) is not None:
                raise DuplicateCheckin()
            checkin = Checkin(
                id=str(uuid.uuid4()),
                event_id=data.event_id,
                employee_id=data.employee_id,
                timestamp=utcnow(),
            )
            self._checkins[checkin.id] = checkin
            return checkin

    def get_checkins_by_event(self, event_id: str) -> List[Checkin]:
        with self._lock:
            return [c for c in self._checkins.values() if c.event_id == event_id]

    def get_checkins_with_event(self, event_id: str) -> List[CheckinWithEvent]:
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                return []
            return [
                CheckinWithEvent(**c.model_dump(), event=event)
                for c in self._checkins.values()
                if c.event_id == event_id
            ]

    def get_checkin_by_event_and_employee(self, event_id: str, employee_id: str) -> Optional[Checkin]:
        with self._lock:
            return self._find_checkin(event_id, employee_id)

    def ping(self) -> None:
        return None

    def _find_checkin(self, event_id: str, employee_id: str) -> Optional[Checkin]:
        # Caller holds the lock
        for checkin in self._checkins.values():
            if checkin.event_id == event_id and checkin.employee_id == employee_id:
                return checkin
        return None
