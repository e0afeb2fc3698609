"""Record store contract."""
import abc
from typing import Any, Dict, List, Optional

from event_checkin.schemas import Checkin, CheckinCreate, CheckinWithEvent, Event, EventCreate

# Fields that update_event accepts
UPDATABLE_EVENT_FIELDS = ("name", "date")


class RecordStore(abc.ABC):
    """
    Persistence for events and their check-ins.

    Each method is atomic on its own. There are no multi-call transactions;
    callers that check then write (duplicate detection, for instance) rely on
    ``create_checkin`` rejecting a second row for the same event and employee.

    All methods raise ``StorageError`` when the backing medium fails.
    """

    @abc.abstractmethod
    def create_event(self, data: EventCreate) -> Event:
        """Persist a new event with a generated id and creation time."""

    @abc.abstractmethod
    def get_event(self, event_id: str) -> Optional[Event]:
        """Return the event or None."""

    @abc.abstractmethod
    def get_event_by_name(self, name: str) -> Optional[Event]:
        """Return the first event whose name matches exactly, or None."""

    @abc.abstractmethod
    def get_all_events(self) -> List[Event]:
        """Return every event in no particular order."""

    @abc.abstractmethod
    def update_event(self, event_id: str, changes: Dict[str, Any]) -> Event:
        """Apply ``changes`` (name and/or date). Raises EventNotFound."""

    @abc.abstractmethod
    def update_event_archive_status(self, event_id: str, archived: bool) -> Event:
        """Set the archived flag. Raises EventNotFound."""

    @abc.abstractmethod
    def delete_event(self, event_id: str) -> bool:
        """Delete the event and its check-ins. Returns False if it did not exist."""

    @abc.abstractmethod
    def create_checkin(self, data: CheckinCreate) -> Checkin:
        """Persist a check-in. Raises DuplicateCheckin if the pair exists."""

    @abc.abstractmethod
    def get_checkins_by_event(self, event_id: str) -> List[Checkin]:
        """Return the event's check-ins in no particular order."""

    @abc.abstractmethod
    def get_checkins_with_event(self, event_id: str) -> List[CheckinWithEvent]:
        """Return the event's check-ins joined with the event."""

    @abc.abstractmethod
    def get_checkin_by_event_and_employee(self, event_id: str, employee_id: str) -> Optional[Checkin]:
        """Return the check-in for this event and employee, or None."""

    @abc.abstractmethod
    def ping(self) -> None:
        """Raise StorageError if the backing medium is unreachable."""


def filter_event_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unknown keys and unset values from an update mapping."""
    return {
        key: value
        for key, value in changes.items()
        if key in UPDATABLE_EVENT_FIELDS and value is not None
    }
