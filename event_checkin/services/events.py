"""Event lifecycle business logic."""
from datetime import date, timedelta
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo

from event_checkin.core.constants import RECENT_EVENT_DAYS
from event_checkin.core.exceptions import EventNotFound, ValidationError
from event_checkin.core.logging_config import get_logger
from event_checkin.core.sanitization import sanitize_event_name
from event_checkin.core.security import get_password_hash, verify_event_password
from event_checkin.core.utils import today
from event_checkin.schemas import Event, EventCreate, EventStats, EventSummary
from event_checkin.storage import RecordStore

logger = get_logger(__name__)


def _clean_name(name: str) -> str:
    try:
        return sanitize_event_name(name)
    except ValueError as e:
        raise ValidationError(str(e)) from e


def _check_date(event_date: date, tz: Optional[ZoneInfo]) -> date:
    if event_date < today(tz):
        raise ValidationError("Event date must be today or in the future")
    return event_date


def create_event(store: RecordStore, data: EventCreate, tz: Optional[ZoneInfo] = None) -> Event:
    """
    Create a new event.

    The name must be non-blank after trimming and the date must not be
    earlier than today in ``tz``. Password-protected events need an admin
    password, which is stored as an Argon2 hash. Unprotected events never
    keep a password even if one was supplied.

    Raises:
        ValidationError: If any field is invalid
    """
    name = _clean_name(data.name)
    _check_date(data.date, tz)

    admin_password = None
    if data.password_protected:
        if not data.admin_password:
            raise ValidationError("Admin password is required for password-protected events")
        admin_password = get_password_hash(data.admin_password)

    event = store.create_event(data.model_copy(update={
        "name": name,
        "admin_password": admin_password,
    }))
    logger.info(
        "event_created",
        event_id=event.id,
        event_date=event.date.isoformat(),
        password_protected=event.password_protected,
    )
    return event


def get_event(store: RecordStore, event_id: str) -> Event:
    """Get an event or raise EventNotFound."""
    event = store.get_event(event_id)
    if not event:
        raise EventNotFound()
    return event


def get_event_by_name(store: RecordStore, name: str) -> Event:
    event = store.get_event_by_name(name)
    if not event:
        raise EventNotFound()
    return event


def list_events(store: RecordStore) -> List[Event]:
    """All events, most recently created first."""
    return sorted(store.get_all_events(), key=lambda e: e.created_at, reverse=True)


def update_event(
    store: RecordStore,
    event_id: str,
    changes: Dict[str, Any],
    tz: Optional[ZoneInfo] = None,
) -> Event:
    """
    Update an event's name and/or date.

    Fields absent from ``changes`` (or set to None) are left untouched and
    present ones are validated the same way as on creation.
    """
    cleaned = {}
    if changes.get("name") is not None:
        cleaned["name"] = _clean_name(changes["name"])
    if changes.get("date") is not None:
        cleaned["date"] = _check_date(changes["date"], tz)

    if not cleaned:
        return get_event(store, event_id)

    event = store.update_event(event_id, cleaned)
    logger.info("event_updated", event_id=event_id, fields=sorted(cleaned))
    return event


def set_archived(store: RecordStore, event_id: str, archived: bool) -> Event:
    """Archive or unarchive an event. Setting the current value again is a no-op."""
    event = store.update_event_archive_status(event_id, archived)
    logger.info("event_archive_status_changed", event_id=event_id, archived=archived)
    return event


def delete_event(store: RecordStore, event_id: str) -> None:
    """Delete an event and all of its check-ins."""
    if not store.delete_event(event_id):
        raise EventNotFound()
    logger.info("event_deleted", event_id=event_id)


def verify_admin_password(store: RecordStore, event_id: str, password: str) -> bool:
    """
    Check a dashboard password for an event.

    Events without password protection accept any password.
    """
    event = get_event(store, event_id)
    if not event.password_protected:
        return True

    valid = verify_event_password(password, event.admin_password)
    if not valid:
        logger.warning("admin_password_rejected", event_id=event_id)
    return valid


def get_event_stats(store: RecordStore, tz: Optional[ZoneInfo] = None) -> EventStats:
    """
    Counters for the all-events dashboard.

    ``recent`` counts events dated no more than RECENT_EVENT_DAYS days ago,
    upcoming events included.
    """
    events = store.get_all_events()
    cutoff = today(tz) - timedelta(days=RECENT_EVENT_DAYS)

    return EventStats(
        total_events=len(events),
        password_protected=sum(1 for e in events if e.password_protected),
        archived=sum(1 for e in events if e.archived),
        recent=sum(1 for e in events if e.date >= cutoff),
    )


def get_event_summary(store: RecordStore, event_id: str) -> EventSummary:
    """Check-in count and latest check-in time for one event's dashboard."""
    event = get_event(store, event_id)
    checkins = store.get_checkins_by_event(event.id)

    return EventSummary(
        event_id=event.id,
        total_checkins=len(checkins),
        last_checkin_at=max((c.timestamp for c in checkins), default=None),
    )
