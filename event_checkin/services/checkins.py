"""Check-in admission logic."""
from typing import List

from event_checkin.core.exceptions import CheckinsClosed, DuplicateCheckin, EventNotFound, ValidationError
from event_checkin.core.logging_config import get_logger
from event_checkin.core.sanitization import validate_employee_id
from event_checkin.schemas import Checkin, CheckinCreate, CheckinWithEvent
from event_checkin.storage import RecordStore

logger = get_logger(__name__)


def admit_checkin(store: RecordStore, event_id: str, employee_id: str) -> Checkin:
    """
    Record an attendee's check-in for an event.

    Checks run in this order and stop at the first failure:

    1. The event must exist (EventNotFound).
    2. The event must not be archived (CheckinsClosed). An attendee who
       already checked in to an archived event therefore sees "closed",
       not "duplicate".
    3. The employee must not have checked in already (DuplicateCheckin).
    4. The employee ID must be six digits and not 000000 (ValidationError).

    The store's own uniqueness check turns a concurrent duplicate that slips
    past step 3 into DuplicateCheckin as well.
    """
    event = store.get_event(event_id)
    if not event:
        raise EventNotFound()

    if event.archived:
        logger.info("checkin_rejected", event_id=event_id, reason="archived")
        raise CheckinsClosed()

    if store.get_checkin_by_event_and_employee(event_id, employee_id):
        logger.info("checkin_rejected", event_id=event_id, reason="duplicate")
        raise DuplicateCheckin()

    try:
        employee_id = validate_employee_id(employee_id)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    try:
        checkin = store.create_checkin(CheckinCreate(event_id=event_id, employee_id=employee_id))
    except DuplicateCheckin:
        logger.info("checkin_rejected", event_id=event_id, reason="duplicate_race")
        raise

    logger.info("checkin_admitted", event_id=event_id, checkin_id=checkin.id)
    return checkin


def list_checkins(store: RecordStore, event_id: str) -> List[CheckinWithEvent]:
    """An event's check-ins joined with the event, newest first."""
    checkins = store.get_checkins_with_event(event_id)
    return sorted(checkins, key=lambda c: c.timestamp, reverse=True)
