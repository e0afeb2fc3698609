"""CSV export of an event's check-ins."""
import csv
import io
import re
from typing import Tuple

from event_checkin.core.constants import EXPORT_HEADER
from event_checkin.core.exceptions import NoCheckins
from event_checkin.core.logging_config import get_logger
from event_checkin.core.utils import isoformat_utc
from event_checkin.storage import RecordStore

logger = get_logger(__name__)


def export_filename(event_name: str, event_date) -> str:
    """Download filename embedding the event name and date."""
    safe_name = re.sub(r"[^A-Za-z0-9 ._-]", "_", event_name).strip() or "event"
    return f"{safe_name}_{event_date.isoformat()}_checkins.csv"


def export_checkins(store: RecordStore, event_id: str) -> Tuple[str, str]:
    """
    Render an event's check-ins as CSV.

    Rows are ordered by check-in time, oldest first, with times in ISO-8601
    UTC.

    Returns:
        (filename, csv_text)

    Raises:
        NoCheckins: If the event has no check-ins or does not exist
    """
    checkins = sorted(store.get_checkins_with_event(event_id), key=lambda c: c.timestamp)
    if not checkins:
        raise NoCheckins()

    event = checkins[0].event

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for checkin in checkins:
        writer.writerow([checkin.employee_id, isoformat_utc(checkin.timestamp), event.name])

    logger.info("checkins_exported", event_id=event_id, rows=len(checkins))
    return export_filename(event.name, event.date), output.getvalue()
