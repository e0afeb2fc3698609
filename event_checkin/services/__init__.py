from .checkins import admit_checkin, list_checkins
from .events import (
    create_event,
    delete_event,
    get_event,
    get_event_by_name,
    get_event_stats,
    get_event_summary,
    list_events,
    set_archived,
    update_event,
    verify_admin_password,
)
from .export import export_checkins, export_filename
from .qr import build_checkin_url, generate_qr_code

__all__ = [
    # checkins
    "admit_checkin",
    "list_checkins",
    # events
    "create_event",
    "delete_event",
    "get_event",
    "get_event_by_name",
    "get_event_stats",
    "get_event_summary",
    "list_events",
    "set_archived",
    "update_event",
    "verify_admin_password",
    # export
    "export_checkins",
    "export_filename",
    # qr
    "build_checkin_url",
    "generate_qr_code",
]
