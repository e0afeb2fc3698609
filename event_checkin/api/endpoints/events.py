"""Event endpoints."""
from typing import List
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from event_checkin.api.deps import get_store, get_timezone, http_error
from event_checkin.core.config import settings
from event_checkin.core.exceptions import CheckinServiceError
from event_checkin.core.logging_config import get_logger
from event_checkin.core.rate_limit import limiter, RATE_LIMITS
from event_checkin.schemas import (
    CheckinWithEvent,
    Event,
    EventArchiveUpdate,
    EventCreate,
    EventStats,
    EventSummary,
    EventUpdate,
    SuccessResponse,
    VerifyAdminRequest,
    VerifyAdminResponse,
)
from event_checkin.services import (
    build_checkin_url,
    create_event,
    delete_event,
    export_checkins,
    generate_qr_code,
    get_event,
    get_event_by_name,
    get_event_stats,
    get_event_summary,
    list_checkins,
    list_events,
    set_archived,
    update_event,
    verify_admin_password,
)
from event_checkin.storage import RecordStore

logger = get_logger(__name__)
router = APIRouter()


@router.post("", response_model=Event)
@limiter.limit(RATE_LIMITS["create_event"])
async def create_event_endpoint(
    request: Request,
    event: EventCreate,
    store: RecordStore = Depends(get_store),
    tz: ZoneInfo = Depends(get_timezone),
):
    """
    Create a new event.

    Example:
        Request:
            POST /api/events
            {
                "name": "Quarterly All-Hands",
                "date": "2026-11-03",
                "passwordProtected": true,
                "adminPassword": "s3cret"
            }

        Response (200):
            {
                "id": "5d2c1c1e-...",
                "name": "Quarterly All-Hands",
                "date": "2026-11-03",
                "passwordProtected": true,
                "archived": false,
                "createdAt": "2026-10-18T14:03:11.201000Z"
            }

        Response (400):
            {
                "detail": "Event date must be today or in the future"
            }

    Note:
        The admin password is stored hashed and never returned.
    """
    try:
        return create_event(store, event, tz)
    except CheckinServiceError as e:
        raise http_error(e)


@router.get("", response_model=List[Event])
async def list_events_endpoint(store: RecordStore = Depends(get_store)):
    """List all events, most recently created first."""
    try:
        return list_events(store)
    except CheckinServiceError as e:
        raise http_error(e)


@router.get("/stats", response_model=EventStats)
async def event_stats_endpoint(
    store: RecordStore = Depends(get_store),
    tz: ZoneInfo = Depends(get_timezone),
):
    """Counters shown on the all-events dashboard."""
    try:
        return get_event_stats(store, tz)
    except CheckinServiceError as e:
        raise http_error(e)


@router.get("/by-name/{name:path}", response_model=Event)
async def get_event_by_name_endpoint(name: str, store: RecordStore = Depends(get_store)):
    """Fetch an event by its exact name."""
    try:
        return get_event_by_name(store, name)
    except CheckinServiceError as e:
        raise http_error(e)


@router.get("/{event_id}", response_model=Event)
async def get_event_endpoint(event_id: str, store: RecordStore = Depends(get_store)):
    try:
        return get_event(store, event_id)
    except CheckinServiceError as e:
        raise http_error(e)


@router.patch("/{event_id}", response_model=Event)
async def update_event_endpoint(
    event_id: str,
    changes: EventUpdate,
    store: RecordStore = Depends(get_store),
    tz: ZoneInfo = Depends(get_timezone),
):
    """
    Update an event's name and/or date.

    Omitted fields keep their current value. New values go through the
    same validation as on creation, so a date cannot be moved into the past.
    """
    try:
        return update_event(store, event_id, changes.model_dump(exclude_unset=True), tz)
    except CheckinServiceError as e:
        raise http_error(e)


@router.patch("/{event_id}/archive", response_model=Event)
async def archive_event_endpoint(
    event_id: str,
    body: EventArchiveUpdate,
    store: RecordStore = Depends(get_store),
):
    """
    Archive or unarchive an event.

    Archived events refuse new check-ins; existing check-ins stay readable
    and exportable.
    """
    try:
        return set_archived(store, event_id, body.archived)
    except CheckinServiceError as e:
        raise http_error(e)


@router.delete("/{event_id}", response_model=SuccessResponse)
async def delete_event_endpoint(event_id: str, store: RecordStore = Depends(get_store)):
    """Delete an event together with all of its check-ins."""
    try:
        delete_event(store, event_id)
    except CheckinServiceError as e:
        raise http_error(e)

    return SuccessResponse(success=True, message="Event deleted successfully")


@router.post("/{event_id}/verify-admin", response_model=VerifyAdminResponse)
@limiter.limit(RATE_LIMITS["verify_admin"])
async def verify_admin_endpoint(
    request: Request,
    event_id: str,
    body: VerifyAdminRequest,
    store: RecordStore = Depends(get_store),
):
    """
    Check the dashboard password of an event.

    Always answers ``{"valid": true}`` for events without password
    protection. A wrong password is not an error: the response is 200 with
    ``{"valid": false}``.
    """
    try:
        valid = verify_admin_password(store, event_id, body.password)
    except CheckinServiceError as e:
        raise http_error(e)

    return VerifyAdminResponse(valid=valid)


@router.get("/{event_id}/checkins", response_model=List[CheckinWithEvent])
async def list_checkins_endpoint(event_id: str, store: RecordStore = Depends(get_store)):
    """Check-ins of an event joined with the event, newest first."""
    try:
        return list_checkins(store, event_id)
    except CheckinServiceError as e:
        raise http_error(e)


@router.get("/{event_id}/summary", response_model=EventSummary)
async def event_summary_endpoint(event_id: str, store: RecordStore = Depends(get_store)):
    try:
        return get_event_summary(store, event_id)
    except CheckinServiceError as e:
        raise http_error(e)


@router.get("/{event_id}/export")
async def export_checkins_endpoint(event_id: str, store: RecordStore = Depends(get_store)):
    """
    Download an event's check-ins as CSV.

    Columns: Employee ID, Check-in Time (ISO-8601 UTC), Event Name.
    Answers 404 when the event has no check-ins.
    """
    try:
        filename, content = export_checkins(store, event_id)
    except CheckinServiceError as e:
        raise http_error(e)

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{event_id}/qr")
async def event_qr_endpoint(
    request: Request,
    event_id: str,
    store: RecordStore = Depends(get_store),
):
    """
    QR code (SVG) linking to the event's check-in page.

    The link origin is PUBLIC_BASE_URL when configured, otherwise the
    origin this request arrived on.
    """
    try:
        event = get_event(store, event_id)
    except CheckinServiceError as e:
        raise http_error(e)

    base_url = settings.PUBLIC_BASE_URL or str(request.base_url)
    checkin_url = build_checkin_url(base_url, event.id)

    try:
        svg = generate_qr_code(checkin_url)
    except Exception as e:
        logger.exception("qr_generation_failed", event_id=event.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to generate QR code")

    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"X-Checkin-URL": checkin_url},
    )
