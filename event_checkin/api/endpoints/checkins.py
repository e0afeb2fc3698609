"""Check-in endpoints."""
from fastapi import APIRouter, Depends, Request

from event_checkin.api.deps import get_store, http_error
from event_checkin.core.exceptions import CheckinServiceError
from event_checkin.core.rate_limit import limiter, RATE_LIMITS
from event_checkin.schemas import Checkin, CheckinCreate
from event_checkin.services import admit_checkin
from event_checkin.storage import RecordStore

router = APIRouter()


@router.post("", response_model=Checkin)
@limiter.limit(RATE_LIMITS["check_in"])
async def create_checkin_endpoint(
    request: Request,
    checkin_request: CheckinCreate,
    store: RecordStore = Depends(get_store),
):
    """
    Submit an attendee check-in.

    Example:
        Request:
            POST /api/checkins
            {
                "eventId": "5d2c1c1e-...",
                "employeeId": "482913"
            }

        Response (200):
            {
                "id": "9a7e...",
                "eventId": "5d2c1c1e-...",
                "employeeId": "482913",
                "timestamp": "2026-11-03T09:12:44.518000Z"
            }

    Errors:
        400: employeeId is not six digits or is 000000
        403: the event is archived ("Check-ins are closed for this event")
        404: the event does not exist
        409: this employee already checked in to the event

    Note:
        An archived event answers 403 even for an employee who already
        checked in.
    """
    try:
        return admit_checkin(store, checkin_request.event_id, checkin_request.employee_id)
    except CheckinServiceError as e:
        raise http_error(e)
