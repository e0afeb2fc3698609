"""Main API router."""
from fastapi import APIRouter

from event_checkin.api.endpoints import events, checkins

api_router = APIRouter(prefix="/api")

# Include all endpoint routers
api_router.include_router(events.router, prefix="/events", tags=["Events"])
api_router.include_router(checkins.router, prefix="/checkins", tags=["Check-ins"])
