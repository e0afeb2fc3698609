"""Rate limiting configuration."""
from slowapi import Limiter
from slowapi.util import get_remote_address

from event_checkin.core.config import settings


def get_client_ip(request):
    """Get client IP for rate limiting, considering proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # X-Forwarded-For can contain multiple IPs, take the first one
        return forwarded.split(",")[0].strip()

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_client_ip,
    default_limits=["1000/15minutes"],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)

# Check-ins come in bursts from a single venue network behind NAT
RATE_LIMITS = {
    "check_in": "300/minute",
    "create_event": "30/minute",
    "verify_admin": "20/minute",
}
