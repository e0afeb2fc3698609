"""HTTP middleware."""
from event_checkin.middleware.logging import LoggingMiddleware
from event_checkin.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["LoggingMiddleware", "SecurityHeadersMiddleware"]
