"""Request logging middleware."""
import re
import time
import uuid
from typing import Callable, Iterable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from event_checkin.core.rate_limit import get_client_ip

logger = structlog.get_logger(__name__)

# Ids forwarded by a proxy are reused only when they look like ids
_FORWARDED_ID = re.compile(r"^[A-Za-z0-9._-]{8,64}$")


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id and log its outcome.

    The id is bound into structlog's contextvars so service-level events
    (``checkin_admitted``, ``event_created``...) carry it too. Requests to
    ``quiet_paths`` such as load-balancer health probes are logged at debug.
    """

    def __init__(self, app: ASGIApp, quiet_paths: Iterable[str] = ("/health",)):
        super().__init__(app)
        self.quiet_paths = frozenset(quiet_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        incoming = request.headers.get("X-Request-ID", "")
        request_id = incoming if _FORWARDED_ID.match(incoming) else str(uuid.uuid4())
        request.state.request_id = request_id

        path = request.url.path
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=path,
            client_ip=get_client_ip(request),
        )

        quiet = path in self.quiet_paths
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "request_failed",
                exception_type=type(exc).__name__,
                exception=str(exc),
                duration_ms=_elapsed_ms(started),
            )
            raise

        response.headers["X-Request-ID"] = request_id

        if response.status_code >= 500:
            log = logger.error
        elif quiet:
            log = logger.debug
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info
        log(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )

        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
