"""
Request Context Middleware

Gives every page view and API call a correlation ID (taken from the
X-Correlation-ID header when the caller sends one) and logs one
`request_completed` event per request with its status and duration.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.logging import get_logger, set_correlation_id

log = get_logger("http")


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Tag the request for logging and echo the ID back on the response."""

    HEADER_NAME = "X-Correlation-ID"

    # Health checks would drown out real traffic
    QUIET_PATHS = frozenset({"/ping"})

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(self.HEADER_NAME) or uuid.uuid4().hex
        set_correlation_id(correlation_id)

        started = time.perf_counter()
        response = await call_next(request)
        response.headers[self.HEADER_NAME] = correlation_id

        if request.url.path not in self.QUIET_PATHS:
            log.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
        return response
