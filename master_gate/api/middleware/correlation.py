"""Correlation ID middleware.

Takes the X-Correlation-ID header (or generates an ID), makes it the
correlation ID for the whole request, logs request start and end, and
echoes the ID back in the response headers.

Usage:
    app.add_middleware(CorrelationMiddleware)
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from master_gate.infrastructure.observability.correlation import correlation_scope

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Binds a correlation ID to every request."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            log = structlog.get_logger().bind(
                correlation_id=correlation_id,
                method=request.method,
                path=request.url.path,
            )
            log.debug("request_started")
            started = time.perf_counter()

            response = await call_next(request)

            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
