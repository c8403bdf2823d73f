"""
Request logging middleware for FastAPI application.

Every request gets a correlation ID (taken from X-Correlation-ID when the
client sends one) that is echoed back in the response headers.
"""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    HTTP middleware for request/response logging.

    4xx/5xx responses are logged at WARNING, the rest at INFO.
    """

    # Paths to exclude from logging (high-frequency, low-value)
    EXCLUDE_PATHS: tuple[str, ...] = (
        "/health",
        "/favicon.ico",
    )

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]
        request.state.correlation_id = correlation_id
        path = request.url.path
        quiet = path.startswith(self.EXCLUDE_PATHS)

        if not quiet:
            logger.info(f"[{correlation_id}] --> {request.method} {path}")

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"[{correlation_id}] <-- {request.method} {path} ERROR in {duration_ms:.2f}ms: {e}")
            raise
        duration_ms = (time.perf_counter() - start_time) * 1000

        if not quiet:
            log_level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                log_level,
                f"[{correlation_id}] <-- {request.method} {path} {response.status_code} in {duration_ms:.2f}ms",
            )

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}"
        return response
