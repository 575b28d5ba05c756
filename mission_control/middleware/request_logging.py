"""Request logging middleware."""
import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from mission_control.middleware.metrics import (
    METRICS_PATH,
    http_errors_total,
    http_request_duration_seconds,
    http_requests_total,
)

logger = logging.getLogger("mission_control.access")


def _endpoint_label(request: Request) -> str:
    # Route template keeps label cardinality bounded (ids are not labels)
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request line and records HTTP metrics."""

    EXCLUDED_PATHS = {METRICS_PATH}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            endpoint = _endpoint_label(request)
            http_errors_total.labels(request.method, endpoint, type(exc).__name__).inc()
            logger.exception("%s %s failed", request.method, request.url.path)
            raise

        elapsed = time.perf_counter() - started
        endpoint = _endpoint_label(request)
        http_requests_total.labels(request.method, endpoint, str(response.status_code)).inc()
        http_request_duration_seconds.labels(request.method, endpoint).observe(elapsed)
        if response.status_code >= 500:
            http_errors_total.labels(request.method, endpoint, str(response.status_code)).inc()

        logger.info(
            "%s %s %d %.1f ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed * 1000,
        )
        return response
