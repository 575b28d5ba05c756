"""Prometheus metrics for the API and the heartbeat loop."""
from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.responses import Response

METRICS_PATH = "/metrics"

# HTTP
http_requests_total = Counter(
    "mission_control_http_requests_total",
    "API requests by route template and status",
    ["method", "route", "status_code"],
)

http_request_duration_seconds = Histogram(
    "mission_control_http_request_duration_seconds",
    "API request latency",
    ["method", "route"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

http_errors_total = Counter(
    "mission_control_http_errors_total",
    "API requests that ended in a 5xx or an unhandled exception",
    ["method", "route", "error_type"],
)

# Heartbeat
heartbeat_ticks_total = Counter(
    "mission_control_heartbeat_ticks_total",
    "Heartbeat checks by outcome",
    ["outcome"],
)

pending_tasks = Gauge(
    "mission_control_pending_tasks",
    "Tasks in Planning at the last successful heartbeat",
)


def setup_metrics(app: FastAPI) -> None:
    """Expose the default registry at ``/metrics``."""

    @app.get(METRICS_PATH, include_in_schema=False)
    async def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
