"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at the /metrics endpoint.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

event_writes = Counter(
    'event_writes_total',
    'Event create/update attempts',
    ['operation', 'status']  # create/update, success/invalid/conflict
)

booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking attempts',
    ['status']  # success, invalid, missing_event
)

db_connection_attempts = Counter(
    'db_connection_attempts_total',
    'Physical database connection attempts',
    ['result']  # success, error
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_event_write(operation: str, status: str):
    event_writes.labels(operation=operation, status=status).inc()


def record_booking_attempt(status: str):
    """Record booking attempt. Status: success, invalid, missing_event"""
    booking_attempts.labels(status=status).inc()


def record_connection_attempt(success: bool):
    result = "success" if success else "error"
    db_connection_attempts.labels(result=result).inc()
