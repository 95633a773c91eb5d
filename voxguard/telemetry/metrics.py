"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    buckets=(
        0.005,
        0.01,
        0.025,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.5,
        5.0,
        10.0,
    ),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in internal server error responses",
    ("method", "route"),
)

REMOTE_CALL_LATENCY = Histogram(
    "voxguard_remote_call_duration_seconds",
    "Duration of calls to the remote inference service",
    ("operation", "outcome"),
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)

SESSION_OUTCOMES = Counter(
    "voxguard_session_outcomes_total",
    "Settled session attempts by tool and outcome",
    ("session", "outcome"),
)

DETECTIONS = Counter(
    "voxguard_detections_total",
    "Successful detections by classification",
    ("classification",),
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record metrics for a completed HTTP request."""

    safe_route = route or "unknown"
    safe_method = method or "UNKNOWN"
    status_label = str(status_code)
    observed_duration = duration_seconds if duration_seconds >= 0 else 0

    REQUEST_COUNT.labels(
        method=safe_method,
        route=safe_route,
        status=status_label,
    ).inc()
    REQUEST_LATENCY.labels(
        method=safe_method,
        route=safe_route,
    ).observe(observed_duration)

    if status_code >= 500:
        ERROR_COUNTER.labels(
            method=safe_method,
            route=safe_route,
        ).inc()


def observe_remote_call(operation: str, outcome: str, duration_seconds: float) -> None:
    """Record the latency of one remote service call."""

    REMOTE_CALL_LATENCY.labels(operation=operation, outcome=outcome).observe(
        max(duration_seconds, 0.0)
    )


def record_session_outcome(session: str, outcome: str) -> None:
    """Count a settled attempt (``success``, ``failure`` or ``stale``)."""

    SESSION_OUTCOMES.labels(session=session, outcome=outcome).inc()


def record_detection(classification: str) -> None:
    DETECTIONS.labels(classification=classification).inc()
