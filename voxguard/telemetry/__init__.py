"""Telemetry helpers and metrics."""

from .metrics import (
    DETECTIONS,
    ERROR_COUNTER,
    REMOTE_CALL_LATENCY,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    SESSION_OUTCOMES,
    observe_remote_call,
    observe_request,
    record_detection,
    record_session_outcome,
)

__all__ = [
    "DETECTIONS",
    "ERROR_COUNTER",
    "REMOTE_CALL_LATENCY",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "SESSION_OUTCOMES",
    "observe_remote_call",
    "observe_request",
    "record_detection",
    "record_session_outcome",
]
