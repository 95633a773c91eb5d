"""Failure taxonomy shared by the encoder, the classifier client and sessions.

The distinction between the classes is diagnostic only: every session
collapses them into its single failed phase.
"""

from __future__ import annotations


class EncodingError(RuntimeError):
    """Raised when an audio source cannot be read or is not a supported format."""


class ClassifierError(RuntimeError):
    """Base class for failures talking to the remote inference service."""


class TransportError(ClassifierError):
    """Raised on network failures, timeouts and non-success responses."""


class MalformedResponseError(ClassifierError):
    """Raised when a response misses required fields or has the wrong types."""


__all__ = [
    "EncodingError",
    "ClassifierError",
    "TransportError",
    "MalformedResponseError",
]
