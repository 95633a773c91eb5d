"""Pydantic models for validating the remote service JSON responses.

Every endpoint answers with a ``status`` discriminator; anything other than
``"success"`` is a remote error. Payloads that do not match the schema are
reported as :class:`MalformedResponseError` so downstream code only ever
sees normalized, type-safe objects.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from voxguard.domain.models import DetectionResult, DetectionStatus
from voxguard.services.errors import MalformedResponseError, TransportError

_T = TypeVar("_T", bound=BaseModel)


class _StatusEnvelope(BaseModel):
    status: str

    model_config = ConfigDict(extra="allow")


class TranscriptionResponse(BaseModel):
    status: str
    text: str

    model_config = ConfigDict(extra="allow")


class SpeechResponse(BaseModel):
    status: str
    audio_base64: str = Field(alias="audioBase64")
    sample_rate: Optional[int] = Field(default=None, alias="sampleRate", gt=0)

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("audio_base64")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("audioBase64 is empty")
        return value

    def decode_pcm(self) -> bytes:
        try:
            return base64.b64decode(self.audio_base64, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise MalformedResponseError(f"Speech payload is not valid base64: {exc}") from exc


class ChatResponse(BaseModel):
    status: str
    text: Optional[str] = None

    model_config = ConfigDict(extra="allow")


def _require_mapping(payload: Any, endpoint: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise MalformedResponseError(f"{endpoint} returned a non-object JSON body")
    return payload


def _check_status(payload: Mapping[str, Any], endpoint: str) -> None:
    try:
        envelope = _StatusEnvelope.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(f"{endpoint} response has no status: {exc}") from exc
    if envelope.status != DetectionStatus.SUCCESS.value:
        raise TransportError(f"{endpoint} reported status={envelope.status!r}")


def _validate(model: Type[_T], payload: Mapping[str, Any], endpoint: str) -> _T:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(f"{endpoint} response failed validation: {exc}") from exc


def parse_detection(payload: Any) -> DetectionResult:
    """Build a DetectionResult, mapping a remote error status to the failed result."""

    data = _require_mapping(payload, "voice-detection")
    try:
        _check_status(data, "voice-detection")
    except TransportError:
        return DetectionResult.failed()

    fields = {key: data.get(key) for key in (
        "status",
        "language",
        "classification",
        "confidenceScore",
        "explanation",
        "transcription",
    )}
    return _validate(DetectionResult, fields, "voice-detection")


def parse_transcription(payload: Any) -> TranscriptionResponse:
    data = _require_mapping(payload, "transcription")
    _check_status(data, "transcription")
    return _validate(TranscriptionResponse, data, "transcription")


def parse_speech(payload: Any) -> SpeechResponse:
    data = _require_mapping(payload, "speech")
    _check_status(data, "speech")
    return _validate(SpeechResponse, data, "speech")


def parse_chat(payload: Any) -> ChatResponse:
    data = _require_mapping(payload, "chat")
    _check_status(data, "chat")
    return _validate(ChatResponse, data, "chat")


__all__ = [
    "ChatResponse",
    "SpeechResponse",
    "TranscriptionResponse",
    "parse_chat",
    "parse_detection",
    "parse_speech",
    "parse_transcription",
]
