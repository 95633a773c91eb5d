"""Domain value objects."""

from .models import (
    AudioBlob,
    AudioFormat,
    Classification,
    ConversationTurn,
    DetectionResult,
    DetectionStatus,
    Language,
    SpeechResult,
    TranscriptionResult,
    TurnRole,
)

__all__ = [
    "AudioBlob",
    "AudioFormat",
    "Classification",
    "ConversationTurn",
    "DetectionResult",
    "DetectionStatus",
    "Language",
    "SpeechResult",
    "TranscriptionResult",
    "TurnRole",
]
