"""Domain value objects shared by the client, the sessions and the views."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Language(str, Enum):
    """Closed set of spoken languages the classifier understands."""

    ENGLISH = "English"
    TAMIL = "Tamil"
    HINDI = "Hindi"
    MALAYALAM = "Malayalam"
    TELUGU = "Telugu"

    @property
    def label(self) -> str:
        return _LANGUAGE_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "Language":
        """Resolve a language by value or name, ignoring case."""

        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unsupported language: {value!r}")


_LANGUAGE_LABELS = {
    Language.ENGLISH: "English",
    Language.TAMIL: "தமிழ் (Tamil)",
    Language.HINDI: "हिंदी (Hindi)",
    Language.MALAYALAM: "മലയാളം (Malayalam)",
    Language.TELUGU: "తెలుగు (Telugu)",
}


class Classification(str, Enum):
    AI_GENERATED = "AI_GENERATED"
    HUMAN = "HUMAN"


class DetectionStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class AudioFormat(str, Enum):
    MP3 = "mp3"
    WAV = "wav"
    M4A = "m4a"


_DATA_FIELDS = ("language", "classification", "confidence_score", "explanation", "transcription")


class DetectionResult(BaseModel):
    """Outcome of one classifier call; all-or-nothing and immutable."""

    status: DetectionStatus
    language: Optional[Language] = None
    classification: Optional[Classification] = None
    confidence_score: Optional[float] = Field(default=None, alias="confidenceScore", allow_inf_nan=False)
    explanation: Optional[str] = None
    transcription: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value: object) -> object:
        if value is None:
            return None
        return Language.parse(value)

    @field_validator("classification", mode="before")
    @classmethod
    def _parse_classification(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("confidence_score", mode="before")
    @classmethod
    def _reject_boolean_confidence(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("confidenceScore must be a number, not a boolean")
        return value

    @field_validator("confidence_score", mode="after")
    @classmethod
    def _clamp_confidence(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return max(0.0, min(1.0, float(value)))

    @model_validator(mode="after")
    def _check_completeness(self) -> "DetectionResult":
        present = [name for name in _DATA_FIELDS if getattr(self, name) is not None]
        if self.status is DetectionStatus.SUCCESS and len(present) != len(_DATA_FIELDS):
            missing = sorted(set(_DATA_FIELDS) - set(present))
            raise ValueError(f"successful result is missing fields: {', '.join(missing)}")
        if self.status is DetectionStatus.ERROR and present:
            raise ValueError("error result must not carry data fields")
        return self

    @property
    def is_success(self) -> bool:
        return self.status is DetectionStatus.SUCCESS

    @classmethod
    def failed(cls) -> "DetectionResult":
        """Return the data-less error result."""

        return cls(status=DetectionStatus.ERROR)


class TurnRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationTurn:
    """One message of the conversation, tagged by speaker."""

    role: TurnRole
    text: str

    def as_payload(self) -> dict[str, str]:
        return {"role": self.role.value, "text": self.text}


@dataclass(frozen=True)
class TranscriptionResult:
    text: str


@dataclass(frozen=True)
class SpeechResult:
    """Synthesised speech as raw PCM plus its playable WAV rendition."""

    pcm: bytes
    wav_bytes: bytes
    sample_rate: int
    channels: int = 1
    sample_width: int = 2
    media_type: str = "audio/wav"

    @property
    def duration_seconds(self) -> float:
        frame_size = self.channels * self.sample_width
        return len(self.pcm) / float(frame_size * self.sample_rate)


@dataclass(frozen=True)
class AudioBlob:
    """User-selected audio bytes with their declared MIME type."""

    data: bytes
    mime_type: str
    filename: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)


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
