"""Schemas for the transcription and text-to-speech tools."""

from typing import Optional

from pydantic import BaseModel, Field

from voxguard.sessions import SessionState, SpeechPhase


class TranscriptionStateView(BaseModel):
    phase: str = Field(..., description="idle, transcribing, transcribed or failed")
    attempt: int
    filename: Optional[str] = None
    text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_state(cls, state: SessionState) -> "TranscriptionStateView":
        return cls(
            phase=state.phase.value,
            attempt=state.attempt,
            filename=state.filename,
            text=state.result.text if state.result is not None else None,
            error=state.error,
        )


class TextToSpeechRequest(BaseModel):
    text: str


class SpeechStateView(BaseModel):
    phase: str = Field(..., description="idle, synthesizing, ready or failed")
    attempt: int
    text: Optional[str] = None
    audioUrl: Optional[str] = Field(None, description="WAV download once ready")
    mediaType: Optional[str] = None
    sampleRate: Optional[int] = None
    durationSeconds: Optional[float] = None
    error: Optional[str] = None

    @classmethod
    def from_state(cls, state: SessionState) -> "SpeechStateView":
        speech = state.result if state.phase is SpeechPhase.READY else None
        return cls(
            phase=state.phase.value,
            attempt=state.attempt,
            text=state.text,
            audioUrl="/tools/speech/audio" if speech is not None else None,
            mediaType=speech.media_type if speech is not None else None,
            sampleRate=speech.sample_rate if speech is not None else None,
            durationSeconds=round(speech.duration_seconds, 3) if speech is not None else None,
            error=state.error,
        )
