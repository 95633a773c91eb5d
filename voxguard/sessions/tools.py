"""Secondary tools: free-form transcription and text-to-speech generation."""

from __future__ import annotations

import asyncio
from enum import Enum

from voxguard.domain.models import AudioBlob, SpeechResult, TranscriptionResult
from voxguard.services.encoder import encode_audio

from .state import AttemptSession, SessionState, logger


class TranscriptionPhase(str, Enum):
    IDLE = "idle"
    TRANSCRIBING = "transcribing"
    TRANSCRIBED = "transcribed"
    FAILED = "failed"


class SpeechPhase(str, Enum):
    IDLE = "idle"
    SYNTHESIZING = "synthesizing"
    READY = "ready"
    FAILED = "failed"


class TranscriptionSession(AttemptSession):
    """Transcribe a file as soon as it is selected; there is no confirm step."""

    name = "transcription"
    idle_phase = TranscriptionPhase.IDLE
    busy_phase = TranscriptionPhase.TRANSCRIBING
    failed_phase = TranscriptionPhase.FAILED
    failure_message = "We couldn't transcribe this recording. Please try again."

    def select_file(self, blob: AudioBlob) -> asyncio.Task | None:
        if self.busy:
            logger.debug("transcription ignored: attempt=%s in flight", self._attempt)
            return None

        async def work() -> TranscriptionResult:
            return await self._client.transcribe_audio(encode_audio(blob))

        return self._start(work, file=blob)

    def _settled_state(self, current: SessionState, value: TranscriptionResult) -> SessionState:
        return SessionState(
            phase=TranscriptionPhase.TRANSCRIBED,
            attempt=current.attempt,
            file=current.file,
            result=value,
        )


class SpeechSession(AttemptSession):
    """Generate speech for user text on explicit request."""

    name = "speech"
    idle_phase = SpeechPhase.IDLE
    busy_phase = SpeechPhase.SYNTHESIZING
    failed_phase = SpeechPhase.FAILED
    failure_message = "We couldn't generate speech for this text. Please try again."

    def generate(self, text: str) -> asyncio.Task | None:
        cleaned = (text or "").strip()
        if not cleaned:
            logger.debug("speech ignored: empty text")
            return None
        if self.busy:
            logger.debug("speech ignored: attempt=%s in flight", self._attempt)
            return None

        async def work() -> SpeechResult:
            return await self._client.generate_speech(cleaned)

        return self._start(work, text=cleaned)

    def _settled_state(self, current: SessionState, value: SpeechResult) -> SessionState:
        return SessionState(
            phase=SpeechPhase.READY,
            attempt=current.attempt,
            text=current.text,
            result=value,
        )


__all__ = [
    "SpeechPhase",
    "SpeechSession",
    "TranscriptionPhase",
    "TranscriptionSession",
]
