"""Detection session: one file, one explicit analyze intent, one verdict."""

from __future__ import annotations

import asyncio
from enum import Enum

from voxguard.domain.models import AudioBlob, DetectionResult
from voxguard.services.encoder import encode_audio
from voxguard.telemetry import record_detection

from .state import AttemptSession, SessionState, logger


class DetectionPhase(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    ANALYZING = "analyzing"
    RESULT = "result"
    ERROR = "error"


class DetectionSession(AttemptSession):
    """Drive one detection attempt from file selection to a settled verdict."""

    name = "detection"
    idle_phase = DetectionPhase.IDLE
    busy_phase = DetectionPhase.ANALYZING
    failed_phase = DetectionPhase.ERROR
    failure_message = "We couldn't analyze this recording. Please try again."

    def select_file(self, blob: AudioBlob) -> SessionState:
        """Select a new file; any previous result, error or in-flight attempt is discarded."""

        self._attempt += 1
        self._replace(
            SessionState(
                phase=DetectionPhase.FILE_SELECTED,
                attempt=self._attempt,
                file=blob,
            )
        )
        return self._state

    def analyze(self) -> asyncio.Task | None:
        """Start analysis of the selected file.

        Returns the scheduled task, or ``None`` when there is nothing to
        analyze or a request is already in flight.
        """

        blob = self._state.file
        if blob is None:
            logger.debug("detection analyze ignored: no file selected")
            return None
        if self.busy:
            logger.debug("detection analyze ignored: attempt=%s in flight", self._attempt)
            return None

        async def work() -> DetectionResult:
            encoded = encode_audio(blob)
            return await self._client.detect_voice(encoded)

        return self._start(work, file=blob)

    def _settled_state(self, current: SessionState, value: DetectionResult) -> SessionState:
        if not value.is_success:
            return self._failed_state(current)

        record_detection(value.classification.value)
        return SessionState(
            phase=DetectionPhase.RESULT,
            attempt=current.attempt,
            file=current.file,
            result=value,
        )


__all__ = ["DetectionPhase", "DetectionSession"]
