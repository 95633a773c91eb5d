"""Shared lifecycle machinery for single-request tool sessions.

A session owns exactly one immutable :class:`SessionState` snapshot at a
time. Dispatching an intent swaps the snapshot synchronously and, when a
remote call is needed, schedules one asyncio task whose completion performs
exactly one further swap. Every swap out of a busy phase is guarded by the
attempt number captured when the task was scheduled, so a superseded
request can never overwrite newer state.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from voxguard.domain.models import AudioBlob
from voxguard.services.errors import ClassifierError, EncodingError
from voxguard.telemetry import record_session_outcome

logger = logging.getLogger("voxguard.sessions")


@dataclass(frozen=True)
class SessionState:
    """Read-only snapshot of one session, safe to hand to the presentation layer."""

    phase: Enum
    attempt: int = 0
    file: Optional[AudioBlob] = None
    text: Optional[str] = None
    result: Any = None
    error: Optional[str] = None

    @property
    def filename(self) -> str | None:
        return self.file.filename if self.file is not None else None


class AttemptSession:
    """Base class for sessions that run at most one remote request at a time.

    Subclasses declare their phases and implement :meth:`_settled_state`,
    which maps a successful call's return value to the next snapshot.
    """

    name: str = "session"
    idle_phase: Enum
    busy_phase: Enum
    failed_phase: Enum
    failure_message: str = "Something went wrong. Please try again."

    def __init__(self, client: Any) -> None:
        self._client = client
        self._attempt = 0
        self._state = SessionState(phase=self.idle_phase)
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def busy(self) -> bool:
        """True while in the busy phase or while a superseded request is still running."""

        return self._state.phase is self.busy_phase or self.pending is not None

    @property
    def pending(self) -> asyncio.Task | None:
        """The in-flight task, if any; awaiting it waits for the next settle."""

        if self._task is not None and not self._task.done():
            return self._task
        return None

    def reset(self) -> None:
        """Return to idle; an in-flight request keeps running but its result is ignored."""

        self._attempt += 1
        self._replace(SessionState(phase=self.idle_phase, attempt=self._attempt))

    def _replace(self, state: SessionState) -> None:
        previous = self._state.phase
        self._state = state
        logger.info(
            "%s attempt=%s %s -> %s",
            self.name,
            state.attempt,
            previous.value,
            state.phase.value,
        )

    def _start(
        self,
        work: Callable[[], Awaitable[Any]],
        *,
        file: AudioBlob | None = None,
        text: str | None = None,
    ) -> asyncio.Task:
        self._attempt += 1
        # Entering the busy phase drops any previous result or error.
        busy = SessionState(phase=self.busy_phase, attempt=self._attempt, file=file, text=text)
        self._replace(busy)
        self._task = asyncio.create_task(
            self._run(busy, work),
            name=f"{self.name}-attempt-{busy.attempt}",
        )
        return self._task

    async def _run(self, busy: SessionState, work: Callable[[], Awaitable[Any]]) -> None:
        failed = False
        value: Any = None
        try:
            value = await work()
        except (EncodingError, ClassifierError, ValueError) as exc:
            logger.warning("%s attempt=%s failed: %s", self.name, busy.attempt, exc)
            failed = True
        except Exception:
            logger.exception("%s attempt=%s crashed", self.name, busy.attempt)
            failed = True

        if busy.attempt != self._attempt:
            logger.info(
                "%s dropping stale attempt=%s (current=%s)",
                self.name,
                busy.attempt,
                self._attempt,
            )
            record_session_outcome(self.name, "stale")
            return

        next_state = self._failed_state(busy) if failed else self._settled_state(busy, value)
        outcome = "failure" if next_state.phase is self.failed_phase else "success"
        record_session_outcome(self.name, outcome)
        self._replace(next_state)

    def _failed_state(self, current: SessionState) -> SessionState:
        return SessionState(
            phase=self.failed_phase,
            attempt=current.attempt,
            file=current.file,
            text=current.text,
            error=self.failure_message,
        )

    def _settled_state(self, current: SessionState, value: Any) -> SessionState:
        raise NotImplementedError


__all__ = ["AttemptSession", "SessionState"]
