"""Conversation session with the voice-spoofing assistant."""

from __future__ import annotations

import asyncio
from typing import Any

from voxguard.domain.models import ConversationTurn, TurnRole
from voxguard.services.errors import ClassifierError
from voxguard.telemetry import record_session_outcome

from .state import logger

GREETING = (
    "Hello! I'm VoxGuard AI. How can I help you today with AI voice detection "
    "or cybersecurity?"
)
EMPTY_REPLY = "I'm sorry, I couldn't process that."
FAILURE_REPLY = "An error occurred. Please try again later."


class ConversationSession:
    """Ordered, append-only transcript of user and assistant turns.

    A submission appends the user turn immediately and flags the session as
    composing; the reply task then appends exactly one assistant turn (the
    reply or a fallback) and clears the flag in the same update. History is
    never truncated locally.
    """

    name = "chat"

    def __init__(self, client: Any) -> None:
        self._client = client
        self._generation = 0
        self._turns: tuple[ConversationTurn, ...] = ()
        self._composing = False
        self._task: asyncio.Task | None = None
        self._seed()

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        return self._turns

    @property
    def composing(self) -> bool:
        return self._composing

    @property
    def pending(self) -> asyncio.Task | None:
        if self._task is not None and not self._task.done():
            return self._task
        return None

    def submit(self, text: str) -> asyncio.Task | None:
        """Send a user message; returns ``None`` if rejected (empty or busy)."""

        message = (text or "").strip()
        if not message:
            logger.debug("chat submit ignored: empty message")
            return None
        if self._composing or self.pending is not None:
            logger.debug("chat submit ignored: reply in flight")
            return None

        history = self._turns
        self._turns = history + (ConversationTurn(TurnRole.USER, message),)
        self._composing = True
        logger.info("chat generation=%s user turn #%s", self._generation, len(self._turns))

        self._task = asyncio.create_task(
            self._reply(self._generation, message, history),
            name=f"chat-turn-{len(self._turns)}",
        )
        return self._task

    def reset(self) -> None:
        """Start over with only the greeting; a pending reply is discarded."""

        self._generation += 1
        self._seed()

    def _seed(self) -> None:
        self._turns = (ConversationTurn(TurnRole.ASSISTANT, GREETING),)
        self._composing = False

    async def _reply(
        self,
        generation: int,
        message: str,
        history: tuple[ConversationTurn, ...],
    ) -> None:
        outcome = "success"
        try:
            reply = await self._client.chat(message, history)
            text = reply or EMPTY_REPLY
        except ClassifierError as exc:
            logger.warning("chat reply failed: %s", exc)
            text, outcome = FAILURE_REPLY, "failure"
        except Exception:
            logger.exception("chat reply crashed")
            text, outcome = FAILURE_REPLY, "failure"

        if generation != self._generation:
            logger.info("chat dropping reply for stale generation=%s", generation)
            record_session_outcome(self.name, "stale")
            return

        record_session_outcome(self.name, outcome)
        self._turns = self._turns + (ConversationTurn(TurnRole.ASSISTANT, text),)
        self._composing = False


__all__ = ["ConversationSession", "EMPTY_REPLY", "FAILURE_REPLY", "GREETING"]
