"""Schemas for the assistant conversation."""

from typing import List

from pydantic import BaseModel

from voxguard.sessions import ConversationSession


class ChatRequest(BaseModel):
    message: str


class TurnView(BaseModel):
    role: str
    text: str


class ConversationView(BaseModel):
    turns: List[TurnView]
    composing: bool

    @classmethod
    def from_session(cls, session: ConversationSession) -> "ConversationView":
        return cls(
            turns=[TurnView(role=turn.role.value, text=turn.text) for turn in session.turns],
            composing=session.composing,
        )
