"""Application-wide store: the active tool tab plus one instance of every session."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .conversation import ConversationSession
from .detection import DetectionSession
from .state import logger
from .tools import SpeechSession, TranscriptionSession


class Tab(str, Enum):
    DETECTOR = "detector"
    API = "api"
    TOOLS = "tools"
    CHAT = "chat"


@dataclass
class AppStore:
    """Created once at application start and never torn down.

    Sessions never share mutable state; each one is reset on its own.
    """

    client: Any
    active_tab: Tab = Tab.DETECTOR
    detection: DetectionSession = field(init=False)
    transcription: TranscriptionSession = field(init=False)
    speech: SpeechSession = field(init=False)
    conversation: ConversationSession = field(init=False)

    def __post_init__(self) -> None:
        self.detection = DetectionSession(self.client)
        self.transcription = TranscriptionSession(self.client)
        self.speech = SpeechSession(self.client)
        self.conversation = ConversationSession(self.client)

    def select_tab(self, tab: Tab | str) -> Tab:
        self.active_tab = Tab(tab)
        logger.info("active tab -> %s", self.active_tab.value)
        return self.active_tab


__all__ = ["AppStore", "Tab"]
