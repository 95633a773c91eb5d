"""Pydantic schemas used as views of the session store."""

from .chat import ChatRequest, ConversationView, TurnView
from .common import ErrorResponse
from .detection import DetectionResultView, DetectorStateView, ProjectionView
from .tools import SpeechStateView, TextToSpeechRequest, TranscriptionStateView
from .workspace import ApiExampleView, LanguageView, TabRequest, WorkspaceView

__all__ = [
    "ApiExampleView",
    "ChatRequest",
    "ConversationView",
    "DetectionResultView",
    "DetectorStateView",
    "ErrorResponse",
    "LanguageView",
    "ProjectionView",
    "SpeechStateView",
    "TabRequest",
    "TextToSpeechRequest",
    "TranscriptionStateView",
    "TurnView",
    "WorkspaceView",
]
