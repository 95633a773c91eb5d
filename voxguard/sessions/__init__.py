"""Per-tool session state machines.

Modules follow the tools offered to the user:

1. `detection` – select a file, analyze it, settle on a verdict.
2. `tools` – automatic transcription and on-demand speech synthesis.
3. `conversation` – chat with the assistant, one reply in flight at a time.
4. `store` – the application store owning the active tab and every session.
"""

from .conversation import ConversationSession
from .detection import DetectionPhase, DetectionSession
from .state import AttemptSession, SessionState
from .store import AppStore, Tab
from .tools import SpeechPhase, SpeechSession, TranscriptionPhase, TranscriptionSession

__all__ = [
    "AppStore",
    "AttemptSession",
    "ConversationSession",
    "DetectionPhase",
    "DetectionSession",
    "SessionState",
    "SpeechPhase",
    "SpeechSession",
    "Tab",
    "TranscriptionPhase",
    "TranscriptionSession",
]
