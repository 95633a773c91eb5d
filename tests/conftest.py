"""Shared fixtures: a scripted remote service and in-process fakes."""

from __future__ import annotations

import asyncio
import base64
import json
from pathlib import Path
import sys
from typing import Any, Callable

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from voxguard.domain.models import (  # noqa: E402
    AudioBlob,
    DetectionResult,
    SpeechResult,
    TranscriptionResult,
)
from voxguard.services import ClassifierClient  # noqa: E402

HINDI_AI_PAYLOAD = {
    "status": "success",
    "language": "Hindi",
    "classification": "AI_GENERATED",
    "confidenceScore": 0.982,
    "explanation": "Artificial prosody detected in Hindi aspirated stops.",
    "transcription": "नमस्ते, यह एक परीक्षण है।",
}

PCM_SAMPLES = b"\x00\x00\x10\x00\x20\x00\x30\x00"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def mp3_blob() -> AudioBlob:
    return AudioBlob(data=b"ID3\x03\x00fake-mp3-frames", mime_type="audio/mpeg", filename="sample.mp3")


class ScriptedService:
    """Records requests and answers them from per-path handlers."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handlers: dict[str, Callable[[httpx.Request], httpx.Response]] = {
            "/api/voice-detection": lambda request: httpx.Response(200, json=HINDI_AI_PAYLOAD),
            "/api/transcription": lambda request: httpx.Response(
                200, json={"status": "success", "text": " hello world "}
            ),
            "/api/speech": lambda request: httpx.Response(
                200,
                json={
                    "status": "success",
                    "audioBase64": base64.b64encode(PCM_SAMPLES).decode("ascii"),
                },
            ),
            "/api/chat": lambda request: httpx.Response(
                200, json={"status": "success", "text": "Voice clones mimic timbre."}
            ),
        }

    def respond(self, path: str, *, status_code: int = 200, json_body: Any = None, content: bytes | None = None) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        self.handlers[path] = handler

    def fail(self, path: str, exc_type: type[Exception] = httpx.ConnectError) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_type("service unreachable", request=request)

        self.handlers[path] = handler

    def body(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handlers[request.url.path](request)


@pytest.fixture
def service() -> ScriptedService:
    return ScriptedService()


@pytest.fixture
def client_factory(service: ScriptedService) -> Callable[..., ClassifierClient]:
    def build(**overrides: Any) -> ClassifierClient:
        options = {
            "base_url": "https://voxguard.test/api",
            "api_key": "sk_test_key",
            "timeout_seconds": 5.0,
            "sample_rate": 24000,
            "transport": httpx.MockTransport(service),
        }
        options.update(overrides)
        return ClassifierClient(**options)

    return build


class FakeClient:
    """In-process stand-in for ClassifierClient with optional gating."""

    def __init__(self) -> None:
        self.gate: asyncio.Event | None = None
        self.calls: dict[str, int] = {"detect": 0, "transcribe": 0, "speech": 0, "chat": 0}
        self.histories: list[tuple] = []
        self.detect_result: DetectionResult | Exception = DetectionResult.model_validate(HINDI_AI_PAYLOAD)
        self.transcription: TranscriptionResult | Exception = TranscriptionResult(text="hello world")
        self.speech: SpeechResult | Exception = SpeechResult(
            pcm=PCM_SAMPLES, wav_bytes=b"RIFF" + PCM_SAMPLES, sample_rate=24000
        )
        self.reply: str | Exception = "Voice clones mimic timbre."

    def hold(self) -> asyncio.Event:
        self.gate = asyncio.Event()
        return self.gate

    async def _outcome(self, value: Any) -> Any:
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(value, Exception):
            raise value
        return value

    async def detect_voice(self, encoded):
        self.calls["detect"] += 1
        return await self._outcome(self.detect_result)

    async def transcribe_audio(self, encoded):
        self.calls["transcribe"] += 1
        return await self._outcome(self.transcription)

    async def generate_speech(self, text):
        self.calls["speech"] += 1
        return await self._outcome(self.speech)

    async def chat(self, message, history):
        self.calls["chat"] += 1
        self.histories.append(tuple(history))
        return await self._outcome(self.reply)


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()
