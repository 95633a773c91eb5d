"""Async HTTP client for the remote voice detection service.

The service exposes four JSON endpoints (detection, transcription, speech
synthesis and chat) behind a header API key. All calls are single shot;
retrying with the same input is safe but never done here.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Sequence

import httpx

from voxguard.config.settings import settings
from voxguard.domain.models import (
    ConversationTurn,
    DetectionResult,
    SpeechResult,
    TranscriptionResult,
)
from voxguard.services.encoder import EncodedAudio
from voxguard.services.errors import (
    ClassifierError,
    MalformedResponseError,
    TransportError,
)
from voxguard.services.response_contract import (
    parse_chat,
    parse_detection,
    parse_speech,
    parse_transcription,
)
from voxguard.services.wav import pcm_to_wav
from voxguard.telemetry import observe_remote_call

logger = logging.getLogger(__name__)

DETECTION_PATH = "/voice-detection"
TRANSCRIPTION_PATH = "/transcription"
SPEECH_PATH = "/speech"
CHAT_PATH = "/chat"


class ClassifierClient:
    """Facade over the remote detection, transcription, speech and chat endpoints."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        api_key_header: str | None = None,
        timeout_seconds: float | None = None,
        sample_rate: int | None = None,
        channels: int | None = None,
        sample_width: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = settings.classifier
        key = api_key if api_key is not None else config.api_key.get_secret_value()
        headers = {"Content-Type": "application/json"}
        if key:
            headers[api_key_header or config.api_key_header] = key
        else:
            logger.warning("No API key configured for the classifier service")

        self._sample_rate = sample_rate or settings.speech.sample_rate
        self._channels = channels or settings.speech.channels
        self._sample_width = sample_width or settings.speech.sample_width
        self._client = httpx.AsyncClient(
            base_url=(base_url or config.base_url).rstrip("/"),
            headers=headers,
            timeout=timeout_seconds or config.timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def detect_voice(self, encoded: EncodedAudio) -> DetectionResult:
        """Submit audio for language detection, classification and transcription.

        Failures of any kind come back as ``DetectionResult.failed()``; the
        caller never has to handle an exception for a bad remote answer.
        """

        if not encoded.audio_base64:
            raise ValueError("encoded audio must not be empty")

        try:
            payload = await self._post("detect_voice", DETECTION_PATH, encoded.as_request_body())
            result = parse_detection(payload)
        except ClassifierError as exc:
            logger.warning("Voice detection failed: %s", exc)
            return DetectionResult.failed()

        if result.is_success:
            logger.info(
                "Voice detection language=%s classification=%s confidence=%.3f",
                result.language.value,
                result.classification.value,
                result.confidence_score,
            )
        else:
            logger.warning("Voice detection returned an error status")
        return result

    async def transcribe_audio(self, encoded: EncodedAudio) -> TranscriptionResult:
        """Return the transcript of the audio; raises ClassifierError on failure."""

        if not encoded.audio_base64:
            raise ValueError("encoded audio must not be empty")

        payload = await self._post("transcribe_audio", TRANSCRIPTION_PATH, encoded.as_request_body())
        response = parse_transcription(payload)
        return TranscriptionResult(text=response.text.strip())

    async def generate_speech(self, text: str) -> SpeechResult:
        """Synthesize ``text`` and return raw PCM plus a WAV-wrapped copy."""

        cleaned = text.strip()
        if not cleaned:
            raise ValueError("text to synthesize must not be empty")

        payload = await self._post("generate_speech", SPEECH_PATH, {"text": cleaned})
        response = parse_speech(payload)
        pcm = response.decode_pcm()
        if not pcm:
            raise MalformedResponseError("Speech endpoint returned no audio")

        sample_rate = response.sample_rate or self._sample_rate
        return SpeechResult(
            pcm=pcm,
            wav_bytes=pcm_to_wav(
                pcm,
                sample_rate=sample_rate,
                channels=self._channels,
                sample_width=self._sample_width,
            ),
            sample_rate=sample_rate,
            channels=self._channels,
            sample_width=self._sample_width,
        )

    async def chat(self, message: str, history: Sequence[ConversationTurn]) -> str:
        """Return the assistant reply to ``message`` given the prior turns.

        ``history`` is only read; appending turns is the caller's job. An
        empty string means the assistant had nothing to say.
        """

        body = {
            "message": message,
            "history": [turn.as_payload() for turn in history],
        }
        payload = await self._post("chat", CHAT_PATH, body)
        response = parse_chat(payload)
        return (response.text or "").strip()

    async def _post(self, operation: str, path: str, body: dict[str, Any]) -> Any:
        start_time = time.perf_counter()
        outcome = "error"
        try:
            response = await self._client.post(path, json=body)
            response.raise_for_status()
            payload = response.json()
            outcome = "ok"
            return payload
        except httpx.TimeoutException as exc:
            outcome = "timeout"
            raise TransportError(f"{operation} timed out") from exc
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"{operation} failed with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(f"{operation} could not reach the service: {exc}") from exc
        except ValueError as exc:
            raise MalformedResponseError(f"{operation} returned invalid JSON") from exc
        finally:
            observe_remote_call(operation, outcome, time.perf_counter() - start_time)


__all__ = ["ClassifierClient", "DETECTION_PATH", "TRANSCRIPTION_PATH", "SPEECH_PATH", "CHAT_PATH"]
