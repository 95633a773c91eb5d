"""Integration-style tests for the HTTP surface of the session store."""

from __future__ import annotations

import io
import wave

import pytest
from fastapi.testclient import TestClient

from voxguard.main import create_app
from voxguard.services.response_contract import parse_detection

from .conftest import PCM_SAMPLES

MP3_UPLOAD = ("voice.mp3", b"ID3\x03\x00fake-mp3-frames", "audio/mpeg")


@pytest.fixture
def api(service, client_factory):
    """TestClient kept open so background session tasks share one event loop."""

    app = create_app(client=client_factory())
    with TestClient(app) as test_client:
        yield test_client


def test_store_and_client_live_only_inside_lifespan(fake_client):
    closed = []

    async def aclose():
        closed.append(True)

    fake_client.aclose = aclose
    app = create_app(client=fake_client)
    assert not hasattr(app.state, "store")

    with TestClient(app) as test_client:
        assert app.state.store.client is fake_client
        assert test_client.get("/detector").json()["phase"] == "idle"
        assert closed == []

    assert closed == [True]


def test_health(api):
    response = api.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_detector_flow_hindi_ai(api, service):
    assert api.get("/detector").json()["phase"] == "idle"

    selected = api.post("/detector/file", files={"audio_file": MP3_UPLOAD})
    assert selected.status_code == 200
    assert selected.json()["phase"] == "file_selected"
    assert selected.json()["filename"] == "voice.mp3"

    analyzed = api.post("/detector/analyze", params={"wait": True})
    assert analyzed.status_code == 200
    payload = analyzed.json()
    assert payload["phase"] == "result"
    assert payload["result"]["language"] == "Hindi"
    assert payload["result"]["languageLabel"] == "हिंदी (Hindi)"
    assert payload["result"]["classification"] == "AI_GENERATED"
    assert payload["projection"]["slices"] == [98.2, 1.8]
    assert payload["projection"]["band"] == "negative"
    assert payload["projection"]["percentInteger"] == "98%"
    assert payload["error"] is None

    body = service.body()
    assert body["audioFormat"] == "mp3"
    assert "language" not in body


def test_detector_error_status_hides_result(api, service):
    service.respond("/api/voice-detection", json_body={"status": "error"})
    api.post("/detector/file", files={"audio_file": MP3_UPLOAD})

    payload = api.post("/detector/analyze", params={"wait": True}).json()

    assert payload["phase"] == "error"
    assert payload["result"] is None
    assert payload["projection"] is None
    assert payload["error"]


def test_detector_analyze_without_file_conflicts(api):
    response = api.post("/detector/analyze")

    assert response.status_code == 409
    assert response.json()["detail"] == "Select an audio file first"


def test_detector_rejects_unsupported_upload(api):
    response = api.post(
        "/detector/file",
        files={"audio_file": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert api.get("/detector").json()["phase"] == "idle"


def test_detector_rejects_empty_upload(api):
    response = api.post(
        "/detector/file",
        files={"audio_file": ("empty.mp3", b"", "audio/mpeg")},
    )

    assert response.status_code == 400


def test_new_file_clears_displayed_result(api):
    api.post("/detector/file", files={"audio_file": MP3_UPLOAD})
    api.post("/detector/analyze", params={"wait": True})

    payload = api.post(
        "/detector/file",
        files={"audio_file": ("next.wav", b"RIFFdata", "audio/wav")},
    ).json()

    assert payload["phase"] == "file_selected"
    assert payload["result"] is None
    assert payload["filename"] == "next.wav"


def test_transcription_tool(api):
    payload = api.post(
        "/tools/transcription",
        files={"audio_file": MP3_UPLOAD},
        params={"wait": True},
    ).json()

    assert payload["phase"] == "transcribed"
    assert payload["text"] == "hello world"


def test_speech_tool_serves_wav(api):
    payload = api.post("/tools/speech", json={"text": "Namaste"}, params={"wait": True}).json()

    assert payload["phase"] == "ready"
    assert payload["audioUrl"] == "/tools/speech/audio"
    assert payload["sampleRate"] == 24000

    audio = api.get("/tools/speech/audio")
    assert audio.status_code == 200
    assert audio.headers["content-type"] == "audio/wav"
    with wave.open(io.BytesIO(audio.content), "rb") as wav_file:
        assert wav_file.readframes(wav_file.getnframes()) == PCM_SAMPLES


def test_speech_audio_missing_before_generation(api):
    assert api.get("/tools/speech/audio").status_code == 404


def test_speech_rejects_blank_text(api):
    response = api.post("/tools/speech", json={"text": "   "})

    assert response.status_code == 400
    assert api.get("/tools/speech").json()["phase"] == "idle"


def test_chat_exchange(api, service):
    initial = api.get("/chat").json()
    assert len(initial["turns"]) == 1

    payload = api.post("/chat", json={"message": "Can AI fake Tamil?"}, params={"wait": True}).json()

    assert [turn["role"] for turn in payload["turns"]] == ["assistant", "user", "assistant"]
    assert payload["composing"] is False
    assert service.body()["history"] == [initial["turns"][0]]


def test_chat_empty_message_rejected(api):
    response = api.post("/chat", json={"message": "  "})

    assert response.status_code == 400
    assert len(api.get("/chat").json()["turns"]) == 1


def test_chat_failure_inserts_fallback(api, service):
    service.fail("/api/chat")

    payload = api.post("/chat", json={"message": "hi"}, params={"wait": True}).json()

    assert payload["turns"][-1] == {
        "role": "assistant",
        "text": "An error occurred. Please try again later.",
    }


def test_workspace_tab_switch_keeps_sessions(api):
    api.post("/detector/file", files={"audio_file": MP3_UPLOAD})

    response = api.put("/workspace/tab", json={"tab": "chat"})

    assert response.status_code == 200
    assert response.json()["activeTab"] == "chat"
    assert response.json()["detector"] == "file_selected"
    assert api.put("/workspace/tab", json={"tab": "settings"}).status_code == 400


def test_api_example_lists_languages(api):
    payload = api.get("/api-docs/example").json()

    assert payload["apiKeyHeader"] == "x-api-key"
    assert payload["response"]["confidenceScore"] == 0.982
    assert [language["code"] for language in payload["languages"]] == [
        "English",
        "Tamil",
        "Hindi",
        "Malayalam",
        "Telugu",
    ]


def test_api_example_response_is_a_complete_result(api):
    payload = api.get("/api-docs/example").json()

    result = parse_detection(payload["response"])

    assert result.is_success
    assert result.transcription


def test_metrics_exposed(api):
    api.post("/detector/file", files={"audio_file": MP3_UPLOAD})
    api.post("/detector/analyze", params={"wait": True})

    response = api.get("/metrics")

    assert response.status_code == 200
    assert "voxguard_session_outcomes_total" in response.text
