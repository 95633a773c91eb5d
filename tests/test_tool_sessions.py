"""Transcription and speech tool sessions."""

from __future__ import annotations

import asyncio

import pytest

from voxguard.services import MalformedResponseError, TransportError
from voxguard.sessions import SpeechPhase, SpeechSession, TranscriptionPhase, TranscriptionSession

pytestmark = pytest.mark.anyio


async def test_transcription_starts_on_selection(fake_client, mp3_blob):
    session = TranscriptionSession(fake_client)

    task = session.select_file(mp3_blob)

    assert task is not None
    assert session.state.phase is TranscriptionPhase.TRANSCRIBING
    await task
    assert session.state.phase is TranscriptionPhase.TRANSCRIBED
    assert session.state.result.text == "hello world"
    assert fake_client.calls["transcribe"] == 1


async def test_transcription_rejects_selection_while_busy(fake_client, mp3_blob):
    gate = fake_client.hold()
    session = TranscriptionSession(fake_client)
    task = session.select_file(mp3_blob)
    await asyncio.sleep(0)

    assert session.select_file(mp3_blob) is None

    gate.set()
    await task
    assert fake_client.calls["transcribe"] == 1


async def test_transcription_failure(fake_client, mp3_blob):
    fake_client.transcription = TransportError("down")
    session = TranscriptionSession(fake_client)

    await session.select_file(mp3_blob)

    assert session.state.phase is TranscriptionPhase.FAILED
    assert session.state.result is None
    assert session.state.error


async def test_new_transcription_clears_previous_text(fake_client, mp3_blob):
    session = TranscriptionSession(fake_client)
    await session.select_file(mp3_blob)

    fake_client.hold()
    session.select_file(mp3_blob)

    assert session.state.phase is TranscriptionPhase.TRANSCRIBING
    assert session.state.result is None
    fake_client.gate.set()
    await session.pending


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
async def test_speech_ignores_empty_text(fake_client, text):
    session = SpeechSession(fake_client)

    assert session.generate(text) is None
    assert session.state.phase is SpeechPhase.IDLE
    assert fake_client.calls["speech"] == 0


async def test_speech_generation_ready(fake_client):
    session = SpeechSession(fake_client)

    task = session.generate("  Vanakkam  ")
    assert session.state.phase is SpeechPhase.SYNTHESIZING
    assert session.state.text == "Vanakkam"
    await task

    assert session.state.phase is SpeechPhase.READY
    assert session.state.result.wav_bytes.startswith(b"RIFF")


async def test_speech_rejects_reentry(fake_client):
    gate = fake_client.hold()
    session = SpeechSession(fake_client)
    task = session.generate("one")
    await asyncio.sleep(0)

    assert session.generate("two") is None

    gate.set()
    await task
    assert fake_client.calls["speech"] == 1
    assert session.state.text == "one"


async def test_speech_failure(fake_client):
    fake_client.speech = MalformedResponseError("no audio")
    session = SpeechSession(fake_client)

    await session.generate("hello")

    assert session.state.phase is SpeechPhase.FAILED
    assert session.state.result is None


async def test_speech_reset_drops_in_flight_result(fake_client):
    gate = fake_client.hold()
    session = SpeechSession(fake_client)
    task = session.generate("hello")
    await asyncio.sleep(0)

    session.reset()
    gate.set()
    await task

    assert session.state.phase is SpeechPhase.IDLE
    assert session.state.result is None


async def test_speech_after_reset_waits_for_orphaned_request(fake_client):
    gate = fake_client.hold()
    session = SpeechSession(fake_client)
    first = session.generate("one")
    await asyncio.sleep(0)

    session.reset()

    assert session.state.phase is SpeechPhase.IDLE
    assert session.generate("two") is None
    assert fake_client.calls["speech"] == 1

    gate.set()
    await first
    await session.generate("two")
    assert fake_client.calls["speech"] == 2
    assert session.state.text == "two"


async def test_transcription_after_reset_waits_for_orphaned_request(fake_client, mp3_blob):
    gate = fake_client.hold()
    session = TranscriptionSession(fake_client)
    first = session.select_file(mp3_blob)
    await asyncio.sleep(0)

    session.reset()

    assert session.select_file(mp3_blob) is None
    assert fake_client.calls["transcribe"] == 1

    gate.set()
    await first
    assert session.state.phase is TranscriptionPhase.IDLE
