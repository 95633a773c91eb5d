"""Transcription and text-to-speech tool endpoints."""

from fastapi import APIRouter, File, HTTPException, UploadFile, status
from fastapi.responses import Response

from voxguard.controllers.dependencies import StoreDep, load_upload, reject_intent, settle
from voxguard.sessions import SpeechPhase
from voxguard.views import (
    ErrorResponse,
    SpeechStateView,
    TextToSpeechRequest,
    TranscriptionStateView,
)

router = APIRouter(prefix="/tools", tags=["tools"])

_AUDIO_FILE_UPLOAD = File(...)


@router.get("/transcription", response_model=TranscriptionStateView)
async def get_transcription(store: StoreDep) -> TranscriptionStateView:
    return TranscriptionStateView.from_state(store.transcription.state)


@router.post(
    "/transcription",
    response_model=TranscriptionStateView,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def transcribe(
    store: StoreDep,
    audio_file: UploadFile = _AUDIO_FILE_UPLOAD,
    wait: bool = False,
) -> TranscriptionStateView:
    """Upload a recording; transcription starts immediately."""

    blob = await load_upload(audio_file)
    task = store.transcription.select_file(blob)
    if task is None:
        raise reject_intent("Transcription already in progress")

    if wait:
        await settle(task)
    return TranscriptionStateView.from_state(store.transcription.state)


@router.post("/transcription/reset", response_model=TranscriptionStateView)
async def reset_transcription(store: StoreDep) -> TranscriptionStateView:
    store.transcription.reset()
    return TranscriptionStateView.from_state(store.transcription.state)


@router.get("/speech", response_model=SpeechStateView)
async def get_speech(store: StoreDep) -> SpeechStateView:
    return SpeechStateView.from_state(store.speech.state)


@router.post(
    "/speech",
    response_model=SpeechStateView,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def generate_speech(
    store: StoreDep,
    request: TextToSpeechRequest,
    wait: bool = False,
) -> SpeechStateView:
    """Synthesize the given text into speech."""

    if not request.text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Enter text to synthesize",
        )

    task = store.speech.generate(request.text)
    if task is None:
        raise reject_intent("Speech synthesis already in progress")

    if wait:
        await settle(task)
    return SpeechStateView.from_state(store.speech.state)


@router.get("/speech/audio", response_class=Response)
async def get_speech_audio(store: StoreDep) -> Response:
    """Return the synthesized speech as a WAV file."""

    state = store.speech.state
    if state.phase is not SpeechPhase.READY:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No synthesized audio available",
        )
    return Response(content=state.result.wav_bytes, media_type=state.result.media_type)


@router.post("/speech/reset", response_model=SpeechStateView)
async def reset_speech(store: StoreDep) -> SpeechStateView:
    store.speech.reset()
    return SpeechStateView.from_state(store.speech.state)
