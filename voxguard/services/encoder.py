"""Audio encoding helpers: raw upload bytes to transport-safe base64 text."""

from __future__ import annotations

import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from voxguard.domain.models import AudioBlob, AudioFormat
from voxguard.services.errors import EncodingError

_MIME_FORMATS: Final[dict[str, AudioFormat]] = {
    "audio/mpeg": AudioFormat.MP3,
    "audio/mp3": AudioFormat.MP3,
    "audio/wav": AudioFormat.WAV,
    "audio/x-wav": AudioFormat.WAV,
    "audio/wave": AudioFormat.WAV,
    "audio/vnd.wave": AudioFormat.WAV,
    "audio/mp4": AudioFormat.M4A,
    "audio/m4a": AudioFormat.M4A,
    "audio/x-m4a": AudioFormat.M4A,
}

_EXTENSION_FORMATS: Final[dict[str, AudioFormat]] = {
    ".mp3": AudioFormat.MP3,
    ".wav": AudioFormat.WAV,
    ".m4a": AudioFormat.M4A,
}


@dataclass(frozen=True)
class EncodedAudio:
    """Base64 payload ready for the classifier request body."""

    audio_base64: str
    audio_format: AudioFormat

    def as_request_body(self) -> dict[str, str]:
        return {"audioBase64": self.audio_base64, "audioFormat": self.audio_format.value}


def resolve_audio_format(mime_type: str | None, filename: str | None = None) -> AudioFormat:
    """Map a declared MIME type (or, failing that, the file extension) to a format."""

    if mime_type:
        declared = mime_type.split(";", 1)[0].strip().lower()
        if declared in _MIME_FORMATS:
            return _MIME_FORMATS[declared]

    if filename:
        suffix = Path(filename).suffix.lower()
        if suffix in _EXTENSION_FORMATS:
            return _EXTENSION_FORMATS[suffix]

    raise EncodingError("Only MP3, WAV or M4A audio files are supported")


def encode_audio(blob: AudioBlob) -> EncodedAudio:
    """Encode the blob bytes as base64 text without touching the audio content."""

    if not blob.data:
        raise EncodingError("Audio file is empty")

    audio_format = resolve_audio_format(blob.mime_type, blob.filename)
    return EncodedAudio(
        audio_base64=base64.b64encode(blob.data).decode("ascii"),
        audio_format=audio_format,
    )


def _guess_mime_type(filename: str | None) -> str:
    guessed_type = None
    if filename:
        guessed_type, _ = mimetypes.guess_type(filename)
    return guessed_type or "audio/mpeg"


async def read_audio_file(path: str | Path) -> AudioBlob:
    """Read a file from disk in a worker thread, buffering it fully."""

    source = Path(path)
    try:
        data = await run_in_threadpool(source.read_bytes)
    except OSError as exc:
        raise EncodingError(f"Could not read audio file {source.name}: {exc}") from exc

    if not data:
        raise EncodingError(f"Audio file {source.name} is empty")
    return AudioBlob(data=data, mime_type=_guess_mime_type(source.name), filename=source.name)


async def read_upload(audio_file: UploadFile) -> AudioBlob:
    """Load an HTTP upload fully into memory, rejecting unsupported or empty files."""

    mime_type = audio_file.content_type or _guess_mime_type(audio_file.filename)

    try:
        resolve_audio_format(mime_type, audio_file.filename)
        data = await audio_file.read()
    except OSError as exc:
        raise EncodingError(f"Could not read uploaded audio: {exc}") from exc
    finally:
        await audio_file.close()

    if not data:
        raise EncodingError("Uploaded audio file is empty")
    return AudioBlob(data=data, mime_type=mime_type, filename=audio_file.filename)


__all__ = [
    "EncodedAudio",
    "encode_audio",
    "read_audio_file",
    "read_upload",
    "resolve_audio_format",
]
