"""Service layer helpers for the remote inference integration."""

from .classifier_client import ClassifierClient
from .encoder import (
    EncodedAudio,
    encode_audio,
    read_audio_file,
    read_upload,
    resolve_audio_format,
)
from .errors import (
    ClassifierError,
    EncodingError,
    MalformedResponseError,
    TransportError,
)
from .wav import pcm_to_wav

__all__ = [
    "ClassifierClient",
    "ClassifierError",
    "EncodedAudio",
    "EncodingError",
    "MalformedResponseError",
    "TransportError",
    "encode_audio",
    "pcm_to_wav",
    "read_audio_file",
    "read_upload",
    "resolve_audio_format",
]
