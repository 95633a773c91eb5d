"""Wrap headerless PCM from the speech endpoint into a playable WAV container."""

from __future__ import annotations

import io
import wave


def pcm_to_wav(
    pcm: bytes,
    *,
    sample_rate: int,
    channels: int = 1,
    sample_width: int = 2,
) -> bytes:
    """Return ``pcm`` prefixed with a RIFF/WAVE header describing its layout."""

    frame_size = channels * sample_width
    if len(pcm) % frame_size:
        # Drop a trailing partial frame rather than emit a corrupt container.
        pcm = pcm[: len(pcm) - len(pcm) % frame_size]

    with io.BytesIO() as buffer:
        with wave.open(buffer, "wb") as wave_file:
            wave_file.setnchannels(channels)
            wave_file.setsampwidth(sample_width)
            wave_file.setframerate(sample_rate)
            wave_file.writeframes(pcm)
        return buffer.getvalue()


__all__ = ["pcm_to_wav"]
