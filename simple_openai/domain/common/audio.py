"""Audio output settings shared by chat requests."""

from __future__ import annotations

from enum import Enum


class Voice(str, Enum):
    """Voices available for audio output of chat completions."""

    ALLOY = "alloy"
    ASH = "ash"
    BALLAD = "ballad"
    CORAL = "coral"
    ECHO = "echo"
    SAGE = "sage"
    SHIMMER = "shimmer"
    VERSE = "verse"


class AudioFormat(str, Enum):
    WAV = "wav"
    MP3 = "mp3"
    FLAC = "flac"
    OPUS = "opus"
    PCM16 = "pcm16"


__all__ = ["Voice", "AudioFormat"]
