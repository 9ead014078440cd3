"""Text-to-speech request (``POST /v1/audio/speech``); the reply is binary audio."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from ..common.wire import RequestModel


class Voice(str, Enum):
    """Voices available for speech synthesis."""

    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class SpeechResponseFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"
    WAV = "wav"
    PCM = "pcm"


class SpeechRequest(RequestModel):
    """Text to synthesize; ``input`` holds at most 4096 characters."""

    model: str = Field(..., min_length=1)
    input: str = Field(..., min_length=1, max_length=4096)
    voice: Voice
    response_format: Optional[SpeechResponseFormat] = None
    speed: Optional[float] = Field(default=None, ge=0.25, le=4.0)


__all__ = ["Voice", "SpeechResponseFormat", "SpeechRequest"]
