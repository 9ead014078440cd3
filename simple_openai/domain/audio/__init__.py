"""Audio payloads: speech synthesis, transcription and translation."""

from .speech_request import SpeechRequest, SpeechResponseFormat, Voice
from .transcription import Segment, Transcription
from .transcription_request import (
    TimestampGranularity,
    TranscriptionRequest,
    TranscriptionResponseFormat,
    TranslationRequest,
)
from .word import Word

__all__ = [
    "Voice",
    "SpeechResponseFormat",
    "SpeechRequest",
    "TranscriptionResponseFormat",
    "TimestampGranularity",
    "TranslationRequest",
    "TranscriptionRequest",
    "Transcription",
    "Segment",
    "Word",
]
