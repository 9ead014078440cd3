"""
Transcription and translation requests.

Both upload a local audio file, so they are sent as ``multipart/form-data``:
fields named in ``file_fields`` become file parts and the remaining fields
become form values. Translation always produces English text and therefore
takes no ``language``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import Field

from ..common.wire import RequestModel


class TranscriptionResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


class TimestampGranularity(str, Enum):
    WORD = "word"
    SEGMENT = "segment"


class TranslationRequest(RequestModel):
    file_fields = frozenset({"file"})

    file: Path
    model: str = Field(..., min_length=1)
    prompt: Optional[str] = None
    response_format: Optional[TranscriptionResponseFormat] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    def with_response_format(self, response_format: TranscriptionResponseFormat) -> "TranslationRequest":
        return self.model_copy(update={"response_format": response_format})


class TranscriptionRequest(TranslationRequest):
    """Speech-to-text in the spoken ``language`` (ISO-639-1, optional).

    ``timestamp_granularities`` requires the ``verbose_json`` format.
    """

    language: Optional[str] = None
    timestamp_granularities: Optional[List[TimestampGranularity]] = None


__all__ = [
    "TranscriptionResponseFormat",
    "TimestampGranularity",
    "TranslationRequest",
    "TranscriptionRequest",
]
