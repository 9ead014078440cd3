"""
Transcription/translation reply for the ``json`` and ``verbose_json`` formats.

Plain formats (``text``, ``srt``, ``vtt``) are returned as ``str`` by the
audio service and never parsed into this type.
"""

from __future__ import annotations

from typing import List, Optional

from ..common.wire import WireModel
from .word import Word


class Segment(WireModel):
    id: int
    seek: Optional[int] = None
    start: float
    end: float
    text: str
    tokens: Optional[List[int]] = None
    temperature: Optional[float] = None
    avg_logprob: Optional[float] = None
    compression_ratio: Optional[float] = None
    no_speech_prob: Optional[float] = None


class Transcription(WireModel):
    text: str
    task: Optional[str] = None
    language: Optional[str] = None
    duration: Optional[float] = None
    words: Optional[List[Word]] = None
    segments: Optional[List[Segment]] = None


__all__ = ["Segment", "Transcription"]
