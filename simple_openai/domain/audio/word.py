"""Word-level timestamp of a verbose transcription."""

from __future__ import annotations

from ..common.wire import WireModel


class Word(WireModel):
    word: str
    start: float
    end: float


__all__ = ["Word"]
