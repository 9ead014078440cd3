"""
Audio calls: speech synthesis, transcription and translation.

Transcriptions and translations are multipart uploads. The ``*_plain``
variants request a textual format (``text`` unless the request names ``srt``
or ``vtt``) and return the reply body unparsed; the parsed variants request
``json`` unless the request names ``verbose_json``.
"""

from __future__ import annotations

from typing import Iterator, TypeVar

from ..domain.audio.speech_request import SpeechRequest
from ..domain.audio.transcription import Transcription
from ..domain.audio.transcription_request import (
    TranscriptionRequest,
    TranscriptionResponseFormat,
    TranslationRequest,
)
from .base import ServiceBase

SPEECH_PATH = "/v1/audio/speech"
TRANSCRIPTIONS_PATH = "/v1/audio/transcriptions"
TRANSLATIONS_PATH = "/v1/audio/translations"

_JSON_FORMATS = (TranscriptionResponseFormat.JSON, TranscriptionResponseFormat.VERBOSE_JSON)
_PLAIN_FORMATS = (
    TranscriptionResponseFormat.TEXT,
    TranscriptionResponseFormat.SRT,
    TranscriptionResponseFormat.VTT,
)

R = TypeVar("R", bound=TranslationRequest)


def _as_json(request: R) -> R:
    if request.response_format in _JSON_FORMATS:
        return request
    return request.with_response_format(TranscriptionResponseFormat.JSON)


def _as_plain(request: R) -> R:
    if request.response_format in _PLAIN_FORMATS:
        return request
    return request.with_response_format(TranscriptionResponseFormat.TEXT)


class AudioServices(ServiceBase):
    def speak(self, request: SpeechRequest) -> bytes:
        """Return the synthesized audio in the requested format."""
        return self.transport.send_binary("POST", SPEECH_PATH, request)

    def speak_stream(self, request: SpeechRequest) -> Iterator[bytes]:
        """Return the synthesized audio as a lazy iterator of byte chunks."""
        return self.transport.send_binary_stream("POST", SPEECH_PATH, request)

    def transcribe(self, request: TranscriptionRequest) -> Transcription:
        return self.transport.send_object("POST", TRANSCRIPTIONS_PATH, _as_json(request), Transcription)

    def transcribe_plain(self, request: TranscriptionRequest) -> str:
        return self.transport.send_text("POST", TRANSCRIPTIONS_PATH, _as_plain(request))

    def translate(self, request: TranslationRequest) -> Transcription:
        """Translate speech into English text."""
        return self.transport.send_object("POST", TRANSLATIONS_PATH, _as_json(request), Transcription)

    def translate_plain(self, request: TranslationRequest) -> str:
        return self.transport.send_text("POST", TRANSLATIONS_PATH, _as_plain(request))


__all__ = ["AudioServices", "SPEECH_PATH", "TRANSCRIPTIONS_PATH", "TRANSLATIONS_PATH"]
