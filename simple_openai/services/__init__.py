"""Service classes grouping API calls by area."""

from .audios import AudioServices
from .base import ServiceBase
from .chat_completions import ChatCompletionServices

__all__ = ["ServiceBase", "ChatCompletionServices", "AudioServices"]
