"""Chat completion calls (``/v1/chat/completions``)."""

from __future__ import annotations

from typing import Iterator

from ..domain.chat.chat import Chat
from ..domain.chat.chat_request import ChatRequest
from .base import ServiceBase

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


class ChatCompletionServices(ServiceBase):
    def create(self, request: ChatRequest) -> Chat:
        """Return the complete reply; ``stream`` is forced off."""
        return self.transport.send_object("POST", CHAT_COMPLETIONS_PATH, request.with_stream(False), Chat)

    def create_stream(self, request: ChatRequest) -> Iterator[Chat]:
        """Return a lazy iterator of reply chunks; ``stream`` is forced on.

        Each chunk carries ``delta`` on its choices. The iterator ends when the
        server signals the end of the stream.
        """
        return self.transport.send_stream("POST", CHAT_COMPLETIONS_PATH, request.with_stream(True), Chat)


__all__ = ["ChatCompletionServices", "CHAT_COMPLETIONS_PATH"]
