"""
Chat messages, discriminated on ``role``.

Request-side variants are ``DeveloperMessage``, ``SystemMessage``,
``UserMessage``, ``AssistantMessage`` and ``ToolMessage``; the ``ChatMessage``
annotated union parses them from raw mappings and rejects unknown or missing
roles. ``ResponseMessage`` is the assistant message returned by the API (and
the ``delta`` of streamed chunks).

The ``role`` of every variant is a literal: it is always serialized and
cannot be set to another value.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import Field, TypeAdapter, ValidationError, model_validator

from ...base.errors import SchemaError
from ..common.content import AssistantContentPart, ChatContentPart
from ..common.tool import ToolCall
from ..common.wire import RequestModel, WireModel


class ChatRole(str, Enum):
    DEVELOPER = "developer"
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class DeveloperMessage(RequestModel):
    """Instructions from the developer; replaces system messages on newer models."""

    role: Literal["developer"] = "developer"
    content: str
    name: Optional[str] = None

    @classmethod
    def of(cls, content: str, name: Optional[str] = None) -> "DeveloperMessage":
        return cls(content=content, name=name)


class SystemMessage(RequestModel):
    role: Literal["system"] = "system"
    content: str
    name: Optional[str] = None

    @classmethod
    def of(cls, content: str, name: Optional[str] = None) -> "SystemMessage":
        return cls(content=content, name=name)


class UserMessage(RequestModel):
    """User turn; ``content`` is plain text or a list of content parts."""

    role: Literal["user"] = "user"
    content: Union[str, List[ChatContentPart]]
    name: Optional[str] = None

    @classmethod
    def of(cls, content: Union[str, List[Any]], name: Optional[str] = None) -> "UserMessage":
        return cls(content=content, name=name)


class AudioRef(RequestModel):
    """Reference to a previous audio reply of the assistant."""

    id: str = Field(..., min_length=1)


class AssistantMessage(RequestModel):
    """Assistant turn replayed in a conversation.

    ``content`` is always serialized, as ``null`` when absent, so tool-call
    turns keep the shape the API expects. The ``audio_id`` keyword is a
    shortcut for ``audio={"id": audio_id}``; a blank id yields no audio.
    """

    keep_empty_fields = frozenset({"content"})

    role: Literal["assistant"] = "assistant"
    content: Optional[Union[str, List[AssistantContentPart]]] = None
    refusal: Optional[str] = None
    name: Optional[str] = None
    audio: Optional[AudioRef] = None
    tool_calls: Optional[List[ToolCall]] = None

    @model_validator(mode="before")
    @classmethod
    def _expand_audio_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "audio_id" in data:
            data = dict(data)
            audio_id = data.pop("audio_id")
            if audio_id is not None and str(audio_id).strip():
                data["audio"] = {"id": audio_id}
        return data

    @classmethod
    def of(cls, content: Optional[str] = None, *, tool_calls: Optional[List[ToolCall]] = None) -> "AssistantMessage":
        return cls(content=content, tool_calls=tool_calls)


class ToolMessage(RequestModel):
    """Result of a tool call, matched to the call by ``tool_call_id``."""

    role: Literal["tool"] = "tool"
    content: str
    tool_call_id: str = Field(..., min_length=1)

    @classmethod
    def of(cls, content: str, tool_call_id: str) -> "ToolMessage":
        return cls(content=content, tool_call_id=tool_call_id)


ChatMessage = Annotated[
    Union[DeveloperMessage, SystemMessage, UserMessage, AssistantMessage, ToolMessage],
    Field(discriminator="role"),
]

_CHAT_MESSAGE_ADAPTER: TypeAdapter[Any] = TypeAdapter(ChatMessage)


def parse_chat_message(data: Mapping[str, Any]) -> Union[
    DeveloperMessage, SystemMessage, UserMessage, AssistantMessage, ToolMessage
]:
    """Parse a raw mapping into the message variant selected by ``role``.

    Raises:
        SchemaError: when ``role`` is missing or unknown, or the variant's
            fields do not validate.
    """
    try:
        return _CHAT_MESSAGE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise SchemaError.from_validation_error("ChatMessage", exc) from exc


class ResponseAudio(WireModel):
    id: Optional[str] = None
    expires_at: Optional[int] = None
    data: Optional[str] = None
    transcript: Optional[str] = None


class ResponseMessage(WireModel):
    """Assistant message produced by the API.

    In streamed chunks the same shape carries partial ``content`` and
    fragmentary ``tool_calls``; ``role`` is then usually only present on the
    first chunk.
    """

    role: Optional[ChatRole] = ChatRole.ASSISTANT
    content: Optional[str] = None
    refusal: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    audio: Optional[ResponseAudio] = None
    annotations: Optional[List[Dict[str, Any]]] = None

    def to_assistant_message(self) -> AssistantMessage:
        """Return the request-side message that replays this reply."""
        return AssistantMessage(
            content=self.content,
            refusal=self.refusal,
            tool_calls=self.tool_calls,
            audio_id=self.audio.id if self.audio else None,
        )


__all__ = [
    "ChatRole",
    "DeveloperMessage",
    "SystemMessage",
    "UserMessage",
    "AudioRef",
    "AssistantMessage",
    "ToolMessage",
    "ChatMessage",
    "parse_chat_message",
    "ResponseAudio",
    "ResponseMessage",
]
