"""
Chat completion request.

Purpose
-------
``ChatRequest`` models the body of ``POST /v1/chat/completions``. Numeric
bounds are inclusive and declared on the fields; building an instance that
breaks any of them raises ``ConstraintViolationError`` listing every offending
field at once.

Design
------
- Instances are immutable. ``with_stream``, ``with_stream_options`` and
  ``with_tool_choice`` return modified copies; services use them to force the
  streaming flag without touching the caller's object.
- ``max_tokens`` is deprecated by the API in favour of
  ``max_completion_tokens``. Using it alone emits a ``DeprecationWarning``;
  setting both is a constraint violation.
"""

from __future__ import annotations

import warnings
from enum import Enum
from typing import Annotated, Any, Dict, List, Mapping, Optional, Union

from pydantic import Field, model_validator

from ...base.errors import ConstraintViolationError, Violation
from ..common.audio import AudioFormat, Voice
from ..common.response_format import ResponseFormat
from ..common.stream_options import StreamOptions
from ..common.tool import Tool, ToolChoice
from ..common.wire import RequestModel
from .chat_message import ChatMessage


class Modality(str, Enum):
    TEXT = "text"
    AUDIO = "audio"


class ServiceTier(str, Enum):
    AUTO = "auto"
    DEFAULT = "default"


class ReasoningEffort(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ToolChoiceOption(str, Enum):
    NONE = "none"
    AUTO = "auto"
    REQUIRED = "required"


class ChatAudio(RequestModel):
    """Audio output parameters, required when ``modalities`` includes audio."""

    voice: Voice
    format: AudioFormat

    @classmethod
    def of(cls, voice: Voice, format: AudioFormat) -> "ChatAudio":
        return cls(voice=voice, format=format)


StopSequences = Annotated[List[str], Field(max_length=4)]


class ChatRequest(RequestModel):
    """Body of a chat completion call."""

    messages: List[ChatMessage] = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    store: Optional[bool] = None
    reasoning_effort: Optional[ReasoningEffort] = None
    metadata: Optional[Dict[str, str]] = None
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    logit_bias: Optional[Dict[str, int]] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = Field(default=None, ge=0, le=20)
    max_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    n: Optional[int] = Field(default=None, ge=1, le=128)
    modalities: Optional[List[Modality]] = None
    audio: Optional[ChatAudio] = None
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    response_format: Optional[ResponseFormat] = None
    seed: Optional[int] = None
    service_tier: Optional[ServiceTier] = None
    stop: Optional[Union[str, StopSequences]] = None
    stream: Optional[bool] = None
    stream_options: Optional[StreamOptions] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[Union[ToolChoiceOption, ToolChoice]] = None
    parallel_tool_calls: Optional[bool] = None
    user: Optional[str] = None

    @classmethod
    def cross_field_violations(cls, data: Mapping[str, Any]) -> List[Violation]:
        if data.get("max_tokens") is not None and data.get("max_completion_tokens") is not None:
            return [Violation("max_tokens", "cannot be combined with max_completion_tokens", data["max_tokens"])]
        return []

    @model_validator(mode="after")
    def _check_token_limits(self) -> "ChatRequest":
        violations = self.cross_field_violations(dict(self))
        if violations:
            raise ConstraintViolationError(violations)
        if self.max_tokens is None:
            return self
        warnings.warn(
            "max_tokens is deprecated; use max_completion_tokens",
            DeprecationWarning,
            stacklevel=2,
        )
        return self

    def with_stream(self, stream: bool) -> "ChatRequest":
        return self.model_copy(update={"stream": stream})

    def with_stream_options(self, stream_options: Optional[StreamOptions]) -> "ChatRequest":
        return self.model_copy(update={"stream_options": stream_options})

    def with_tool_choice(self, tool_choice: Union[ToolChoiceOption, ToolChoice, None]) -> "ChatRequest":
        return self.model_copy(update={"tool_choice": tool_choice})


__all__ = [
    "Modality",
    "ServiceTier",
    "ReasoningEffort",
    "ToolChoiceOption",
    "ChatAudio",
    "ChatRequest",
]
