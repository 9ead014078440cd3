"""
Chat completion replies.

``Chat`` is both the full reply of a non-streamed call and the shape of every
chunk of a streamed one; chunks carry ``delta`` instead of ``message`` on each
choice, and with ``include_usage`` the last chunk has no choices but a
``usage`` block.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from ..common.wire import WireModel
from .chat_message import ResponseMessage


class PromptTokensDetails(WireModel):
    cached_tokens: Optional[int] = None
    audio_tokens: Optional[int] = None


class CompletionTokensDetails(WireModel):
    reasoning_tokens: Optional[int] = None
    audio_tokens: Optional[int] = None
    accepted_prediction_tokens: Optional[int] = None
    rejected_prediction_tokens: Optional[int] = None


class Usage(WireModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    prompt_tokens_details: Optional[PromptTokensDetails] = None
    completion_tokens_details: Optional[CompletionTokensDetails] = None


class Choice(WireModel):
    index: int
    message: Optional[ResponseMessage] = None
    delta: Optional[ResponseMessage] = None
    finish_reason: Optional[str] = None
    logprobs: Optional[Dict[str, Any]] = None


class Chat(WireModel):
    id: str
    object: str
    created: int
    model: str
    service_tier: Optional[str] = None
    system_fingerprint: Optional[str] = None
    choices: List[Choice] = Field(default_factory=list)
    usage: Optional[Usage] = None

    def first_content(self) -> Optional[str]:
        """Return the text of the first choice, from ``message`` or ``delta``."""
        if not self.choices:
            return None
        first = self.choices[0]
        source = first.message if first.message is not None else first.delta
        return source.content if source is not None else None


__all__ = [
    "PromptTokensDetails",
    "CompletionTokensDetails",
    "Usage",
    "Choice",
    "Chat",
]
