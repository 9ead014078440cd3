"""
Realtime ``response`` object.

Carried by ``response.created`` / ``response.done`` server events. Every field
is optional because intermediate events only populate part of the object.
"""

from __future__ import annotations

from typing import List, Optional

from ..common.wire import WireModel
from .item import Item


class ErrorDetail(WireModel):
    type: Optional[str] = None
    code: Optional[str] = None


class StatusDetails(WireModel):
    """Why a response ended as ``cancelled``, ``incomplete`` or ``failed``."""

    type: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[ErrorDetail] = None


class TokenDetails(WireModel):
    text_tokens: Optional[int] = None
    audio_tokens: Optional[int] = None
    cached_tokens: Optional[int] = None


class UsageResponse(WireModel):
    total_tokens: Optional[int] = None
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    input_token_details: Optional[TokenDetails] = None
    output_token_details: Optional[TokenDetails] = None


class Response(WireModel):
    id: Optional[str] = None
    object: Optional[str] = None
    status: Optional[str] = None
    status_details: Optional[StatusDetails] = None
    output: Optional[List[Item]] = None
    usage: Optional[UsageResponse] = None


__all__ = ["ErrorDetail", "StatusDetails", "TokenDetails", "UsageResponse", "Response"]
