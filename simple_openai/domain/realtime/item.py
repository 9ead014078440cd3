"""Conversation items exchanged over a realtime session."""

from __future__ import annotations

from typing import List, Optional

from ..common.wire import WireModel


class ItemContent(WireModel):
    """One content block of an item (``input_text``, ``text``, ``audio`` ...)."""

    type: Optional[str] = None
    text: Optional[str] = None
    audio: Optional[str] = None
    transcript: Optional[str] = None
    id: Optional[str] = None


class Item(WireModel):
    """Message, function call or function call output within a conversation."""

    id: Optional[str] = None
    type: Optional[str] = None
    object: Optional[str] = None
    status: Optional[str] = None
    role: Optional[str] = None
    content: Optional[List[ItemContent]] = None
    call_id: Optional[str] = None
    name: Optional[str] = None
    arguments: Optional[str] = None
    output: Optional[str] = None


__all__ = ["ItemContent", "Item"]
