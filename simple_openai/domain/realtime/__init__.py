"""Realtime session payloads."""

from .events import ClientEvent, ServerEvent
from .item import Item, ItemContent
from .response import ErrorDetail, Response, StatusDetails, TokenDetails, UsageResponse

__all__ = [
    "Response",
    "StatusDetails",
    "ErrorDetail",
    "UsageResponse",
    "TokenDetails",
    "Item",
    "ItemContent",
    "ServerEvent",
    "ClientEvent",
]
