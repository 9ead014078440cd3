"""
Realtime session events.

Only the envelope is typed: ``type`` selects the event and every other key is
kept as an extra attribute so new event kinds pass through unchanged. The
``response`` block, common to the ``response.*`` events, is parsed into
:class:`Response`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field

from ..common.wire import WireModel
from .item import Item
from .response import Response


class ServerEvent(WireModel):
    """Event received from the server."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    type: str = Field(..., min_length=1)
    event_id: Optional[str] = None
    response: Optional[Response] = None
    item: Optional[Item] = None
    error: Optional[Dict[str, Any]] = None

    def extras(self) -> Dict[str, Any]:
        """Return the keys not declared on the envelope."""
        return dict(self.model_extra or {})


class ClientEvent(WireModel):
    """Event sent to the server (``session.update``, ``response.create`` ...)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    type: str = Field(..., min_length=1)
    event_id: Optional[str] = None

    @classmethod
    def of(cls, type: str, **fields: Any) -> "ClientEvent":
        return cls(type=type, **fields)


__all__ = ["ServerEvent", "ClientEvent"]
