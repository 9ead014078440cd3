"""Options applied to streamed chat completions."""

from __future__ import annotations

from typing import Optional

from .wire import RequestModel


class StreamOptions(RequestModel):
    """``include_usage`` adds a final chunk carrying token usage."""

    include_usage: Optional[bool] = None


__all__ = ["StreamOptions"]
