"""Realtime websocket client."""

from .client import ANY_EVENT, EventHandler, OpenAIRealtime, build_realtime_url

__all__ = ["OpenAIRealtime", "build_realtime_url", "ANY_EVENT", "EventHandler"]
