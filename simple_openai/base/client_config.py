"""Immutable client configuration snapshot built by configurators."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional

import httpx

from .errors import ConfigurationError
from .http.request_data import HttpRequestData
from .http.serializer import Serializer
from .realtime_config import RealtimeConfig



@dataclass(frozen=True)
class ClientConfig:
    """Everything the provider needs to build its transport.

    Attributes:
        base_url: Absolute API base URL; request paths are appended to it.
        headers: Default headers for every request (read-only view).
        http_client: Caller-owned ``httpx.Client``; ``None`` lets the provider
            create and own one.
        request_interceptor: Optional hook rewriting every outgoing request.
        serializer: Payload serializer; ``None`` selects the pydantic default.
        realtime_config: Realtime session settings; ``None`` disables realtime.

    Raises:
        ConfigurationError: when ``base_url`` is missing or blank.
    """

    base_url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    http_client: Optional[httpx.Client] = None
    request_interceptor: Optional[Callable[[HttpRequestData], HttpRequestData]] = None
    serializer: Optional[Serializer] = None
    realtime_config: Optional[RealtimeConfig] = None

    def __post_init__(self) -> None:
        if not self.base_url or not str(self.base_url).strip():
            raise ConfigurationError("base_url is required")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))


__all__ = ["ClientConfig"]
