"""Realtime session settings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class RealtimeConfig:
    """Settings for one realtime websocket session.

    ``endpoint_url`` falls back to the OpenAI realtime endpoint when unset.
    Configurators enrich a user-supplied config with authentication headers
    and the ``model`` query parameter through :meth:`enriched`.
    """

    model: str
    endpoint_url: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    query_params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.model or not str(self.model).strip():
            raise ConfigurationError("realtime model is required")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))
        object.__setattr__(self, "query_params", MappingProxyType(dict(self.query_params or {})))

    @classmethod
    def of(cls, model: str) -> "RealtimeConfig":
        return cls(model=model)

    def enriched(
        self,
        *,
        endpoint_url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        query_params: Optional[Mapping[str, str]] = None,
    ) -> "RealtimeConfig":
        """Return a copy with defaults filled in; explicit values on ``self`` win."""
        return replace(
            self,
            endpoint_url=self.endpoint_url or endpoint_url,
            headers={**(headers or {}), **self.headers},
            query_params={**(query_params or {}), **self.query_params},
        )


__all__ = ["RealtimeConfig"]
