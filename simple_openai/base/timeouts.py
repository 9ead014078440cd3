"""Timeout configuration for the default HTTP client.

TimeoutConfig
    Dataclass capturing normalized timeout values in seconds.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and whenever the overrides change. Supported environment
    variables (all optional):
        SIMPLE_OPENAI_HTTP_TIMEOUT_SECONDS
        SIMPLE_OPENAI_CONNECT_TIMEOUT_SECONDS

Timeouts only apply to the ``httpx.Client`` the provider creates when the
caller supplies none; a caller-supplied client keeps its own settings. The
realtime client reuses the connect timeout of whichever client is shared.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

HTTP_TIMEOUT_ENV = "SIMPLE_OPENAI_HTTP_TIMEOUT_SECONDS"
CONNECT_TIMEOUT_ENV = "SIMPLE_OPENAI_CONNECT_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for individual requests.
        connect_timeout_seconds: Timeout for establishing a connection.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = f"{os.getenv(HTTP_TIMEOUT_ENV, '')}/{os.getenv(CONNECT_TIMEOUT_ENV, '')}"
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, TimeoutConfig.http_timeout_seconds),
        connect_timeout_seconds=_parse_env_float(CONNECT_TIMEOUT_ENV, TimeoutConfig.connect_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config", "HTTP_TIMEOUT_ENV", "CONNECT_TIMEOUT_ENV"]
