"""
Structured provider error exception types.

``ProviderError`` wraps failures with a normalized `ErrorCode` for consistent
handling and structured logging. ``OpenAIResponseError`` is the concrete
failure raised by the transport when the API answers with a non-2xx status.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from .error_code import ErrorCode

_RETRYABLE_CODES = (
    ErrorCode.RATE_LIMIT,
    ErrorCode.TIMEOUT,
    ErrorCode.TRANSIENT,
    ErrorCode.UNAVAILABLE,
    ErrorCode.SERVER_ERROR,
)


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream retry logic (not authoritative; this
            library never retries on its own).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class OpenAIResponseError(ProviderError):
    """Non-successful HTTP reply from the API.

    Attributes:
        status_code: HTTP status of the reply.
        body: Raw reply body decoded as text (may be empty).
        error_type: ``error.type`` from the API error envelope when present.
    """

    status_code: Optional[int] = None
    body: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def from_reply(cls, status_code: int, body: str, provider: str = "openai") -> "OpenAIResponseError":
        """Build the error from a status code and the raw reply text.

        The API wraps failures as ``{"error": {"message", "type", "code"}}``;
        when the body does not follow that envelope the raw text is used as the
        message.
        """
        # Local import keeps classification free of a cycle on this module.
        from .classification import status_to_code

        code = status_to_code(status_code)
        message = body or f"HTTP {status_code}"
        error_type: Optional[str] = None
        envelope = _error_envelope(body)
        if envelope:
            message = str(envelope.get("message") or message)
            error_type = envelope.get("type")
        return cls(
            code=code,
            message=message,
            provider=provider,
            retryable=code in _RETRYABLE_CODES,
            status_code=status_code,
            body=body,
            error_type=error_type,
        )


def _error_envelope(body: str) -> Optional[dict[str, Any]]:
    if not body:
        return None
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        return data["error"]
    return None


__all__ = ["ProviderError", "OpenAIResponseError"]
