"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, and message-based
heuristics as a fallback for exceptions raised by ``httpx`` or ``websockets``
that carry no status.
"""
from __future__ import annotations

from typing import Dict, Optional

from .configuration_error import ConfigurationError
from .constraint_violation import ConstraintViolationError
from .error_code import ErrorCode
from .provider_error import ProviderError
from .schema_error import SchemaError


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def status_to_code(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode`.

    Unmapped 5xx statuses are treated as server errors; anything else falls
    back to ``UNKNOWN``.
    """
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without an HTTP status."""
    PATTERN_GROUPS = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("unauthorized", "forbidden", "api key")),
        (ErrorCode.UNAVAILABLE, ("connection refused", "unavailable", "name resolution")),
        (ErrorCode.TRANSIENT, ("connection reset", "broken pipe", "remote protocol")),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Library errors (configuration, constraint, schema).
        3. Timeout exceptions.
        4. HTTP status mapping.
        5. Substring heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, ConfigurationError):
        return ErrorCode.CONFIGURATION
    if isinstance(exc, ConstraintViolationError):
        return ErrorCode.VALIDATION
    if isinstance(exc, SchemaError):
        return ErrorCode.SCHEMA
    if isinstance(exc, TimeoutError) or "timeout" in type(exc).__name__.lower():
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None:
        return status_to_code(status)
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "status_to_code",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
