"""Error classification and API error envelopes."""

from __future__ import annotations

import httpx
import pytest

from simple_openai.base.errors import (
    ConfigurationError,
    ConstraintViolationError,
    ErrorCode,
    OpenAIResponseError,
    ProviderError,
    SchemaError,
    Violation,
    classify_exception,
    status_to_code,
)


@pytest.mark.parametrize(
    "status, code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (503, ErrorCode.UNAVAILABLE),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_status_to_code(status, code):
    assert status_to_code(status) is code  # nosec B101


def test_from_reply_reads_error_envelope():
    body = '{"error": {"message": "Rate limit reached", "type": "requests", "code": "rate_limit_exceeded"}}'

    err = OpenAIResponseError.from_reply(429, body)

    assert err.code is ErrorCode.RATE_LIMIT  # nosec B101
    assert err.message == "Rate limit reached"  # nosec B101
    assert err.error_type == "requests"  # nosec B101
    assert err.retryable  # nosec B101
    assert err.body == body  # nosec B101


def test_from_reply_keeps_non_json_body():
    err = OpenAIResponseError.from_reply(502, "<html>Bad gateway</html>")

    assert err.code is ErrorCode.TRANSIENT  # nosec B101
    assert err.message == "<html>Bad gateway</html>"  # nosec B101
    assert err.error_type is None  # nosec B101


def test_from_reply_empty_body():
    err = OpenAIResponseError.from_reply(401, "", provider="azure")

    assert err.message == "HTTP 401"  # nosec B101
    assert err.provider == "azure"  # nosec B101
    assert not err.retryable  # nosec B101
    assert isinstance(err, ProviderError)  # nosec B101


def test_classify_library_errors():
    assert classify_exception(ConfigurationError("missing key")) is ErrorCode.CONFIGURATION  # nosec B101
    assert classify_exception(ConstraintViolationError([Violation("n", "bad")])) is ErrorCode.VALIDATION  # nosec B101
    assert classify_exception(SchemaError("Chat", "bad")) is ErrorCode.SCHEMA  # nosec B101
    passthrough = ProviderError(code=ErrorCode.CONFLICT, message="x", provider="openai")
    assert classify_exception(passthrough) is ErrorCode.CONFLICT  # nosec B101


def test_classify_transport_errors():
    request = httpx.Request("GET", "https://api.openai.com/v1/models")

    assert classify_exception(httpx.ReadTimeout("read timed out", request=request)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("connection refused", request=request)) is ErrorCode.UNAVAILABLE  # nosec B101
    assert classify_exception(RuntimeError("something odd")) is ErrorCode.UNKNOWN  # nosec B101


def test_violation_rendering():
    err = ConstraintViolationError([Violation("temperature", "must be <= 2"), Violation("n", "must be >= 1")])

    assert str(err.violations[0]) == "temperature: must be <= 2"  # nosec B101
    assert err.fields == ["temperature", "n"]  # nosec B101
    assert str(err).startswith("2 constraint violation(s):")  # nosec B101


def test_constraint_error_requires_violations():
    with pytest.raises(ValueError):
        ConstraintViolationError([])
