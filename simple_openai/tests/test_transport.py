"""HttpTransport behaviour over an ``httpx.MockTransport``.

Covers:
- The body inspector aborts a send before any request reaches the client.
- Streams are lazy, skip non-data lines and stop at the ``[DONE]`` sentinel.
- Non-2xx replies map to ``OpenAIResponseError``; httpx errors propagate.
- The request interceptor can rewrite path, params and headers.
- Payloads with file fields are sent as multipart form data.
"""

from __future__ import annotations

import json

import httpx
import pytest

from simple_openai.base.errors import ConstraintViolationError, ErrorCode, OpenAIResponseError
from simple_openai.base.http import HttpRequestData, HttpTransport
from simple_openai.base.validation import inspect_body
from simple_openai.domain.audio import TimestampGranularity, TranscriptionRequest, TranscriptionResponseFormat
from simple_openai.domain.chat import Chat, ChatRequest, UserMessage


def _transport(client: httpx.Client, **kwargs) -> HttpTransport:
    return HttpTransport(
        client,
        base_url="https://api.test/",
        headers={"Authorization": "Bearer sk-test"},
        body_inspector=inspect_body,
        **kwargs,
    )


def _request() -> ChatRequest:
    return ChatRequest(model="gpt-4o-mini", messages=[UserMessage.of("Hi")])


def test_send_object_posts_json_and_parses_reply(recorder, mock_http, fixture_text):
    rec = recorder(lambda r: httpx.Response(200, text=fixture_text("chat_completion.json")))
    transport = _transport(mock_http(rec))

    chat = transport.send_object("POST", "/v1/chat/completions", _request(), Chat)

    assert chat.choices[0].finish_reason == "stop"  # nosec B101
    sent = rec.last
    assert str(sent.url) == "https://api.test/v1/chat/completions"  # nosec B101
    assert sent.headers["Authorization"] == "Bearer sk-test"  # nosec B101
    assert sent.headers["Content-Type"] == "application/json"  # nosec B101
    assert json.loads(sent.content) == _request().to_wire()  # nosec B101


def test_inspector_aborts_send_before_transmission(recorder, mock_http):
    rec = recorder(lambda r: httpx.Response(200, json={}))
    transport = _transport(mock_http(rec))
    tampered = _request().model_copy(update={"temperature": 9.0})

    with pytest.raises(ConstraintViolationError) as ei:
        transport.send_object("POST", "/v1/chat/completions", tampered, Chat)

    assert ei.value.fields == ["temperature"]  # nosec B101
    assert rec.requests == []  # nosec B101


def test_stream_inspection_is_eager_and_sending_is_lazy(recorder, mock_http, fixture_text):
    rec = recorder(lambda r: httpx.Response(200, text=fixture_text("chat_stream.sse")))
    transport = _transport(mock_http(rec))

    with pytest.raises(ConstraintViolationError):
        transport.send_stream("POST", "/v1/chat/completions", _request().model_copy(update={"n": 0}), Chat)

    stream = transport.send_stream("POST", "/v1/chat/completions", _request().with_stream(True), Chat)
    assert rec.requests == []  # nosec B101

    chunks = list(stream)
    assert len(rec.requests) == 1  # nosec B101
    assert [c.first_content() for c in chunks] == ["", "Hello", " there", None]  # nosec B101
    assert all(c.id == "chatcmpl-S1" for c in chunks)  # nosec B101


def test_stream_is_finite_and_not_restartable(recorder, mock_http, fixture_text):
    rec = recorder(lambda r: httpx.Response(200, text=fixture_text("chat_stream.sse")))
    stream = _transport(mock_http(rec)).send_stream("POST", "/v1/chat/completions", _request(), Chat)

    assert len(list(stream)) == 4  # nosec B101
    assert list(stream) == []  # nosec B101


def test_custom_end_of_stream_sentinel(recorder, mock_http):
    body = 'data: {"id":"a","object":"o","created":1,"model":"m"}\n\ndata: <END>\n\n'
    rec = recorder(lambda r: httpx.Response(200, text=body))
    transport = _transport(mock_http(rec), end_of_stream="<END>")

    assert len(list(transport.send_stream("POST", "/x", _request(), Chat))) == 1  # nosec B101


def test_error_reply_maps_to_response_error(recorder, mock_http):
    envelope = {"error": {"message": "Rate limit reached", "type": "requests", "code": "rate_limit_exceeded"}}
    rec = recorder(lambda r: httpx.Response(429, json=envelope))
    transport = _transport(mock_http(rec))

    with pytest.raises(OpenAIResponseError) as ei:
        transport.send_object("POST", "/v1/chat/completions", _request(), Chat)

    err = ei.value
    assert err.status_code == 429  # nosec B101
    assert err.code is ErrorCode.RATE_LIMIT  # nosec B101
    assert err.retryable is True  # nosec B101
    assert err.message == "Rate limit reached"  # nosec B101
    assert err.error_type == "requests"  # nosec B101
    assert err.model == "gpt-4o-mini"  # nosec B101
    assert "rate_limit_exceeded" in err.body  # nosec B101


def test_error_reply_on_stream_surfaces_on_iteration(recorder, mock_http):
    rec = recorder(lambda r: httpx.Response(401, text="unauthorized"))
    stream = _transport(mock_http(rec)).send_stream("POST", "/v1/chat/completions", _request(), Chat)

    with pytest.raises(OpenAIResponseError) as ei:
        next(stream)

    assert ei.value.code is ErrorCode.AUTH  # nosec B101
    assert ei.value.message == "unauthorized"  # nosec B101


def test_httpx_errors_propagate_untouched(recorder, mock_http):
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = _transport(mock_http(recorder(_fail)))

    with pytest.raises(httpx.ConnectError):
        transport.send_object("POST", "/v1/chat/completions", _request(), Chat)


def test_interceptor_rewrites_request(recorder, mock_http):
    rec = recorder(lambda r: httpx.Response(200, content=b"audio"))

    def _intercept(data: HttpRequestData) -> HttpRequestData:
        data.path = data.path.replace("/v1", "")
        data.params["api-version"] = "2024-10-21"
        data.headers["x-trace"] = "t-1"
        return data

    transport = _transport(mock_http(rec), request_interceptor=_intercept)

    assert transport.send_binary("POST", "/v1/audio/speech", {"input": "hi"}) == b"audio"  # nosec B101
    sent = rec.last
    assert sent.url.path == "/audio/speech"  # nosec B101
    assert sent.url.params["api-version"] == "2024-10-21"  # nosec B101
    assert sent.headers["x-trace"] == "t-1"  # nosec B101


def test_prepare_runs_inspector_before_interceptor():
    calls = []

    def _inspect(body):
        calls.append("inspect")

    def _intercept(data):
        calls.append("intercept")
        return data

    transport = HttpTransport(
        httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200))),
        base_url="https://api.test",
        body_inspector=_inspect,
        request_interceptor=_intercept,
    )
    try:
        data = transport.prepare("post", "/v1/x", _request())
    finally:
        transport.client.close()

    assert calls == ["inspect", "intercept"]  # nosec B101
    assert data.method == "POST"  # nosec B101
    assert data.content_type == "application/json"  # nosec B101


def test_file_payload_is_sent_as_multipart(recorder, mock_http, tmp_path):
    audio = tmp_path / "clip.mp3"
    audio.write_bytes(b"ID3-fake-audio")
    rec = recorder(lambda r: httpx.Response(200, text="hello"))
    transport = _transport(mock_http(rec))
    req = TranscriptionRequest(
        file=audio,
        model="whisper-1",
        response_format=TranscriptionResponseFormat.VERBOSE_JSON,
        temperature=0.0,
        timestamp_granularities=[TimestampGranularity.WORD, TimestampGranularity.SEGMENT],
    )

    data = transport.prepare("POST", "/v1/audio/transcriptions", req)
    assert data.is_multipart and data.files == {"file": audio}  # nosec B101
    assert "file" not in data.body  # nosec B101

    assert transport.send_text("POST", "/v1/audio/transcriptions", req) == "hello"  # nosec B101
    sent = rec.last
    assert sent.headers["Content-Type"].startswith("multipart/form-data")  # nosec B101
    body = sent.content
    assert b'name="file"; filename="clip.mp3"' in body  # nosec B101
    assert b"ID3-fake-audio" in body  # nosec B101
    assert b'name="model"\r\n\r\nwhisper-1' in body  # nosec B101
    assert b'name="response_format"\r\n\r\nverbose_json' in body  # nosec B101
    assert body.count(b'name="timestamp_granularities[]"') == 2  # nosec B101


def test_binary_stream_yields_chunks(recorder, mock_http):
    rec = recorder(lambda r: httpx.Response(200, content=b"abcdef"))
    chunks = _transport(mock_http(rec)).send_binary_stream("POST", "/v1/audio/speech", {"input": "hi"})

    assert b"".join(chunks) == b"abcdef"  # nosec B101
