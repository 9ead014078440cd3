"""
HTTP transport bound to one ``httpx.Client``.

Purpose
-------
``HttpTransport`` turns a service call (method, path, payload, expected reply
type) into an ``httpx`` request and the reply into typed objects. It owns the
cross-cutting steps every call shares:

1. Run the body inspector on the payload object. A failing inspection raises
   before any request is built.
2. Serialize the payload; fields a payload names in ``file_fields`` become
   multipart file parts and the rest become form values.
3. Apply the request interceptor to the mutable :class:`HttpRequestData`.
4. Send, map non-2xx replies to :class:`OpenAIResponseError`, and decode the
   reply as a single object, a server-sent-event stream, bytes, or text.

Failure Modes
-------------
- ``httpx`` errors (timeouts, connection failures) propagate untouched after
  an ``http.error`` log event. The transport never retries.
- Streams are lazy: validation happens when ``send_stream`` is called, the
  request is sent on the first iteration, and iteration stops at the
  end-of-stream sentinel. A stream cannot be restarted.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple, TypeVar, Union

import httpx

from ..constants import END_OF_STREAM, PROVIDER_NAME
from ..errors import OpenAIResponseError, classify_exception
from ..logging import LogContext, get_logger, log_event, normalized_log_event
from .request_data import HttpRequestData
from .serializer import PydanticSerializer, Serializer

T = TypeVar("T")

RequestInterceptor = Callable[[HttpRequestData], HttpRequestData]
BodyInspector = Callable[[Any], None]

_SSE_DATA_PREFIX = "data:"


def _form_value(value: Any) -> Union[str, list]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return [_form_value(v) for v in value]
    return str(value)


def _multipart_fields(body: Mapping[str, Any]) -> Dict[str, Any]:
    """Flatten form values; list values use the ``name[]`` convention."""
    out: Dict[str, Any] = {}
    for key, value in body.items():
        if isinstance(value, list):
            out[f"{key}[]"] = _form_value(value)
        else:
            out[key] = _form_value(value)
    return out


class HttpTransport:
    """Send typed payloads through a shared ``httpx.Client``.

    Parameters:
        client: The ``httpx.Client`` used for every call. Its lifecycle is
            owned by the caller (or the provider that created it).
        base_url: Absolute base URL prefixed to every request path.
        headers: Default headers sent with every request.
        request_interceptor: Optional hook rewriting each request before it is
            sent.
        body_inspector: Optional hook run on each payload object before it is
            serialized; it aborts the call by raising.
        end_of_stream: Data payload that terminates an event stream.
        serializer: Payload serializer; defaults to :class:`PydanticSerializer`.
        provider: Provider key used in logs and errors.
    """

    def __init__(
        self,
        client: httpx.Client,
        *,
        base_url: str,
        headers: Optional[Mapping[str, str]] = None,
        request_interceptor: Optional[RequestInterceptor] = None,
        body_inspector: Optional[BodyInspector] = None,
        end_of_stream: str = END_OF_STREAM,
        serializer: Optional[Serializer] = None,
        provider: str = PROVIDER_NAME,
    ) -> None:
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.headers: Dict[str, str] = dict(headers or {})
        self.request_interceptor = request_interceptor
        self.body_inspector = body_inspector
        self.end_of_stream = end_of_stream
        self.serializer: Serializer = serializer or PydanticSerializer()
        self.provider = provider
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------ prepare
    def prepare(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> HttpRequestData:
        """Inspect, serialize and intercept one request without sending it."""
        if body is not None and self.body_inspector is not None:
            self.body_inspector(body)
        wire_body: Optional[Dict[str, Any]] = None
        files: Dict[str, Path] = {}
        if body is not None:
            wire_body = dict(self.serializer.to_wire(body))
            for name in getattr(body, "file_fields", ()):
                value = getattr(body, name, None)
                wire_body.pop(name, None)
                if value is not None:
                    files[name] = Path(value)
        data = HttpRequestData(
            method=method.upper(),
            path=path,
            headers=dict(self.headers),
            params=dict(params or {}),
            body=wire_body,
            files=files,
        )
        if self.request_interceptor is not None:
            data = self.request_interceptor(data)
        return data

    def _build(self, data: HttpRequestData) -> Tuple[httpx.Request, Dict[str, Any]]:
        url = f"{self.base_url}{data.path}"
        if data.is_multipart:
            handles = {name: (p.name, p.read_bytes()) for name, p in data.files.items()}
            request = self.client.build_request(
                data.method,
                url,
                headers=data.headers,
                params=data.params or None,
                data=_multipart_fields(data.body or {}),
                files=handles,
            )
        else:
            request = self.client.build_request(
                data.method,
                url,
                headers=data.headers,
                params=data.params or None,
                json=data.body,
            )
        return request, {"model": (data.body or {}).get("model")}

    def _context(self, data: HttpRequestData, model: Optional[str]) -> LogContext:
        return LogContext(provider=self.provider, model=model, method=data.method, path=data.path)

    # --------------------------------------------------------------------- send
    def _send(self, data: HttpRequestData, *, stream: bool = False) -> httpx.Response:
        request, meta = self._build(data)
        ctx = self._context(data, meta["model"])
        log_event(self._logger, "http.request", ctx, multipart=data.is_multipart or None, stream=stream or None)
        t0 = time.perf_counter()
        try:
            response = self.client.send(request, stream=stream)
        except httpx.HTTPError as exc:
            normalized_log_event(
                self._logger,
                "http.error",
                ctx,
                phase="send",
                error_code=classify_exception(exc).value,
                level=logging.WARNING,
                error=str(exc),
            )
            raise
        elapsed_ms = round((time.perf_counter() - t0) * 1000.0, 2)
        if response.status_code >= 400:
            if stream:
                response.read()
                response.close()
            error = OpenAIResponseError.from_reply(response.status_code, response.text, self.provider)
            error.model = meta["model"]
            normalized_log_event(
                self._logger,
                "http.error",
                ctx,
                phase="response",
                error_code=error.code.value,
                level=logging.WARNING,
                status=response.status_code,
                latency_ms=elapsed_ms,
                error=error.message,
            )
            raise error
        normalized_log_event(
            self._logger,
            "http.response",
            ctx,
            phase="response",
            status=response.status_code,
            latency_ms=elapsed_ms,
        )
        return response

    def send_object(
        self,
        method: str,
        path: str,
        body: Any,
        response_type: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Send one request and parse the JSON reply into ``response_type``."""
        data = self.prepare(method, path, body, params)
        response = self._send(data)
        return self.serializer.loads(response.content, response_type)

    def send_text(
        self,
        method: str,
        path: str,
        body: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Send one request and return the reply body as text."""
        data = self.prepare(method, path, body, params)
        return self._send(data).text

    def send_binary(
        self,
        method: str,
        path: str,
        body: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> bytes:
        """Send one request and return the raw reply bytes."""
        data = self.prepare(method, path, body, params)
        return self._send(data).content

    def send_binary_stream(
        self,
        method: str,
        path: str,
        body: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[bytes]:
        """Return a lazy iterator over the raw reply bytes."""
        data = self.prepare(method, path, body, params)
        return self._iter_bytes(data)

    def send_stream(
        self,
        method: str,
        path: str,
        body: Any,
        chunk_type: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[Any]:
        """Return a lazy iterator of server-sent-event chunks parsed as ``chunk_type``.

        The body is inspected immediately; the request is sent on the first
        ``next()``. Iteration ends at the end-of-stream sentinel or when the
        server closes the stream.
        """
        data = self.prepare(method, path, body, params)
        return self._iter_events(data, chunk_type)

    # ---------------------------------------------------------------- iterators
    def _iter_bytes(self, data: HttpRequestData) -> Iterator[bytes]:
        response = self._send(data, stream=True)
        try:
            yield from response.iter_bytes()
        finally:
            response.close()

    def _iter_events(self, data: HttpRequestData, chunk_type: Any) -> Iterator[Any]:
        response = self._send(data, stream=True)
        try:
            for line in response.iter_lines():
                line = line.strip()
                if not line.startswith(_SSE_DATA_PREFIX):
                    # Blank separators, comments and event/id fields carry no data.
                    continue
                payload = line[len(_SSE_DATA_PREFIX):].strip()
                if payload == self.end_of_stream:
                    break
                if payload:
                    yield self.serializer.loads(payload, chunk_type)
        finally:
            response.close()


__all__ = ["HttpTransport", "RequestInterceptor", "BodyInspector"]
