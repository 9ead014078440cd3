"""
Realtime session client over websockets.

Purpose
-------
``OpenAIRealtime`` owns one websocket session against the realtime endpoint.
The provider constructs it from the shared ``httpx.Client`` (whose connect
timeout bounds the websocket handshake) and the realtime configuration; the
connection itself is opened and closed only by the caller through
:meth:`connect` / :meth:`disconnect`.

Design
------
- ``websockets`` synchronous client, matching the synchronous transport.
- A daemon receiver thread parses each frame as a :class:`ServerEvent` and
  dispatches it to the handlers registered with :meth:`on` for its ``type``
  and to wildcard (``"*"``) handlers.
- The connect function is injectable so tests can supply a fake connection.

Failure Modes
-------------
- :meth:`send` raises :class:`ProviderError` (``UNAVAILABLE``) when no session
  is open, including after the server closed it.
- Handler errors and undecodable frames are logged (``realtime.handler_error``
  / ``realtime.decode_error``) and do not stop the receiver; there is no caller
  to propagate them to.
"""

from __future__ import annotations

import json
import logging
import threading
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Dict, List, Mapping, Optional, Union
from urllib.parse import urlencode

import httpx
from websockets.exceptions import ConnectionClosed
from websockets.sync.client import connect as ws_connect

from ..base.constants import PROVIDER_NAME
from ..base.errors import ErrorCode, ProviderError, SchemaError, classify_exception
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.realtime_config import RealtimeConfig
from ..config.defaults import OPENAI_DEFAULT_REALTIME_URL
from ..domain.common.wire import WireModel
from ..domain.realtime.events import ClientEvent, ServerEvent

EventHandler = Callable[[ServerEvent], None]
Connector = Callable[..., Any]

ANY_EVENT = "*"


def build_realtime_url(config: RealtimeConfig) -> str:
    """Return the endpoint URL with the configured query parameters appended."""
    endpoint = config.endpoint_url or OPENAI_DEFAULT_REALTIME_URL
    if not config.query_params:
        return endpoint
    sep = "&" if "?" in endpoint else "?"
    return f"{endpoint}{sep}{urlencode(dict(config.query_params))}"


class OpenAIRealtime:
    """Websocket session client for realtime conversations.

    Parameters:
        http_client: The provider's ``httpx.Client``; its connect timeout is
            reused for the websocket handshake.
        realtime_config: Model, endpoint, headers and query parameters.
        connector: Callable opening the connection; defaults to
            ``websockets.sync.client.connect``.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        realtime_config: RealtimeConfig,
        connector: Optional[Connector] = None,
    ) -> None:
        self.http_client = http_client
        self.realtime_config = realtime_config
        self._connector: Connector = connector or ws_connect
        self._handlers: DefaultDict[str, List[EventHandler]] = defaultdict(list)
        self._handlers_lock = threading.Lock()
        self._connection: Any = None
        self._receiver: Optional[threading.Thread] = None
        self._logger = get_logger(__name__)
        self._ctx = LogContext(provider=PROVIDER_NAME, model=realtime_config.model)

    @property
    def url(self) -> str:
        return build_realtime_url(self.realtime_config)

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def _open_timeout(self) -> Optional[float]:
        timeout = getattr(self.http_client, "timeout", None)
        return getattr(timeout, "connect", None)

    def on(self, event_type: str, handler: EventHandler) -> "OpenAIRealtime":
        """Register ``handler`` for ``event_type`` (``"*"`` receives every event)."""
        with self._handlers_lock:
            self._handlers[event_type].append(handler)
        return self

    def connect(self) -> "OpenAIRealtime":
        """Open the websocket session and start the receiver thread.

        Connecting an already connected client is a no-op.
        """
        if self._connection is not None:
            return self
        url = self.url
        try:
            self._connection = self._connector(
                url,
                additional_headers=dict(self.realtime_config.headers),
                open_timeout=self._open_timeout(),
            )
        except Exception as exc:
            normalized_log_event(
                self._logger,
                "realtime.connect",
                self._ctx,
                phase="connect",
                error_code=classify_exception(exc).value,
                level=logging.WARNING,
                error=str(exc),
            )
            raise
        normalized_log_event(self._logger, "realtime.connect", self._ctx, phase="connect")
        self._receiver = threading.Thread(
            target=self._receive_loop,
            args=(self._connection,),
            name="simple-openai-realtime",
            daemon=True,
        )
        self._receiver.start()
        return self

    def _not_connected(self, raw: Optional[Exception] = None) -> ProviderError:
        return ProviderError(
            code=ErrorCode.UNAVAILABLE,
            message="realtime session is not connected",
            provider=PROVIDER_NAME,
            model=self.realtime_config.model,
            raw=raw,
        )

    def send(self, event: Union[ClientEvent, WireModel, Mapping[str, Any]]) -> None:
        """Serialize ``event`` and send it over the open session."""
        connection = self._connection
        if connection is None:
            raise self._not_connected()
        payload = event.to_wire() if isinstance(event, WireModel) else dict(event)
        try:
            connection.send(json.dumps(payload, ensure_ascii=False))
        except ConnectionClosed as exc:
            if self._connection is connection:
                self._connection = None
            raise self._not_connected(exc) from exc

    def disconnect(self, timeout: Optional[float] = 5.0) -> None:
        """Close the session and wait for the receiver thread to finish."""
        connection, self._connection = self._connection, None
        if connection is None:
            return
        connection.close()
        receiver, self._receiver = self._receiver, None
        if receiver is not None and receiver is not threading.current_thread():
            receiver.join(timeout)
        normalized_log_event(self._logger, "realtime.disconnect", self._ctx, phase="disconnect")

    # ---------------------------------------------------------------- receiving
    def _receive_loop(self, connection: Any) -> None:
        try:
            for raw in connection:
                self._dispatch(raw)
        except ConnectionClosed as exc:
            log_event(self._logger, "realtime.closed", self._ctx, level=logging.INFO, reason=str(exc))
        finally:
            # Server-side close; a later connect() opens a fresh session.
            if self._connection is connection:
                self._connection = None

    def _dispatch(self, raw: Union[str, bytes]) -> None:
        try:
            event = ServerEvent.from_wire(json.loads(raw))
        except (ValueError, SchemaError) as exc:
            log_event(self._logger, "realtime.decode_error", self._ctx, level=logging.WARNING, error=str(exc))
            return
        with self._handlers_lock:
            handlers = list(self._handlers.get(event.type, ())) + list(self._handlers.get(ANY_EVENT, ()))
        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:  # noqa: BLE001 - receiver thread has no caller to propagate to
                log_event(
                    self._logger,
                    "realtime.handler_error",
                    self._ctx,
                    level=logging.ERROR,
                    event_type=event.type,
                    error=repr(exc),
                )

    def handlers(self) -> Dict[str, List[EventHandler]]:
        """Return a snapshot of the registered handlers."""
        with self._handlers_lock:
            return {k: list(v) for k, v in self._handlers.items()}


__all__ = ["OpenAIRealtime", "build_realtime_url", "ANY_EVENT", "EventHandler"]
