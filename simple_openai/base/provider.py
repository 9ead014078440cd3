"""
Provider façade.

Purpose
-------
``OpenAIProvider`` turns a configurator into a ready client:

1. Builds the immutable :class:`ClientConfig` (configuration errors surface
   here, at construction time).
2. Uses the configured ``httpx.Client`` or creates and owns a default one with
   timeouts from :func:`get_timeout_config`.
3. Builds exactly one :class:`HttpTransport` with the validating body
   inspector and the ``[DONE]`` end-of-stream sentinel installed, and, when the
   configuration carries realtime settings, exactly one
   :class:`OpenAIRealtime` sharing the same ``httpx.Client``.
4. Hands out one service instance per service class.

Thread-safety
-------------
``get_or_create_service`` reads the cache without locking and only takes the
lock to check-and-insert, so concurrent first calls for the same class all
observe the same instance.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Type, TypeVar

import httpx

from ..realtime.client import OpenAIRealtime
from .client_config import ClientConfig
from .configurator import OpenAIConfigurator
from .constants import END_OF_STREAM, PROVIDER_NAME
from .errors import ConfigurationError
from .http.serializer import PydanticSerializer
from .http.transport import HttpTransport
from .logging import LogContext, get_logger, normalized_log_event
from .timeouts import get_timeout_config
from .validation import inspect_body

S = TypeVar("S")


class OpenAIProvider:
    """Base for concrete clients; subclasses add typed service accessors."""

    provider_name: str = PROVIDER_NAME

    def __init__(self, configurator: Optional[OpenAIConfigurator]) -> None:
        if configurator is None:
            raise ConfigurationError("configurator is required")
        self._logger = get_logger(__name__)
        config = configurator.build_config()
        self._owns_client = config.http_client is None
        self.http_client: httpx.Client = config.http_client or httpx.Client(
            timeout=get_timeout_config().to_httpx()
        )
        self.transport = self._build_transport(config, self.http_client)
        self.realtime: Optional[OpenAIRealtime] = self._build_realtime(config, self.http_client)
        self._services: Dict[type, Any] = {}
        self._services_lock = threading.Lock()
        normalized_log_event(
            self._logger,
            "provider.init",
            LogContext(provider=self.provider_name),
            phase="init",
            base_url=config.base_url,
            realtime=self.realtime is not None,
            owns_client=self._owns_client,
        )

    def _build_transport(self, config: ClientConfig, http_client: httpx.Client) -> HttpTransport:
        return HttpTransport(
            http_client,
            base_url=config.base_url,
            headers=config.headers,
            request_interceptor=config.request_interceptor,
            body_inspector=inspect_body,
            end_of_stream=END_OF_STREAM,
            serializer=config.serializer or PydanticSerializer(),
            provider=self.provider_name,
        )

    def _build_realtime(self, config: ClientConfig, http_client: httpx.Client) -> Optional[OpenAIRealtime]:
        if config.realtime_config is None:
            return None
        return OpenAIRealtime(http_client, config.realtime_config)

    def get_or_create_service(self, service_class: Type[S]) -> S:
        """Return the cached instance of ``service_class``, creating it once."""
        service = self._services.get(service_class)
        if service is not None:
            return service
        with self._services_lock:
            service = self._services.get(service_class)
            if service is None:
                service = service_class(self.transport)  # type: ignore[call-arg]
                self._services[service_class] = service
                normalized_log_event(
                    self._logger,
                    "service.create",
                    LogContext(provider=self.provider_name),
                    phase="init",
                    service=service_class.__name__,
                )
        return service

    def close(self) -> None:
        """Close the ``httpx.Client`` when this provider created it.

        A caller-supplied client is left open; its owner closes it.
        """
        if self.realtime is not None:
            self.realtime.disconnect()
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "OpenAIProvider":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["OpenAIProvider"]
