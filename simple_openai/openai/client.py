"""
OpenAI client.

``SimpleOpenAIConfigurator`` resolves the API key, base URL, organization and
project (explicit arguments first, then ``simple_openai.config``: environment
and optional config file) and builds a :class:`ClientConfig` with bearer
authentication. A realtime configuration, when given, is enriched with the
same authentication plus the realtime beta header and the ``model`` query
parameter.

``SimpleOpenAI`` is the provider exposing the typed services.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..base.client_config import ClientConfig
from ..base.configurator import OpenAIConfigurator
from ..base.constants import (
    AUTHORIZATION_HEADER,
    BEARER_AUTHORIZATION,
    ORGANIZATION_HEADER,
    PROJECT_HEADER,
    REALTIME_BETA_HEADER,
    REALTIME_BETA_VALUE,
    REALTIME_MODEL_PARAM,
)
from ..base.errors import ConfigurationError
from ..base.http.serializer import Serializer
from ..base.provider import OpenAIProvider
from ..base.realtime_config import RealtimeConfig
from ..config import get_provider_config
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_REALTIME_URL
from ..config.env import get_env_var_name
from ..services.audios import AudioServices
from ..services.chat_completions import ChatCompletionServices


class SimpleOpenAIConfigurator(OpenAIConfigurator):
    """Configurator for the OpenAI API.

    Raises:
        ConfigurationError: when no API key is given or found in the
            environment/config file.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        serializer: Optional[Serializer] = None,
        realtime_config: Optional[RealtimeConfig] = None,
    ) -> None:
        resolved = get_provider_config(
            "openai",
            {
                "api_key": api_key,
                "base_url": base_url,
                "organization": organization,
                "project": project,
            },
        )
        if not resolved.get("api_key"):
            raise ConfigurationError(f"api_key is required (argument or {get_env_var_name('openai')})")
        super().__init__(
            api_key=resolved["api_key"],
            base_url=resolved.get("base_url") or OPENAI_DEFAULT_BASE_URL,
            http_client=http_client,
            serializer=serializer,
        )
        self.organization: Optional[str] = resolved.get("organization")
        self.project: Optional[str] = resolved.get("project")
        self.realtime_config = realtime_config

    def _auth_headers(self) -> Dict[str, str]:
        headers = {AUTHORIZATION_HEADER: f"{BEARER_AUTHORIZATION}{self.api_key}"}
        if self.organization:
            headers[ORGANIZATION_HEADER] = self.organization
        if self.project:
            headers[PROJECT_HEADER] = self.project
        return headers

    def _realtime(self) -> Optional[RealtimeConfig]:
        if self.realtime_config is None:
            return None
        return self.realtime_config.enriched(
            endpoint_url=OPENAI_DEFAULT_REALTIME_URL,
            headers={
                AUTHORIZATION_HEADER: f"{BEARER_AUTHORIZATION}{self.api_key}",
                REALTIME_BETA_HEADER: REALTIME_BETA_VALUE,
            },
            query_params={REALTIME_MODEL_PARAM: self.realtime_config.model},
        )

    def build_config(self) -> ClientConfig:
        return ClientConfig(
            base_url=self.base_url,
            headers=self._auth_headers(),
            http_client=self.http_client,
            serializer=self.serializer,
            realtime_config=self._realtime(),
        )


class SimpleOpenAI(OpenAIProvider):
    """Client for the OpenAI API.

    Example::

        with SimpleOpenAI(api_key="sk-...") as client:
            chat = client.chat_completions().create(request)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        configurator: Optional[OpenAIConfigurator] = None,
        **options: Any,
    ) -> None:
        super().__init__(configurator or SimpleOpenAIConfigurator(api_key=api_key, **options))

    def chat_completions(self) -> ChatCompletionServices:
        return self.get_or_create_service(ChatCompletionServices)

    def audios(self) -> AudioServices:
        return self.get_or_create_service(AudioServices)


__all__ = ["SimpleOpenAIConfigurator", "SimpleOpenAI"]
