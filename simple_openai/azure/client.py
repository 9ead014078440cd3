"""
Azure OpenAI client.

Azure serves each model deployment under its own base URL
(``https://<resource>.openai.azure.com/openai/deployments/<deployment>``),
authenticates with an ``api-key`` header and versions the API through the
``api-version`` query parameter. The configurator installs a request
interceptor that removes the ``/v1`` prefix of the OpenAI paths and adds the
version parameter, so the shared services work unchanged.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..base.client_config import ClientConfig
from ..base.configurator import OpenAIConfigurator
from ..base.constants import AZURE_API_KEY_HEADER, AZURE_API_VERSION_PARAM
from ..base.errors import ConfigurationError
from ..base.http.request_data import HttpRequestData
from ..base.http.serializer import Serializer
from ..base.provider import OpenAIProvider
from ..config import get_provider_config
from ..services.audios import AudioServices
from ..services.chat_completions import ChatCompletionServices

_VERSION_PREFIX = "/v1"


class AzureOpenAIConfigurator(OpenAIConfigurator):
    """Configurator for an Azure OpenAI deployment.

    Raises:
        ConfigurationError: when the API key, the deployment base URL or the
            API version is missing after resolving the environment.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        serializer: Optional[Serializer] = None,
    ) -> None:
        resolved = get_provider_config(
            "azure",
            {"api_key": api_key, "base_url": base_url, "api_version": api_version},
        )
        missing = [k for k in ("api_key", "base_url", "api_version") if not resolved.get(k)]
        if missing:
            raise ConfigurationError(f"azure configuration is missing: {', '.join(missing)}")
        super().__init__(
            api_key=resolved["api_key"],
            base_url=resolved["base_url"],
            http_client=http_client,
            serializer=serializer,
        )
        self.api_version: str = str(resolved["api_version"])

    def intercept(self, request: HttpRequestData) -> HttpRequestData:
        """Rewrite an OpenAI-style request for the deployment endpoint."""
        path = request.path
        if path == _VERSION_PREFIX or path.startswith(f"{_VERSION_PREFIX}/"):
            request.path = path[len(_VERSION_PREFIX):]
        request.params[AZURE_API_VERSION_PARAM] = self.api_version
        return request

    def build_config(self) -> ClientConfig:
        return ClientConfig(
            base_url=self.base_url,
            headers={AZURE_API_KEY_HEADER: self.api_key},
            http_client=self.http_client,
            request_interceptor=self.intercept,
            serializer=self.serializer,
        )


class SimpleOpenAIAzure(OpenAIProvider):
    """Client for an Azure OpenAI deployment (no realtime support)."""

    provider_name = "azure"

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        configurator: Optional[OpenAIConfigurator] = None,
        **options: Any,
    ) -> None:
        super().__init__(configurator or AzureOpenAIConfigurator(api_key=api_key, **options))

    def chat_completions(self) -> ChatCompletionServices:
        return self.get_or_create_service(ChatCompletionServices)

    def audios(self) -> AudioServices:
        return self.get_or_create_service(AudioServices)


__all__ = ["AzureOpenAIConfigurator", "SimpleOpenAIAzure"]
