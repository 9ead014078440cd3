"""
Configurator contract.

A configurator collects raw user inputs (API key, base URL, optional
``httpx.Client`` and serializer) and turns them into an immutable
:class:`ClientConfig`. Concrete configurators resolve unset values from the
``simple_openai.config`` layer (config file and environment) and raise
:class:`ConfigurationError` at construction time when a required value is
still missing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import httpx

from .client_config import ClientConfig
from .http.serializer import Serializer


class OpenAIConfigurator(ABC):
    """Base class for configurators.

    Attributes:
        api_key: Credential for the API.
        base_url: API base URL.
        http_client: Optional caller-owned ``httpx.Client`` to share.
        serializer: Optional payload serializer.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        serializer: Optional[Serializer] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.http_client = http_client
        self.serializer = serializer

    @abstractmethod
    def build_config(self) -> ClientConfig:
        """Return the immutable configuration for a provider."""
        raise NotImplementedError


__all__ = ["OpenAIConfigurator"]
