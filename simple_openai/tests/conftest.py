"""Pytest configuration for the simple_openai test suite.

Provides:
- An autouse fixture that clears credential/config environment variables and
  the parsed config-file cache so tests never see the developer's settings.
- ``fixture_text`` to read files under ``tests/fixtures``.
- ``recorder`` / ``mock_client`` helpers building providers over an
  ``httpx.MockTransport`` so no test touches the network.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, List

import httpx
import pytest

from simple_openai.config import reset_config_cache

FIXTURES = Path(__file__).parent / "fixtures"

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_ORGANIZATION",
    "OPENAI_PROJECT",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_KEY",
    "AZURE_OPENAI_BASE_URL",
    "AZURE_OPENAI_API_VERSION",
    "SIMPLE_OPENAI_CONFIG_FILE",
    "SIMPLE_OPENAI_HTTP_TIMEOUT_SECONDS",
    "SIMPLE_OPENAI_CONNECT_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from ambient credentials and config files."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def fixture_text() -> Callable[[str], str]:
    def _read(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")

    return _read


class Recorder:
    """Collect requests seen by a mock transport and answer with ``reply``."""

    def __init__(self, reply: Callable[[httpx.Request], httpx.Response]) -> None:
        self.reply = reply
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture()
def recorder() -> Callable[[Callable[[httpx.Request], httpx.Response]], Recorder]:
    return Recorder


@pytest.fixture()
def mock_http() -> Iterator[Callable[[Recorder], httpx.Client]]:
    """Build ``httpx.Client`` instances over a mock transport; closed at teardown."""
    clients: List[httpx.Client] = []

    def _make(handler: Recorder) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
