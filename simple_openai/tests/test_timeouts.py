"""Default HTTP client timeouts."""

from __future__ import annotations

from simple_openai.base.timeouts import (
    CONNECT_TIMEOUT_ENV,
    HTTP_TIMEOUT_ENV,
    TimeoutConfig,
    get_timeout_config,
)


def test_defaults():
    cfg = get_timeout_config()

    assert cfg == TimeoutConfig(http_timeout_seconds=60.0, connect_timeout_seconds=10.0)  # nosec B101
    timeout = cfg.to_httpx()
    assert (timeout.read, timeout.connect) == (60.0, 10.0)  # nosec B101


def test_environment_overrides_are_picked_up(monkeypatch):
    get_timeout_config()
    monkeypatch.setenv(HTTP_TIMEOUT_ENV, "12.5")
    monkeypatch.setenv(CONNECT_TIMEOUT_ENV, "3")

    cfg = get_timeout_config()

    assert (cfg.http_timeout_seconds, cfg.connect_timeout_seconds) == (12.5, 3.0)  # nosec B101
    assert get_timeout_config() is cfg  # nosec B101


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv(HTTP_TIMEOUT_ENV, "soon")
    monkeypatch.setenv(CONNECT_TIMEOUT_ENV, "-1")

    cfg = get_timeout_config()

    assert cfg == TimeoutConfig()  # nosec B101
