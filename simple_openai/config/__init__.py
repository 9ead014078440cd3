"""Unified configuration layer for client settings.

Merge order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``SIMPLE_OPENAI_CONFIG_FILE``
    3. Environment variables (``OPENAI_BASE_URL``, ``OPENAI_API_KEY``, ...)
    4. Explicit overrides passed by the configurator

Environment Variable Conventions
--------------------------------
<PREFIX>_API_KEY, <PREFIX>_BASE_URL, <PREFIX>_ORGANIZATION, <PREFIX>_PROJECT,
<PREFIX>_API_VERSION where PREFIX is ``OPENAI`` or ``AZURE_OPENAI``.

External Config File
--------------------
JSON is attempted first, then YAML. Structure example:

```
openai:
  organization: org-123
  project: proj-abc
azure:
  base_url: https://my-resource.openai.azure.com/openai/deployments/gpt-4o
  api_version: "2024-10-21"
```
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .defaults import CONFIG_FILE_ENV, OPENAI_DEFAULT_BASE_URL
from .env import ENV_PREFIX, resolve_provider_key

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"base_url": OPENAI_DEFAULT_BASE_URL},
    "azure": {},
}

ENV_FIELD_MAP = {
    "base_url": "BASE_URL",
    "organization": "ORGANIZATION",
    "project": "PROJECT",
    "api_version": "API_VERSION",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv(CONFIG_FILE_ENV)
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Any = {}
    if path and Path(path).is_file():
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except ValueError:
            data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    _FILE_CACHE_PATH = path
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the parsed config file so the next lookup re-reads it."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = ENV_PREFIX.get(provider, provider.upper())
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return merged settings for ``provider`` (``"openai"`` or ``"azure"``).

    ``None`` values in ``overrides`` never erase a lower-precedence value.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}
    cfg |= DEFAULTS.get(name, {})
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg
    cfg |= _env_overrides(name)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
]
