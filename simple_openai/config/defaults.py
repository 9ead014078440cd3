"""simple_openai.config.defaults
=============================

Central place for small, stable default values. These defaults can be
overridden via environment variables, an external configuration file or
explicit configurator arguments.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# OpenAI: request paths carry the ``/v1`` prefix, so the base URL does not.
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com"
OPENAI_DEFAULT_REALTIME_URL = "wss://api.openai.com/v1/realtime"

# Environment variable pointing at an optional JSON/YAML config file.
CONFIG_FILE_ENV = "SIMPLE_OPENAI_CONFIG_FILE"


__all__ = [
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_REALTIME_URL",
    "CONFIG_FILE_ENV",
]
