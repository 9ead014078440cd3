"""simple_openai.config.env
========================

Centralized environment variable mapping and helpers for credentials.

Purpose
-------
- Provide a single source of truth for mapping provider identifiers to their
  environment variable names (canonical and aliases).
- Offer small utilities to look up provider API keys consistently.

Failure Modes
-------------
- Functions return ``None`` when a provider is unknown or no value is present.
- Helpers never raise on missing providers or unset variables; configurators
  decide whether a missing key is fatal.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider → env var mapping
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "azure": "AZURE_OPENAI_API_KEY",
}


# Provider → ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "azure": ("AZURE_OPENAI_API_KEY", "AZURE_OPENAI_KEY"),
}

# Provider → prefix used for the non-secret settings (``<PREFIX>_BASE_URL``).
ENV_PREFIX: Dict[str, str] = {
    "openai": "OPENAI",
    "azure": "AZURE_OPENAI",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', or starts with 'your-'.
    The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or v.startswith("your-")


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical API key environment variable name for a provider."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API key environment variable names for a provider.

    The canonical name is yielded first, followed by any aliases.
    """
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):  # pragma: no branch - small tuples
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        (value, env_var_used) for the first non-empty, non-placeholder
        candidate; (None, None) when nothing usable is set.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "ENV_PREFIX",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
