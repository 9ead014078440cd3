"""Configuration failure raised while building clients."""
from __future__ import annotations


class ConfigurationError(ValueError):
    """A required configuration value is missing or inconsistent.

    Raised at construction time (configurators, ``ClientConfig``, providers);
    it is fatal for the object being built and never retried.
    """


__all__ = ["ConfigurationError"]
