"""
Base package: configuration contracts, transport, validation, errors and
logging shared by the concrete clients.

The provider façade lives in ``simple_openai.base.provider`` and is not
re-exported here because it depends on the payload and realtime packages,
which themselves import from this package.
"""

from .errors import (
    ConfigurationError,
    ConstraintViolationError,
    ErrorCode,
    OpenAIResponseError,
    ProviderError,
    SchemaError,
    Violation,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "ErrorCode",
    "ProviderError",
    "OpenAIResponseError",
    "ConfigurationError",
    "ConstraintViolationError",
    "SchemaError",
    "Violation",
    "TimeoutConfig",
    "get_timeout_config",
]
