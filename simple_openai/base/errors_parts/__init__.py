"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `simple_openai.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .configuration_error import ConfigurationError
from .constraint_violation import ConstraintViolationError, Violation
from .schema_error import SchemaError
from .provider_error import OpenAIResponseError, ProviderError
from .classification import classify_exception, status_to_code

__all__ = [
    "ErrorCode",
    "ConfigurationError",
    "ConstraintViolationError",
    "Violation",
    "SchemaError",
    "ProviderError",
    "OpenAIResponseError",
    "classify_exception",
    "status_to_code",
]
