"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``simple_openai.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.constraint_violation import ConstraintViolationError, Violation
from .errors_parts.schema_error import SchemaError
from .errors_parts.provider_error import OpenAIResponseError, ProviderError
from .errors_parts.classification import classify_exception, status_to_code

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
