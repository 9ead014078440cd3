"""Schema failure raised when a server payload cannot be mapped to a type."""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class SchemaError(ValueError):
    """A payload did not match the expected wire shape.

    Typical causes are a missing or unrecognized discriminator (message
    ``role``, content part ``type``) or malformed JSON. The payload is never
    coerced into a default variant.

    Attributes:
        target: Name of the type the payload was parsed into.
        errors: Structured error entries reported by the parser.
    """

    def __init__(self, target: str, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.target = target
        self.errors: List[Dict[str, Any]] = list(errors or [])
        super().__init__(f"cannot parse {target}: {message}")

    @classmethod
    def from_validation_error(cls, target: Any, exc: Exception) -> "SchemaError":
        """Build from a ``pydantic.ValidationError`` raised while parsing."""
        name = target if isinstance(target, str) else getattr(target, "__name__", None) or repr(target)
        errors = exc.errors(include_url=False) if hasattr(exc, "errors") else []
        summary = "; ".join(
            f"{'.'.join(str(p) for p in e.get('loc', ())) or '<root>'}: {e.get('msg')}" for e in errors
        )
        return cls(name, summary or str(exc), errors)


__all__ = ["SchemaError"]
