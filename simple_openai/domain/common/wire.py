"""
Base model shared by every request and response payload.

Purpose
-------
``WireModel`` fixes the serialization and validation contract once so payload
classes only declare fields:

- Instances are frozen; ``model_copy(update=...)`` yields modified copies.
- ``to_wire()`` returns a JSON-ready mapping that omits ``None``, empty
  strings, empty lists and empty dicts, except for the fields a class names in
  ``keep_empty_fields``.
- Attribute names are already snake_case, which is the wire convention;
  aliases only cover wire keys that are not legal identifiers.
- Construction validates every declared constraint on the whole object graph
  and raises :class:`ConstraintViolationError` listing all violations.
  Constraints spanning several fields are declared in
  ``cross_field_violations`` and reported together with field errors.
- ``from_wire()`` parses server payloads and raises :class:`SchemaError`
  instead, since a malformed reply is not the caller's constraint failure.

Response payloads ignore unknown keys; request payloads derive from
``RequestModel`` which rejects them.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_serializer

from ...base.errors import ConstraintViolationError, SchemaError, Violation

M = TypeVar("M", bound="WireModel")


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (str, list, dict)) and len(value) == 0


class WireModel(BaseModel):
    """Immutable payload object with empty-value pruning on serialization."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Fields serialized even when ``None`` or empty.
    keep_empty_fields: ClassVar[FrozenSet[str]] = frozenset()
    # Fields carrying local files; sent as multipart parts by the transport.
    file_fields: ClassVar[FrozenSet[str]] = frozenset()

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise type(self).constraint_error(exc, data) from exc

    @classmethod
    def cross_field_violations(cls, data: Mapping[str, Any]) -> List[Violation]:
        """Return violations of constraints spanning several fields of ``data``."""
        return []

    @classmethod
    def constraint_error(cls, exc: ValidationError, data: Mapping[str, Any]) -> ConstraintViolationError:
        """Build the error for ``exc``, adding cross-field violations of ``data``.

        Model-level checks do not run once a field has failed, so they are
        evaluated here against the raw input as well.
        """
        error = ConstraintViolationError.from_validation_error(exc, cls)
        seen = set(error.fields)
        extra = [v for v in cls.cross_field_violations(data) if v.field not in seen]
        return ConstraintViolationError([*error.violations, *extra]) if extra else error

    @model_serializer(mode="wrap")
    def _prune_empty(self, handler: Any) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        keep = self.keep_empty_fields
        return {k: v for k, v in data.items() if k in keep or not _is_empty(v)}

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping sent on the wire."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_wire(cls: Type[M], data: Mapping[str, Any]) -> M:
        """Parse a server payload into this type.

        Raises:
            SchemaError: when a discriminator is missing or unknown, or any
                field does not match the declared shape.
        """
        try:
            return cls.model_validate(data)
        except ConstraintViolationError as exc:
            raise SchemaError(cls.__name__, "; ".join(str(v) for v in exc.violations)) from exc
        except ValidationError as exc:
            violations = ConstraintViolationError.from_validation_error(exc, cls).violations
            raise SchemaError(cls.__name__, "; ".join(str(v) for v in violations), exc.errors(include_url=False)) from exc


class RequestModel(WireModel):
    """Outgoing payload; unknown keys are rejected."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


__all__ = ["WireModel", "RequestModel"]
