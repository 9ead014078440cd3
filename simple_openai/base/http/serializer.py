"""
Payload (de)serialization.

``Serializer`` is the narrow protocol the transport depends on; the default
``PydanticSerializer`` maps payload models to JSON-ready mappings and parses
reply text into any type pydantic understands (a model class, ``List[Chat]``
and so on). Parse failures surface as :class:`SchemaError`.

Type adapters are built once per target type and cached process-wide; the
cache uses the same read-then-lock pattern as the shared client pools.
"""

from __future__ import annotations

import json
import threading
from typing import Any, Dict, Protocol, Union, runtime_checkable

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import ConstraintViolationError, SchemaError


@runtime_checkable
class Serializer(Protocol):
    def to_wire(self, obj: Any) -> Any: ...

    def dumps(self, obj: Any) -> str: ...

    def loads(self, text: Union[str, bytes], target: Any) -> Any: ...


_ADAPTERS: Dict[Any, TypeAdapter[Any]] = {}
_LOCK = threading.Lock()


def _adapter_for(target: Any) -> TypeAdapter[Any]:
    try:
        adapter = _ADAPTERS.get(target)
    except TypeError:
        # Unhashable target; build an uncached adapter.
        return TypeAdapter(target)
    if adapter is not None:
        return adapter
    with _LOCK:
        adapter = _ADAPTERS.get(target)
        if adapter is None:
            adapter = TypeAdapter(target)
            _ADAPTERS[target] = adapter
        return adapter


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


class PydanticSerializer:
    """Default serializer backed by pydantic."""

    def to_wire(self, obj: Any) -> Any:
        """Return the JSON-ready form of ``obj``.

        Payload models use their own ``to_wire``; other pydantic models are
        dumped without ``None`` values; anything else passes through.
        """
        if hasattr(obj, "to_wire") and isinstance(obj, BaseModel):
            return obj.to_wire()
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
        return obj

    def dumps(self, obj: Any) -> str:
        return json.dumps(self.to_wire(obj), ensure_ascii=False)

    def loads(self, text: Union[str, bytes], target: Any) -> Any:
        """Parse reply ``text`` into ``target``.

        Raises:
            SchemaError: on malformed JSON or when the payload does not match
                ``target`` (including unknown discriminators).
        """
        name = _target_name(target)
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise SchemaError(name, f"invalid JSON ({exc})") from exc
        try:
            return _adapter_for(target).validate_python(data)
        except ConstraintViolationError as exc:
            raise SchemaError(name, "; ".join(str(v) for v in exc.violations)) from exc
        except ValidationError as exc:
            violations = ConstraintViolationError.from_validation_error(exc, target).violations
            raise SchemaError(name, "; ".join(str(v) for v in violations), exc.errors(include_url=False)) from exc


__all__ = ["Serializer", "PydanticSerializer"]
