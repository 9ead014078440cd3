"""
Constraint violation types.

A :class:`Violation` names one failed field constraint; a
:class:`ConstraintViolationError` carries every violation found on a request
body so callers see the complete picture in a single failure.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import UnionType
from typing import Annotated, Any, List, Optional, Sequence, Tuple, Union, get_args, get_origin


@dataclass(frozen=True)
class Violation:
    """One failed constraint.

    Attributes:
        field: Dotted path to the offending field (``"messages.0.content"``).
        message: Human-readable description of the broken constraint.
        value: The rejected value, when available.
    """

    field: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def _join(prefix: Tuple[Any, ...], field: str) -> str:
    head = ".".join(str(p) for p in prefix)
    if not head:
        return field
    return head if field == "<root>" else f"{head}.{field}"


def _unwrap(annotation: Any) -> Any:
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation


def _union_members(annotation: Any) -> Optional[List[Any]]:
    if get_origin(annotation) in (Union, UnionType):
        return [_unwrap(a) for a in get_args(annotation) if a is not type(None)]
    return None


def _label_matches(member: Any, label: Any) -> bool:
    fields = getattr(member, "model_fields", None)
    if isinstance(fields, dict):
        return label == member.__name__ or any(f.default == label for f in fields.values())
    name = getattr(get_origin(member) or member, "__name__", "")
    return bool(name) and str(label).split("[", 1)[0] == name


def _child(annotation: Any, segment: Any) -> Any:
    fields = getattr(annotation, "model_fields", None)
    if isinstance(fields, dict):
        field = fields.get(segment)
        return field.annotation if field is not None else None
    args = get_args(annotation)
    if get_origin(annotation) in (list, tuple, set, frozenset) and args and isinstance(segment, int):
        return args[0]
    if get_origin(annotation) is dict and len(args) == 2:
        return args[1]
    return None


def _field_path(model: Any, loc: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """Drop the union member labels pydantic inserts into ``loc``.

    A segment met while the declared type is a union of several members names
    the member tried (a discriminator tag or a type label), not a field.
    """
    path: List[Any] = []
    annotation = model
    for segment in loc:
        annotation = _unwrap(annotation)
        members = _union_members(annotation)
        while members is not None and len(members) == 1:
            annotation = members[0]
            members = _union_members(annotation)
        if members:
            annotation = next((m for m in members if _label_matches(m, segment)), None)
            continue
        path.append(segment)
        annotation = _child(annotation, segment)
    return tuple(path)


class ConstraintViolationError(ValueError):
    """One or more declared field constraints failed on a request body."""

    def __init__(self, violations: Sequence[Violation]) -> None:
        if not violations:
            raise ValueError("ConstraintViolationError requires at least one violation")
        self.violations: List[Violation] = list(violations)
        super().__init__(self._render())

    @property
    def fields(self) -> List[str]:
        """Return the offending field paths in reporting order."""
        return [v.field for v in self.violations]

    def _render(self) -> str:
        lines = "\n".join(f"  - {v}" for v in self.violations)
        return f"{len(self.violations)} constraint violation(s):\n{lines}"

    @classmethod
    def from_validation_error(cls, exc: Exception, model: Any = None) -> "ConstraintViolationError":
        """Build from a ``pydantic.ValidationError``.

        When ``model`` (the validated type) is given, union member labels are
        removed from the reported paths so they name declared fields only.

        Nested models raise this error from their own constructor; pydantic
        then reports it as a single ``value_error`` entry on the parent. Those
        entries are flattened back into the nested violations, prefixed with
        the parent location, so the full list survives any nesting depth.
        """
        violations: List[Violation] = []
        for entry in exc.errors(include_url=False):
            loc = tuple(entry.get("loc", ()))
            if model is not None:
                loc = _field_path(model, loc)
            nested = (entry.get("ctx") or {}).get("error")
            if isinstance(nested, ConstraintViolationError):
                violations.extend(
                    Violation(_join(loc, v.field), v.message, v.value) for v in nested.violations
                )
                continue
            violations.append(Violation(_join(loc, "<root>"), entry.get("msg", ""), entry.get("input")))
        return cls(violations or [Violation("<root>", str(exc))])


__all__ = ["Violation", "ConstraintViolationError"]
