"""
Validation of outgoing request bodies.

Purpose
-------
Constraints are declared on the payload fields themselves (pydantic ``Field``
bounds, required fields, unions of permitted types). ``Validator`` re-checks a
payload object against those declarations and reports every failure as a
:class:`Violation`; ``inspect_body`` is the body inspector the provider
installs on the transport so nothing leaves the process unchecked, including
copies produced with ``model_copy(update=...)`` or ``model_construct`` that
bypass construction-time validation.

Failure Modes
-------------
``validate`` never raises for constraint failures; it returns them.
``inspect_body`` raises :class:`ConstraintViolationError` carrying the full,
non-empty list.
"""

from __future__ import annotations

import warnings
from typing import Any, List

from pydantic import BaseModel, ValidationError

from .errors import ConstraintViolationError, Violation


def _field_values(value: Any) -> Any:
    """Return the declared field values of ``value`` as plain containers.

    Unlike ``model_dump`` this keeps empty values the wire form prunes, and it
    unpacks nested models so they are checked again too.
    """
    if isinstance(value, BaseModel):
        fields = type(value).model_fields
        data = {k: _field_values(v) for k, v in value.__dict__.items() if k in fields}
        data.update({k: _field_values(v) for k, v in (value.model_extra or {}).items()})
        return data
    if isinstance(value, (list, tuple)):
        return [_field_values(v) for v in value]
    if isinstance(value, dict):
        return {k: _field_values(v) for k, v in value.items()}
    return value


class Validator:
    """Collect constraint violations of a payload object graph."""

    def validate(self, obj: Any) -> List[Violation]:
        """Return all violations found on ``obj``; empty when it is valid.

        Objects that are not pydantic models (plain mappings, bytes, ``None``)
        carry no declared constraints and always validate.
        """
        if not isinstance(obj, BaseModel):
            return []
        model = type(obj)
        data = _field_values(obj)
        # Construction already warned about deprecated fields.
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            try:
                model.model_validate(data)
            except ConstraintViolationError as exc:
                return list(exc.violations)
            except ValidationError as exc:
                build = getattr(model, "constraint_error", None)
                if build is None:
                    return list(ConstraintViolationError.from_validation_error(exc, model).violations)
                return list(build(exc, data).violations)
        return []


_DEFAULT_VALIDATOR = Validator()


def inspect_body(body: Any) -> None:
    """Abort a send when ``body`` breaks any declared constraint.

    Raises:
        ConstraintViolationError: with every violation found on ``body``.
    """
    violations = _DEFAULT_VALIDATOR.validate(body)
    if violations:
        raise ConstraintViolationError(violations)


__all__ = ["Validator", "inspect_body"]
