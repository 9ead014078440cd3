"""Structured logging context object.

This module defines :class:`LogContext`, a dataclass carrying the common
fields of a logging event (provider, model, HTTP method/path and extra
metadata). ``to_dict`` merges the ``extra`` mapping and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    method: Optional[str] = None
    path: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
