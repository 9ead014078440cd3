"""
Function tools, tool calls and forced tool choice.

``FunctionDef.from_model`` derives the ``parameters`` JSON schema from a
pydantic model so tool signatures can be declared as regular classes.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Type

from pydantic import BaseModel, Field

from .wire import RequestModel, WireModel


class FunctionDef(RequestModel):
    """Declared function: name, description and JSON-schema parameters."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None
    strict: Optional[bool] = None

    @classmethod
    def from_model(
        cls,
        model: Type[BaseModel],
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> "FunctionDef":
        """Build a definition whose parameters mirror ``model``'s JSON schema.

        ``name`` defaults to the class name and ``description`` to the class
        docstring. With ``strict=True`` the schema is closed with
        ``additionalProperties: false`` as the API requires.
        """
        schema = model.model_json_schema()
        schema.pop("title", None)
        if strict:
            schema["additionalProperties"] = False
        doc = (model.__doc__ or "").strip() or None
        return cls(
            name=name or model.__name__,
            description=description if description is not None else doc,
            parameters=schema,
            strict=strict,
        )


class Tool(RequestModel):
    type: Literal["function"] = "function"
    function: FunctionDef

    @classmethod
    def function_of(cls, function: FunctionDef) -> "Tool":
        return cls(function=function)


class FunctionCall(WireModel):
    """Function invocation; ``arguments`` is the raw JSON text from the model.

    In streamed replies ``name`` and ``arguments`` arrive as fragments.
    """

    name: Optional[str] = None
    arguments: Optional[str] = None


class ToolCall(WireModel):
    index: Optional[int] = None
    id: Optional[str] = None
    type: Optional[Literal["function"]] = None
    function: FunctionCall


class FunctionName(RequestModel):
    name: str = Field(..., min_length=1)


class ToolChoice(RequestModel):
    """Forces the model to call one specific function."""

    type: Literal["function"] = "function"
    function: FunctionName

    @classmethod
    def function_named(cls, name: str) -> "ToolChoice":
        return cls(function=FunctionName(name=name))


__all__ = ["FunctionDef", "Tool", "FunctionCall", "ToolCall", "FunctionName", "ToolChoice"]
