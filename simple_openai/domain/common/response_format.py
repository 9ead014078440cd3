"""Response format variants, discriminated on ``type``."""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import Field

from .wire import RequestModel


class ResponseFormatText(RequestModel):
    type: Literal["text"] = "text"


class ResponseFormatJsonObject(RequestModel):
    type: Literal["json_object"] = "json_object"


class JsonSchema(RequestModel):
    """Structured output schema; ``schema`` is exposed as ``schema_``."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    schema_: Dict[str, Any] = Field(..., alias="schema")
    strict: Optional[bool] = None


class ResponseFormatJsonSchema(RequestModel):
    type: Literal["json_schema"] = "json_schema"
    json_schema: JsonSchema


ResponseFormat = Annotated[
    Union[ResponseFormatText, ResponseFormatJsonObject, ResponseFormatJsonSchema],
    Field(discriminator="type"),
]


__all__ = [
    "ResponseFormatText",
    "ResponseFormatJsonObject",
    "JsonSchema",
    "ResponseFormatJsonSchema",
    "ResponseFormat",
]
