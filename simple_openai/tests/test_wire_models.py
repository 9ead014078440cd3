"""Serialization contract shared by all payload models.

Covers:
- Omitted optionals never reach the wire; set values keep their snake_case name.
- Empty strings/lists/dicts are pruned except for declared keep-empty fields.
- Enumerations serialize to their lowercase wire tokens.
- Non-identifier wire keys use aliases (``schema``).
- Replies ignore unknown keys; requests reject them.
- Instances are immutable.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from simple_openai.base.errors import ConstraintViolationError, SchemaError
from simple_openai.domain.chat import AssistantMessage, Chat, ChatRequest, UserMessage
from simple_openai.domain.chat.chat_request import Modality, ReasoningEffort, ToolChoiceOption
from simple_openai.domain.common import (
    FunctionCall,
    JsonSchema,
    ResponseFormatJsonSchema,
    StreamOptions,
    ToolCall,
)


def test_request_with_only_required_fields_serializes_minimal_body():
    req = ChatRequest(model="gpt-4o-mini", messages=[UserMessage.of("Hi")])

    assert req.to_wire() == {  # nosec B101
        "messages": [{"role": "user", "content": "Hi"}],
        "model": "gpt-4o-mini",
    }


def test_optional_values_round_trip_through_json():
    req = ChatRequest(
        model="gpt-4o-mini",
        messages=[UserMessage.of("Hi")],
        temperature=0.0,
        stream=False,
        reasoning_effort=ReasoningEffort.LOW,
        modalities=[Modality.TEXT],
        tool_choice=ToolChoiceOption.NONE,
        stream_options=StreamOptions(include_usage=True),
    )
    wire = json.loads(json.dumps(req.to_wire()))

    assert wire["temperature"] == 0.0  # nosec B101
    assert wire["stream"] is False  # nosec B101
    assert wire["reasoning_effort"] == "low"  # nosec B101
    assert wire["modalities"] == ["text"]  # nosec B101
    assert wire["tool_choice"] == "none"  # nosec B101
    assert wire["stream_options"] == {"include_usage": True}  # nosec B101
    assert ChatRequest.model_validate(wire) == req  # nosec B101


def test_empty_collections_are_pruned():
    req = ChatRequest(model="m", messages=[UserMessage.of("x")], metadata={}, tools=[], user="")

    wire = req.to_wire()

    assert "metadata" not in wire  # nosec B101
    assert "tools" not in wire  # nosec B101
    assert "user" not in wire  # nosec B101


def test_assistant_content_is_kept_as_null_next_to_tool_calls():
    call = ToolCall(id="call_1", type="function", function=FunctionCall(name="f", arguments="{}"))
    msg = AssistantMessage.of(tool_calls=[call])

    wire = msg.to_wire()

    assert "content" in wire and wire["content"] is None  # nosec B101
    assert wire["tool_calls"][0]["function"] == {"name": "f", "arguments": "{}"}  # nosec B101
    assert "refusal" not in wire  # nosec B101


def test_schema_field_uses_wire_alias():
    fmt = ResponseFormatJsonSchema(
        json_schema=JsonSchema(name="answer", schema={"type": "object"}, strict=True)
    )

    assert fmt.json_schema.schema_ == {"type": "object"}  # nosec B101
    assert fmt.to_wire() == {  # nosec B101
        "type": "json_schema",
        "json_schema": {"name": "answer", "schema": {"type": "object"}, "strict": True},
    }


def test_reply_ignores_unknown_keys(fixture_text):
    data = json.loads(fixture_text("chat_completion.json"))
    data["brand_new_field"] = {"x": 1}

    chat = Chat.from_wire(data)

    assert chat.id == "chatcmpl-AZ7f8Qx1"  # nosec B101
    assert not hasattr(chat, "brand_new_field")  # nosec B101


def test_request_rejects_unknown_keys():
    with pytest.raises(ConstraintViolationError) as ei:
        ChatRequest(model="m", messages=[UserMessage.of("x")], temprature=1.0)

    assert ei.value.fields == ["temprature"]  # nosec B101


def test_from_wire_reports_schema_error():
    with pytest.raises(SchemaError) as ei:
        Chat.from_wire({"id": "x", "object": "chat.completion"})

    assert "Chat" in str(ei.value)  # nosec B101
    assert "created" in str(ei.value)  # nosec B101


def test_models_are_immutable():
    msg = UserMessage.of("hello")

    with pytest.raises(ValidationError):
        msg.content = "changed"  # type: ignore[misc]
