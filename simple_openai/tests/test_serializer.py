"""PydanticSerializer: wire mapping and reply parsing."""

from __future__ import annotations

from typing import List

import pytest
from pydantic import BaseModel

from simple_openai.base.errors import SchemaError
from simple_openai.base.http.serializer import PydanticSerializer, Serializer, _adapter_for
from simple_openai.domain.chat import Chat, UserMessage
from simple_openai.domain.audio import Word


def test_default_serializer_satisfies_protocol():
    assert isinstance(PydanticSerializer(), Serializer)  # nosec B101


def test_to_wire_handles_models_and_mappings():
    ser = PydanticSerializer()

    class Plain(BaseModel):
        a: int = 1
        b: None = None

    assert ser.to_wire(UserMessage.of("hi")) == {"role": "user", "content": "hi"}  # nosec B101
    assert ser.to_wire(Plain()) == {"a": 1}  # nosec B101
    assert ser.to_wire({"k": "v"}) == {"k": "v"}  # nosec B101
    assert ser.dumps(UserMessage.of("hi")) == '{"role": "user", "content": "hi"}'  # nosec B101


def test_loads_parses_reply(fixture_text):
    chat = PydanticSerializer().loads(fixture_text("chat_completion.json"), Chat)

    assert chat.first_content() == "Paris is the capital of France."  # nosec B101
    assert chat.usage.total_tokens == 32  # nosec B101
    assert chat.usage.prompt_tokens_details.cached_tokens == 0  # nosec B101


def test_loads_parses_generic_targets():
    words = PydanticSerializer().loads(b'[{"word": "hi", "start": 0, "end": 0.5}]', List[Word])

    assert words == [Word(word="hi", start=0.0, end=0.5)]  # nosec B101


def test_loads_maps_bad_json_to_schema_error():
    with pytest.raises(SchemaError) as ei:
        PydanticSerializer().loads("{not json", Chat)

    assert ei.value.target == "Chat"  # nosec B101


def test_loads_maps_shape_mismatch_to_schema_error():
    with pytest.raises(SchemaError):
        PydanticSerializer().loads('{"id": 1}', Chat)


def test_type_adapters_are_cached():
    assert _adapter_for(Chat) is _adapter_for(Chat)  # nosec B101
