"""ChatCompletionServices end to end over a mock transport."""

from __future__ import annotations

import json

import httpx

from simple_openai import ChatRequest, SimpleOpenAI, StreamOptions, Tool, FunctionDef, ToolMessage, UserMessage
from simple_openai.domain.chat import Chat


def _client(mock_http, rec) -> SimpleOpenAI:
    return SimpleOpenAI(api_key="sk-test", http_client=mock_http(rec))


def test_create_forces_non_streaming(recorder, mock_http, fixture_text):
    rec = recorder(lambda r: httpx.Response(200, text=fixture_text("chat_completion.json")))
    request = ChatRequest(model="gpt-4o-mini", messages=[UserMessage.of("Capital of France?")], stream=True)

    chat = _client(mock_http, rec).chat_completions().create(request)

    assert isinstance(chat, Chat)  # nosec B101
    assert chat.first_content() == "Paris is the capital of France."  # nosec B101
    body = json.loads(rec.last.content)
    assert body["stream"] is False  # nosec B101
    assert rec.last.url.path == "/v1/chat/completions"  # nosec B101
    assert request.stream is True  # nosec B101


def test_create_stream_forces_streaming_and_yields_chunks(recorder, mock_http, fixture_text):
    rec = recorder(lambda r: httpx.Response(200, text=fixture_text("chat_stream.sse")))
    request = ChatRequest(model="gpt-4o-mini", messages=[UserMessage.of("Say hello")]).with_stream_options(
        StreamOptions(include_usage=True)
    )

    chunks = list(_client(mock_http, rec).chat_completions().create_stream(request))

    body = json.loads(rec.last.content)
    assert body["stream"] is True  # nosec B101
    assert body["stream_options"] == {"include_usage": True}  # nosec B101
    text = "".join(c.first_content() or "" for c in chunks)
    assert text == "Hello there"  # nosec B101
    assert chunks[-1].choices[0].finish_reason == "stop"  # nosec B101


def test_tool_call_round_trip(recorder, mock_http, fixture_text):
    rec = recorder(lambda r: httpx.Response(200, text=fixture_text("chat_tool_calls.json")))
    client = _client(mock_http, rec)
    weather = FunctionDef(
        name="get_weather",
        description="Weather for a city",
        parameters={"type": "object", "properties": {"city": {"type": "string"}}, "required": ["city"]},
    )
    first = ChatRequest(
        model="gpt-4o-mini",
        messages=[UserMessage.of("Weather in Lima?")],
        tools=[Tool.function_of(weather)],
    )

    chat = client.chat_completions().create(first)
    reply = chat.choices[0].message
    call = reply.tool_calls[0]
    assert call.function.name == "get_weather"  # nosec B101
    assert json.loads(call.function.arguments) == {"city": "Lima"}  # nosec B101

    follow_up = ChatRequest(
        model="gpt-4o-mini",
        messages=[*first.messages, reply.to_assistant_message(), ToolMessage.of('{"temp_c": 19}', call.id)],
    )
    client.chat_completions().create(follow_up)

    sent_messages = json.loads(rec.last.content)["messages"]
    assert [m["role"] for m in sent_messages] == ["user", "assistant", "tool"]  # nosec B101
    assert sent_messages[1]["content"] is None  # nosec B101
    assert sent_messages[1]["tool_calls"][0]["id"] == "call_Wq3Jd9"  # nosec B101
    assert sent_messages[2]["tool_call_id"] == "call_Wq3Jd9"  # nosec B101
