"""ChatRequest constraints, copies and the deprecated ``max_tokens`` decision.

Covers:
- Inclusive numeric bounds (both edges accepted, just outside rejected).
- All violations of one construction reported together.
- ``stop`` accepts a string or at most four strings.
- ``with_*`` helpers return modified copies and leave the original intact.
"""

from __future__ import annotations

import warnings

import pytest

from simple_openai.base.errors import ConstraintViolationError
from simple_openai.domain.chat import ChatRequest, UserMessage
from simple_openai.domain.chat.chat_request import ChatAudio, Modality, ToolChoiceOption
from simple_openai.domain.common import AudioFormat, StreamOptions, ToolChoice, Voice


def _request(**fields):
    return ChatRequest(model="gpt-4o-mini", messages=[UserMessage.of("Hi")], **fields)


@pytest.mark.parametrize(
    "field, low, high, step",
    [
        ("temperature", 0.0, 2.0, 0.01),
        ("top_p", 0.0, 1.0, 0.01),
        ("frequency_penalty", -2.0, 2.0, 0.01),
        ("presence_penalty", -2.0, 2.0, 0.01),
        ("n", 1, 128, 1),
        ("top_logprobs", 0, 20, 1),
    ],
)
def test_numeric_bounds_are_inclusive(field, low, high, step):
    assert getattr(_request(**{field: low}), field) == low  # nosec B101
    assert getattr(_request(**{field: high}), field) == high  # nosec B101

    for outside in (low - step, high + step):
        with pytest.raises(ConstraintViolationError) as ei:
            _request(**{field: outside})
        assert ei.value.fields == [field]  # nosec B101


def test_all_violations_are_reported_at_once():
    with pytest.raises(ConstraintViolationError) as ei:
        ChatRequest(model="gpt-4o-mini", messages=[], temperature=3.5, n=0)

    assert set(ei.value.fields) == {"messages", "temperature", "n"}  # nosec B101
    assert str(ei.value).startswith("3 constraint violation(s)")  # nosec B101


def test_required_fields():
    with pytest.raises(ConstraintViolationError) as ei:
        ChatRequest()

    assert set(ei.value.fields) == {"messages", "model"}  # nosec B101


def test_nested_violation_is_reported_with_its_path():
    with pytest.raises(ConstraintViolationError) as ei:
        ChatRequest(model="m", messages=[{"role": "tool", "content": "x"}])

    assert ei.value.fields == ["messages.0.tool_call_id"]  # nosec B101


def test_stop_accepts_string_or_up_to_four_strings():
    assert _request(stop="END").stop == "END"  # nosec B101
    assert _request(stop=["a", "b", "c", "d"]).stop == ["a", "b", "c", "d"]  # nosec B101

    with pytest.raises(ConstraintViolationError) as ei:
        _request(stop=["a", "b", "c", "d", "e"])
    assert all(f.startswith("stop") for f in ei.value.fields)  # nosec B101


def test_tool_choice_accepts_option_or_named_function():
    assert _request(tool_choice="required").tool_choice is ToolChoiceOption.REQUIRED  # nosec B101

    named = _request(tool_choice=ToolChoice.function_named("get_weather"))
    assert named.to_wire()["tool_choice"] == {"type": "function", "function": {"name": "get_weather"}}  # nosec B101

    with pytest.raises(ConstraintViolationError):
        _request(tool_choice="sometimes")


def test_audio_output_parameters():
    req = _request(modalities=[Modality.TEXT, Modality.AUDIO], audio=ChatAudio.of(Voice.CORAL, AudioFormat.PCM16))

    assert req.to_wire()["audio"] == {"voice": "coral", "format": "pcm16"}  # nosec B101


def test_with_helpers_return_copies():
    original = _request()

    streamed = original.with_stream(True).with_stream_options(StreamOptions(include_usage=True))
    forced = original.with_tool_choice(ToolChoiceOption.AUTO)

    assert original.stream is None and original.stream_options is None  # nosec B101
    assert streamed.stream is True  # nosec B101
    assert streamed.to_wire()["stream_options"] == {"include_usage": True}  # nosec B101
    assert forced.tool_choice is ToolChoiceOption.AUTO and original.tool_choice is None  # nosec B101


def test_max_tokens_alone_is_deprecated():
    with pytest.warns(DeprecationWarning, match="max_completion_tokens"):
        req = _request(max_tokens=100)

    assert req.to_wire()["max_tokens"] == 100  # nosec B101


def test_max_completion_tokens_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        req = _request(max_completion_tokens=100)

    assert req.max_completion_tokens == 100  # nosec B101


def test_max_tokens_and_max_completion_tokens_conflict():
    with pytest.raises(ConstraintViolationError) as ei:
        _request(max_tokens=100, max_completion_tokens=100)

    assert ei.value.fields == ["max_tokens"]  # nosec B101


def test_token_limit_conflict_is_reported_with_field_violations():
    with pytest.raises(ConstraintViolationError) as ei:
        _request(temperature=5.0, n=0, max_tokens=1, max_completion_tokens=1)

    assert set(ei.value.fields) == {"temperature", "n", "max_tokens"}  # nosec B101


def test_union_member_labels_are_not_part_of_paths():
    with pytest.raises(ConstraintViolationError) as ei:
        ChatRequest(
            model="m",
            messages=[
                {"role": "user", "content": "ok"},
                {"role": "assistant", "content": "ok", "audio": {"id": ""}},
            ],
        )

    assert ei.value.fields == ["messages.1.audio.id"]  # nosec B101
