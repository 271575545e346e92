from __future__ import annotations

import dataclasses

import pytest

from simple_llm import RecordedCall, Response, Usage


def test_usage_total_and_dict():
    usage = Usage(input_tokens=10, output_tokens=5)
    assert usage.total_tokens == 15
    assert usage.to_dict() == {"input_tokens": 10, "output_tokens": 5}


def test_response_to_dict():
    response = Response(text_content="Hello!", usage=Usage(10, 5), model="gpt-4")
    assert response.to_dict() == {
        "text_content": "Hello!",
        "usage": {"input_tokens": 10, "output_tokens": 5},
        "model": "gpt-4",
    }


def test_models_are_immutable():
    response = Response(text_content="x", usage=Usage(1, 1), model="m")
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.text_content = "y"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.usage.input_tokens = 2  # type: ignore[misc]


def test_models_compare_by_value():
    assert Response("x", Usage(1, 2), "m") == Response("x", Usage(1, 2), "m")
    call = RecordedCall(messages=({"role": "user", "content": "Hi"},), response=Response("x", Usage(1, 2), "m"), max_tokens=10)
    assert call.max_tokens == 10
    assert call.messages[0]["role"] == "user"


@pytest.mark.parametrize("bad", [None, "5", 1.0, True])
def test_usage_rejects_non_integer_counts(bad):
    with pytest.raises(TypeError):
        Usage(input_tokens=bad, output_tokens=1)


def test_usage_rejects_negative_counts():
    with pytest.raises(ValueError):
        Usage(input_tokens=1, output_tokens=-1)


def test_recorded_call_to_dict():
    call = RecordedCall(
        messages=({"role": "user", "content": "Hi"},),
        response=Response("Hello!", Usage(10, 5), "gpt-4"),
        max_tokens=256,
    )
    assert call.to_dict() == {
        "messages": [{"role": "user", "content": "Hi"}],
        "response": {
            "text_content": "Hello!",
            "usage": {"input_tokens": 10, "output_tokens": 5},
            "model": "gpt-4",
        },
        "max_tokens": 256,
    }
