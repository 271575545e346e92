from __future__ import annotations

import pytest

from simple_llm.base.utils import dig, dig_count, dig_str, split_system_messages, to_wire_messages


def test_dig_walks_mappings_and_lists():
    body = {"choices": [{"message": {"content": "hi"}}]}
    assert dig(body, "choices", 0, "message", "content") == "hi"


def test_dig_missing_path_raises_with_dotted_name():
    with pytest.raises(KeyError) as info:
        dig({"usage": {}}, "usage", "input_tokens")
    assert info.value.args[0] == "usage.input_tokens"


@pytest.mark.parametrize(
    "data, path",
    [
        ({"a": []}, ("a", 0)),
        ({"a": "text"}, ("a", "b")),
        ({"a": {"0": 1}}, ("a", 0)),
        (None, ("a",)),
    ],
)
def test_dig_default_on_wrong_shape(data, path):
    assert dig(data, *path, default="fallback") == "fallback"


def test_to_wire_messages_copies():
    original = [{"role": "user", "content": "Hi"}]
    wire = to_wire_messages(original)
    wire[0]["content"] = "changed"
    assert original[0]["content"] == "Hi"


def test_split_without_system_message():
    system, rest = split_system_messages([{"role": "user", "content": "Hi"}])
    assert system is None
    assert rest == [{"role": "user", "content": "Hi"}]


def test_split_preserves_order_of_remaining_messages():
    messages = [
        {"role": "user", "content": "1"},
        {"role": "system", "content": "sys"},
        {"role": "assistant", "content": "2"},
        {"role": "user", "content": "3"},
    ]
    system, rest = split_system_messages(messages)
    assert system == "sys"
    assert [m["content"] for m in rest] == ["1", "2", "3"]


def test_split_only_system_message():
    system, rest = split_system_messages([{"role": "system", "content": "only"}])
    assert system == "only"
    assert rest == []


def test_dig_str_accepts_strings_only():
    assert dig_str({"model": "m"}, "model") == "m"
    with pytest.raises(TypeError, match="model"):
        dig_str({"model": None}, "model")
    with pytest.raises(KeyError):
        dig_str({}, "model")


@pytest.mark.parametrize("value", [None, "3", -1, False, 2.0])
def test_dig_count_rejects_non_counts(value):
    with pytest.raises(TypeError, match="usage.n"):
        dig_count({"usage": {"n": value}}, "usage", "n")


def test_dig_count_accepts_zero():
    assert dig_count({"usage": {"n": 0}}, "usage", "n") == 0
