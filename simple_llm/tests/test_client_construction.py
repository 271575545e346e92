"""Construction rules for ``Client``: explicit pair vs ``from_`` string."""

from __future__ import annotations

import pytest

from simple_llm import Client, ConfigurationError, Response, Usage


def test_client_can_be_constructed_with_provider_and_model():
    client = Client(provider="anthropic", model="claude-sonnet-4-20250514")
    assert client.provider == "anthropic"
    assert client.model == "claude-sonnet-4-20250514"


def test_client_can_be_constructed_with_from_parameter():
    client = Client(from_="anthropic/claude-sonnet-4-20250514")
    assert client.provider == "anthropic"
    assert client.model == "claude-sonnet-4-20250514"


def test_from_splits_on_first_separator_only():
    client = Client(from_="openrouter/openai/gpt-4o-mini")
    assert client.provider == "openrouter"
    assert client.model == "openai/gpt-4o-mini"


def test_from_takes_precedence_over_explicit_pair():
    client = Client(provider="openai", model="gpt-4", from_="anthropic/claude-3-haiku")
    assert (client.provider, client.model) == ("anthropic", "claude-3-haiku")


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"provider": "anthropic"},
        {"model": "claude-sonnet-4-20250514"},
        {"provider": "", "model": "claude-sonnet-4-20250514"},
        {"provider": "anthropic", "model": ""},
        {"from_": "invalid-format"},
        {"from_": "anthropic/"},
        {"from_": "/claude"},
    ],
)
def test_invalid_construction_raises_configuration_error(kwargs):
    with pytest.raises(ConfigurationError):
        Client(**kwargs)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        Client()


def test_unknown_provider_is_accepted_at_construction():
    client = Client(provider="nope", model="m")
    assert client.provider == "nope"


def test_construction_style_does_not_change_send_behaviour():
    canned = Response(text_content="Hello!", usage=Usage(10, 5), model="gpt-4")
    explicit = Client("openai", "gpt-4")
    combined = Client(from_="openai/gpt-4")
    for client in (explicit, combined):
        client.fake([canned])
        assert client.send([{"role": "user", "content": "Hi"}]) is canned
    assert explicit.get_recorded() == combined.get_recorded()


def test_repr_names_provider_and_model():
    assert repr(Client("openai", "gpt-4")) == "Client(provider='openai', model='gpt-4')"
