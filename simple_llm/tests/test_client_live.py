"""Live-mode dispatch: adapter resolution, caching and error propagation."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest

from simple_llm import (
    AdapterParams,
    ApiError,
    Client,
    ConfigurationError,
    ProviderFactory,
    Response,
    UnknownProviderError,
    Usage,
)
from simple_llm.base.interfaces import ProviderAdapter

from .utils import USER_HI, RecordingTransport, install_transport


class StubAdapter:
    """In-memory adapter recording the arguments it receives."""

    def __init__(self, response: Response) -> None:
        self.response = response
        self.calls: List[Tuple[Sequence, str, int]] = []

    @property
    def provider_name(self) -> str:
        return "stub"

    def send(self, messages, model, max_tokens):
        self.calls.append((messages, model, max_tokens))
        return self.response


class FailingAdapter(StubAdapter):
    def send(self, messages, model, max_tokens):
        raise ApiError(500, {"error": {"message": "boom"}}, "boom", provider="stub")


@pytest.fixture()
def canned() -> Response:
    return Response(text_content="live", usage=Usage(3, 4), model="gpt-4-0613")


def _patch_factory(monkeypatch, adapter) -> List[str]:
    created: List[str] = []

    def _create(provider, *, params=None):
        created.append(provider)
        return adapter

    monkeypatch.setattr(ProviderFactory, "create", _create)
    return created


def test_stub_adapter_satisfies_protocol(canned):
    assert isinstance(StubAdapter(canned), ProviderAdapter)


def test_live_send_forwards_messages_model_and_max_tokens(monkeypatch, canned):
    adapter = StubAdapter(canned)
    _patch_factory(monkeypatch, adapter)
    client = Client("openai", "gpt-4")

    result = client.send(USER_HI, max_tokens=512)

    assert result is canned
    messages, model, max_tokens = adapter.calls[0]
    assert list(messages) == USER_HI
    assert model == "gpt-4"
    assert max_tokens == 512


def test_live_send_applies_default_max_tokens(monkeypatch, canned):
    adapter = StubAdapter(canned)
    _patch_factory(monkeypatch, adapter)
    client = Client("openai", "gpt-4")

    client.send(USER_HI)

    assert adapter.calls[0][2] == 128000
    assert client.get_recorded()[0].max_tokens == 128000


def test_live_send_records_real_response(monkeypatch, canned):
    _patch_factory(monkeypatch, StubAdapter(canned))
    client = Client("openai", "gpt-4")

    client.send(USER_HI)
    client.send(USER_HI)

    client.assert_sent_count(2)
    client.assert_sent(lambda messages, response: response.model == "gpt-4-0613")


def test_adapter_is_resolved_once_and_cached(monkeypatch, canned):
    created = _patch_factory(monkeypatch, StubAdapter(canned))
    client = Client("openai", "gpt-4")

    client.send(USER_HI)
    client.send(USER_HI)
    client.send(USER_HI)

    assert created == ["openai"]


def test_adapter_errors_propagate_and_are_not_recorded(monkeypatch, canned):
    _patch_factory(monkeypatch, FailingAdapter(canned))
    client = Client("openai", "gpt-4")

    with pytest.raises(ApiError) as info:
        client.send(USER_HI)

    assert info.value.status_code == 500
    client.assert_sent_count(0)


def test_unknown_provider_fails_at_first_send():
    client = Client("nope", "model")

    with pytest.raises(UnknownProviderError):
        client.send(USER_HI)


def test_unknown_provider_error_is_configuration_error():
    with pytest.raises(ConfigurationError):
        Client(from_="mystery/model").send(USER_HI)


def test_missing_credential_surfaces_from_live_send():
    client = Client("anthropic", "claude-3-haiku")

    with pytest.raises(ConfigurationError, match="ANTHROPIC_API_KEY"):
        client.send(USER_HI)
    client.assert_sent_count(0)


def test_params_reach_adapter_through_client(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or")
    transport = RecordingTransport(
        body={
            "model": "openai/gpt-4o-mini",
            "choices": [{"message": {"role": "assistant", "content": "proxied"}}],
            "usage": {"prompt_tokens": 1, "completion_tokens": 2},
        }
    )
    install_transport(monkeypatch, "openrouter", transport)
    client = Client(
        from_="openrouter/openai/gpt-4o-mini",
        params=AdapterParams(base_url="https://proxy.internal/openrouter", headers={"X-Title": "tests"}),
    )

    response = client.send(USER_HI)

    assert response.text_content == "proxied"
    request = transport.last_request
    assert str(request.url) == "https://proxy.internal/openrouter/v1/chat/completions"
    assert request.headers["X-Title"] == "tests"
    assert transport.last_json["model"] == "openai/gpt-4o-mini"
