from __future__ import annotations

import pytest

from simple_llm.anthropic import AnthropicProvider
from simple_llm.base.dto import AdapterParams
from simple_llm.base.errors import ConfigurationError
from simple_llm.base.factory import ProviderFactory, UnknownProviderError, create_provider
from simple_llm.base.interfaces import ProviderAdapter
from simple_llm.openai import OpenAIProvider
from simple_llm.openrouter import OpenRouterProvider


def test_factory_unknown_provider():
    with pytest.raises(UnknownProviderError, match="supported: anthropic, openai, openrouter"):
        ProviderFactory.create("nope")


def test_unknown_provider_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        ProviderFactory.create("gemini")


def test_provider_names_are_case_sensitive():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("OpenAI")


def test_supported_lists_registered_names():
    assert ProviderFactory.supported() == ("anthropic", "openai", "openrouter")


@pytest.mark.parametrize(
    "name, klass",
    [
        ("anthropic", AnthropicProvider),
        ("openai", OpenAIProvider),
        ("openrouter", OpenRouterProvider),
    ],
)
def test_factory_builds_each_adapter(name, klass):
    adapter = ProviderFactory.create(name)

    assert isinstance(adapter, klass)
    assert isinstance(adapter, ProviderAdapter)
    assert adapter.provider_name == name


def test_factory_returns_fresh_instances():
    assert ProviderFactory.create("openai") is not ProviderFactory.create("openai")


def test_params_are_applied_to_adapter(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "k")
    adapter = create_provider("anthropic", AdapterParams(headers={"X-Trace": "t"}))

    assert adapter.build_headers("k")["X-Trace"] == "t"


def test_broken_registration_surfaces_as_unknown_provider(monkeypatch):
    monkeypatch.setitem(
        ProviderFactory._PROVIDERS,
        "ghost",
        ("simple_llm.ghost.client", "GhostProvider"),
    )
    with pytest.raises(UnknownProviderError, match="Failed to import"):
        ProviderFactory.create("ghost")


def test_missing_class_surfaces_as_unknown_provider(monkeypatch):
    monkeypatch.setitem(
        ProviderFactory._PROVIDERS,
        "openai2",
        ("simple_llm.openai.client", "NotThere"),
    )
    with pytest.raises(UnknownProviderError, match="not found"):
        ProviderFactory.create("openai2")
