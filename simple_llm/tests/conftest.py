"""Pytest configuration for the simple_llm test suite.

Every test starts with provider credentials and base URL overrides removed
from the environment, so nothing can reach a real API by accident.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from simple_llm.config.env import ENV_MAP

_EXTRA_VARS = ("ANTHROPIC_BASE_URL", "OPENAI_BASE_URL", "OPENROUTER_BASE_URL", "SIMPLE_LLM_LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_provider_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove credential, base URL and log level variables for the duration of a test."""

    for name in (*ENV_MAP.values(), *_EXTRA_VARS):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(scope="session", autouse=True)
def close_http_clients_after_session() -> Iterator[None]:
    """Close pooled HTTP clients after the session to avoid ResourceWarnings."""

    from simple_llm.base.http import close_all_clients

    yield
    close_all_clients()
