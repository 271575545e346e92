"""Endpoint configuration for the provider adapters.

:func:`get_provider_config` layers three sources, later ones winning:

1. ``DEFAULTS`` built from :mod:`simple_llm.config.defaults`
2. ``<PROVIDER>_BASE_URL`` from the environment (e.g. ``OPENAI_BASE_URL``)
3. explicit overrides from the caller, ignoring ``None`` values

API keys are not part of this; see :mod:`simple_llm.config.env`.
"""
from __future__ import annotations

import os
from typing import Any, Dict, Optional

from .defaults import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_MESSAGES_PATH,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_RESPONSES_PATH,
    OPENROUTER_CHAT_PATH,
    OPENROUTER_DEFAULT_BASE_URL,
)

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "anthropic": {
        "base_url": ANTHROPIC_DEFAULT_BASE_URL,
        "path": ANTHROPIC_MESSAGES_PATH,
        "api_version": ANTHROPIC_API_VERSION,
    },
    "openai": {"base_url": OPENAI_DEFAULT_BASE_URL, "path": OPENAI_RESPONSES_PATH},
    "openrouter": {"base_url": OPENROUTER_DEFAULT_BASE_URL, "path": OPENROUTER_CHAT_PATH},
}

# config key -> environment variable suffix
ENV_FIELD_MAP: Dict[str, str] = {"base_url": "BASE_URL"}


def _from_environment(provider: str) -> Dict[str, Any]:
    found: Dict[str, Any] = {}
    for key, suffix in ENV_FIELD_MAP.items():
        value = os.getenv(f"{provider.upper()}_{suffix}")
        if value:
            found[key] = value
    return found


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a fresh, merged config dict for ``provider``.

    Unknown providers get only whatever the environment and overrides supply.
    """
    name = (provider or "").strip().lower()
    merged: Dict[str, Any] = {**DEFAULTS.get(name, {}), **_from_environment(name)}
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    return merged


__all__ = [
    "get_provider_config",
    "DEFAULTS",
    "ENV_FIELD_MAP",
]
