"""simple_llm.config.env
=====================

Where each provider's API key lives in the process environment.

Keys are looked up on every call and never cached, so a key rotated while
the process runs is used by the next request. Lookups never raise: an
unknown provider or an unset/empty variable yields ``None`` and the adapter
turns that into a ``ConfigurationError``.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}


def get_env_var_name(provider: str) -> Optional[str]:
    """Name of the variable holding ``provider``'s key (case-insensitive), or ``None``."""
    if not provider:
        return None
    return ENV_MAP.get(provider.lower())


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Read ``provider``'s API key.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(key, variable_name)``. ``key`` is ``None`` for an unset or empty
        variable; both are ``None`` when the provider has no mapping.
    """
    env_name = get_env_var_name(provider)
    if env_name is None:
        return None, None
    key = os.environ.get(env_name, "")
    return (key or None), env_name


__all__ = [
    "ENV_MAP",
    "get_env_var_name",
    "resolve_provider_key",
]
