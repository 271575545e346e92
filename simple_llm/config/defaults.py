"""simple_llm.config.defaults
==========================

Central place for small, stable default values used by the provider
adapters. Base URLs can be overridden via ``<PROVIDER>_BASE_URL`` environment
variables or ``AdapterParams.base_url``.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Anthropic ----
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_MESSAGES_PATH = "/v1/messages"
# Sent as the ``anthropic-version`` header on every request.
ANTHROPIC_API_VERSION = "2023-06-01"

# ---- OpenAI ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com"
OPENAI_RESPONSES_PATH = "/v1/responses"

# ---- OpenRouter ----
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api"
OPENROUTER_CHAT_PATH = "/v1/chat/completions"

__all__ = [
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_MESSAGES_PATH",
    "ANTHROPIC_API_VERSION",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_RESPONSES_PATH",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_CHAT_PATH",
]
