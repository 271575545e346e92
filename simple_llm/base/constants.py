"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings and default numbers.

Security
--------
This module contains only generic strings and numeric defaults.
There are no credentials or tokens embedded.
"""
from __future__ import annotations

# Applied by ``Client.send`` when the caller omits ``max_tokens``
DEFAULT_MAX_TOKENS = 128000


# Default HTTP timeout (seconds) for pooled clients
DEFAULT_HTTP_TIMEOUT = 60.0

JSON_CONTENT_TYPE = "application/json"

__all__ = [
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_HTTP_TIMEOUT",
    "JSON_CONTENT_TYPE",
]
