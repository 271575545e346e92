"""
Configuration errors: bad constructor arguments, unknown providers and
missing credentials. Never retried; always surfaced to the caller.
"""
from __future__ import annotations

from .base_error import SimpleLlmError


class ConfigurationError(SimpleLlmError, ValueError):
    """Raised when a client or adapter is misconfigured."""


class UnknownProviderError(ConfigurationError):
    """Raised when a provider name cannot be resolved to an adapter.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor rejected its arguments.
    """


__all__ = ["ConfigurationError", "UnknownProviderError"]
