"""Interfaces parts package; prefer ``simple_llm.base.interfaces``."""

from .provider_adapter import ProviderAdapter

__all__ = ["ProviderAdapter"]
