"""
Provider-agnostic interfaces (Protocols).

Re-exports Protocols split into single-class modules under
``simple_llm.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import ProviderAdapter

__all__ = ["ProviderAdapter"]
