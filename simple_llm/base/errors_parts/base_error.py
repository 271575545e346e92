"""Root exception type for the library."""
from __future__ import annotations


class SimpleLlmError(Exception):
    """Base class for every error raised by ``simple_llm``.

    Concrete errors also inherit a matching builtin (``ValueError``,
    ``RuntimeError``, ``AssertionError``) so generic handlers keep working.
    """


__all__ = ["SimpleLlmError"]
