"""
Errors raised by the record/replay test double on ``Client``.

``AssertionFailure`` subclasses ``AssertionError`` so test runners report it
as a failed assertion rather than an error.
"""
from __future__ import annotations

from .base_error import SimpleLlmError


class FakeQueueExhaustedError(SimpleLlmError, RuntimeError):
    """Raised when ``send`` is called in fake mode with no canned responses left."""


class AssertionFailure(SimpleLlmError, AssertionError):
    """Raised by ``assert_sent`` / ``assert_sent_count`` when an expectation fails."""


__all__ = ["FakeQueueExhaustedError", "AssertionFailure"]
