"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``simple_llm.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts import (
    ApiError,
    AssertionFailure,
    ConfigurationError,
    ErrorCode,
    FakeQueueExhaustedError,
    MalformedResponseError,
    SimpleLlmError,
    TransportError,
    UnknownProviderError,
    classify_exception,
    classify_status,
)

__all__ = [
    "ErrorCode",
    "SimpleLlmError",
    "ConfigurationError",
    "UnknownProviderError",
    "ApiError",
    "MalformedResponseError",
    "TransportError",
    "FakeQueueExhaustedError",
    "AssertionFailure",
    "classify_exception",
    "classify_status",
]
