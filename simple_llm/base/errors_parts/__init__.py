"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `simple_llm.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .base_error import SimpleLlmError
from .configuration_error import ConfigurationError, UnknownProviderError
from .api_error import ApiError, MalformedResponseError
from .transport_error import TransportError
from .fake_errors import AssertionFailure, FakeQueueExhaustedError
from .classification import classify_exception, classify_status

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
