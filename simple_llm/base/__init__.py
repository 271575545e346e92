"""
Base package: provider-agnostic contracts, DTOs, errors and the provider
factory shared by the adapters and ``Client``.
"""

from .constants import DEFAULT_MAX_TOKENS
from .dto import AdapterParams
from .errors import (
    ApiError,
    AssertionFailure,
    ConfigurationError,
    ErrorCode,
    FakeQueueExhaustedError,
    MalformedResponseError,
    SimpleLlmError,
    TransportError,
    UnknownProviderError,
)
from .factory import ProviderFactory, create_provider
from .interfaces import ProviderAdapter
from .models import Message, RecordedCall, Response, Role, Usage

__all__ = [
    "DEFAULT_MAX_TOKENS",
    # Models
    "Message",
    "Role",
    "Usage",
    "Response",
    "RecordedCall",
    # Interfaces
    "ProviderAdapter",
    # Factory
    "AdapterParams",
    "ProviderFactory",
    "create_provider",
    # Errors
    "ErrorCode",
    "SimpleLlmError",
    "ConfigurationError",
    "UnknownProviderError",
    "ApiError",
    "MalformedResponseError",
    "TransportError",
    "FakeQueueExhaustedError",
    "AssertionFailure",
]
