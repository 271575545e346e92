"""
Transport error wrapping failures raised by the HTTP collaborator before any
status code was received (connect errors, timeouts, protocol errors).
"""
from __future__ import annotations

from typing import Optional

from .base_error import SimpleLlmError
from .error_code import ErrorCode


class TransportError(SimpleLlmError):
    """Represents a request that never produced an HTTP response.

    Attributes:
        code: Normalized :class:`ErrorCode` for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, code: ErrorCode, message: str, provider: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.provider = provider

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider or '-'} {self.code.value}: {self.message}"


__all__ = ["TransportError"]
