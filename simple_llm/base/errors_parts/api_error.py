"""
Structured API error raised by adapters on non-success HTTP outcomes.

Carries the numeric status, the full parsed response body and a human
readable message so callers can act without re-parsing anything.
"""
from __future__ import annotations

from typing import Any, Optional

from .base_error import SimpleLlmError
from .classification import classify_status
from .error_code import ErrorCode


class ApiError(SimpleLlmError):
    """Represents a provider API failure.

    Attributes:
        status_code: HTTP status returned by the provider.
        body: Parsed response body, preserved exactly.
        message: Provider error message, or a provider-specific fallback.
        provider: Provider key where the error originated (e.g. ``"openai"``).
        code: Normalized :class:`ErrorCode` derived from ``status_code``.
    """

    def __init__(
        self,
        status_code: int,
        body: Any,
        message: str,
        provider: Optional[str] = None,
        code: Optional[ErrorCode] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.message = message
        self.provider = provider
        self.code = code or classify_status(status_code)

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, status and message."""
        return f"{self.provider or '-'} {self.status_code} {self.code.value}: {self.message}"


class MalformedResponseError(ApiError):
    """Raised when a successful response lacks a documented field."""

    def __init__(self, status_code: int, body: Any, message: str, provider: Optional[str] = None) -> None:
        super().__init__(status_code, body, message, provider, code=ErrorCode.MALFORMED_RESPONSE)


__all__ = ["ApiError", "MalformedResponseError"]
