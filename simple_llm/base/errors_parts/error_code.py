"""
Normalized failure categories attached to ``ApiError`` and ``TransportError``.

The string values appear as ``error_code`` in ``chat.error`` log events, so
they must not change once released.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Why a provider call failed, independent of the vendor."""

    # Caller-side problems
    AUTH = "auth"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT = "rate_limit"

    # Provider or network side
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"

    # A 2xx answer that could not be normalized
    MALFORMED_RESPONSE = "malformed_response"

    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
