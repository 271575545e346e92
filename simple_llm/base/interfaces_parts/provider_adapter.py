"""ProviderAdapter Protocol (single-class module).

Defines the send contract every vendor adapter conforms to.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..models import Message, Response


@runtime_checkable
class ProviderAdapter(Protocol):
    """Minimal interface for LLM provider adapters.

    Implementations translate messages into their vendor's wire format,
    perform the HTTP call and normalize the reply into a ``Response``. They
    hold no per-call state and are safe to reuse.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"anthropic"``."""
        ...

    def send(self, messages: Sequence[Message], model: str, max_tokens: int) -> Response:
        """Execute a single chat completion.

        Raises ``ConfigurationError`` when the credential is missing and
        ``ApiError`` on any non-success HTTP outcome.
        """
        ...
