"""
Response DTO representing a normalized provider reply.

Instances are immutable so the same object can be handed to callers and kept
in a client's recorded-call log without defensive copies.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .usage import Usage


@dataclass(frozen=True)
class Response:
    """Provider-agnostic result of a chat completion.

    Attributes:
        text_content: Generated text.
        usage: Normalized token accounting.
        model: Model identifier echoed by the provider, which may differ from
            the requested alias.
    """

    text_content: str
    usage: Usage
    model: str

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {
            "text_content": self.text_content,
            "usage": self.usage.to_dict(),
            "model": self.model,
        }


__all__ = ["Response"]
