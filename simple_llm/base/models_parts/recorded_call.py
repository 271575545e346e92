"""RecordedCall entry kept by ``Client`` for every successful ``send``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .message import Message
from .response import Response


@dataclass(frozen=True)
class RecordedCall:
    """Inputs and result of one ``Client.send`` invocation.

    Attributes:
        messages: Snapshot of the message sequence as it was sent.
        response: Response returned to the caller.
        max_tokens: Effective token limit, after defaulting.
    """

    messages: Tuple[Message, ...]
    response: Response
    max_tokens: int

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {
            "messages": [dict(m) for m in self.messages],
            "response": self.response.to_dict(),
            "max_tokens": self.max_tokens,
        }


__all__ = ["RecordedCall"]
