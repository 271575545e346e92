"""Message translation helpers shared across providers.

Helpers here are side-effect free: they never mutate the caller's messages
and always return fresh wire-level dictionaries.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ..models import Message


def to_wire_messages(messages: Sequence[Message]) -> List[Dict[str, str]]:
    """Copy messages into plain ``{"role", "content"}`` dictionaries."""
    return [{"role": m["role"], "content": m["content"]} for m in messages]


def split_system_messages(messages: Sequence[Message]) -> Tuple[Optional[str], List[Dict[str, str]]]:
    """Separate system messages from the conversation.

    Returns ``(system_text, remaining)`` where ``remaining`` keeps the order
    of every non-system message. When several system messages are present the
    last one wins; all of them are removed from ``remaining``. ``system_text``
    is ``None`` when no system message exists.
    """
    system_text: Optional[str] = None
    remaining: List[Dict[str, str]] = []
    for m in to_wire_messages(messages):
        if m["role"] == "system":
            system_text = m["content"]
        else:
            remaining.append(m)
    return system_text, remaining


__all__ = ["to_wire_messages", "split_system_messages"]
