"""
Message shape used across providers.

Messages travel as plain mappings because every supported provider accepts
``{"role": ..., "content": ...}`` objects on the wire unchanged.
"""
from __future__ import annotations

from typing import TypedDict

# Common roles; providers may accept others, so the set is left open.
Role = str


class Message(TypedDict):
    """A single chat message.

    Attributes:
        role: Author role, e.g. ``"system"``, ``"user"`` or ``"assistant"``.
        content: Plain text content.
    """

    role: Role
    content: str


__all__ = [
    "Message",
    "Role",
]
