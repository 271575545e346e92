"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``simple_llm.base.models_parts`` to keep imports stable.
"""

from .models_parts.message import Message, Role
from .models_parts.usage import Usage
from .models_parts.response import Response
from .models_parts.recorded_call import RecordedCall

__all__ = [
    "Message",
    "Role",
    "Usage",
    "Response",
    "RecordedCall",
]
