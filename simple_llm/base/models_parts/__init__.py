"""Models parts package; prefer importing from ``simple_llm.base.models``."""

from .message import Message, Role
from .usage import Usage
from .response import Response
from .recorded_call import RecordedCall

__all__ = ["Message", "Role", "Usage", "Response", "RecordedCall"]
