"""simple_llm: one client for Anthropic, OpenAI and OpenRouter chat APIs.

Public surface::

    from simple_llm import Client, Response, Usage

    client = Client("openrouter", "openai/gpt-4o-mini")
    reply = client.send([{"role": "user", "content": "Hello"}], max_tokens=256)
    print(reply.text_content, reply.usage.output_tokens)

Tests swap the network for canned replies with ``client.fake([...])`` and
check traffic with ``assert_sent`` / ``assert_sent_count``.
"""

from .base.constants import DEFAULT_MAX_TOKENS
from .base.dto import AdapterParams
from .base.errors import (
    ApiError,
    AssertionFailure,
    ConfigurationError,
    ErrorCode,
    FakeQueueExhaustedError,
    MalformedResponseError,
    SimpleLlmError,
    TransportError,
    UnknownProviderError,
)
from .base.factory import ProviderFactory
from .base.interfaces import ProviderAdapter
from .base.models import Message, RecordedCall, Response, Usage
from .client import Client

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Response",
    "Usage",
    "Message",
    "RecordedCall",
    "ProviderAdapter",
    "ProviderFactory",
    "AdapterParams",
    "DEFAULT_MAX_TOKENS",
    "ErrorCode",
    "SimpleLlmError",
    "ConfigurationError",
    "UnknownProviderError",
    "ApiError",
    "MalformedResponseError",
    "TransportError",
    "FakeQueueExhaustedError",
    "AssertionFailure",
]
