"""Helpers shared by the provider adapters."""

from .messages import split_system_messages, to_wire_messages
from .payload import dig, dig_count, dig_str
from .http_helpers import decode_body, post_json, raise_for_api_error, require_api_key

__all__ = [
    "split_system_messages",
    "to_wire_messages",
    "dig",
    "dig_str",
    "dig_count",
    "decode_body",
    "post_json",
    "raise_for_api_error",
    "require_api_key",
]
