"""AnthropicProvider adapter.

Talks to the Anthropic Messages API (``POST /v1/messages``) over ``httpx``.

Key behaviors:
* System messages are lifted out of the conversation into the top-level
  ``system`` field; Anthropic rejects ``role: system`` inside ``messages``.
* Auth uses the ``x-api-key`` header plus the pinned ``anthropic-version``.
* Text comes from ``content[0].text``; usage from ``usage.input_tokens`` and
  ``usage.output_tokens``. A 2xx body missing either raises
  :class:`MalformedResponseError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from ..base.constants import JSON_CONTENT_TYPE
from ..base.dto import AdapterParams
from ..base.errors import ApiError, MalformedResponseError, TransportError
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import Message, Response, Usage
from ..base.utils import (
    decode_body,
    dig_count,
    dig_str,
    post_json,
    raise_for_api_error,
    require_api_key,
    split_system_messages,
)
from ..config import get_provider_config

_FALLBACK_ERROR_MESSAGE = "Anthropic API error"


class AnthropicProvider:
    """Adapter for the Anthropic Messages API.

    Parameters:
        base_url: Optional API base URL override; defaults to provider config.
        timeout_seconds: Optional HTTP timeout for the pooled client.
        headers: Optional static headers merged under the adapter's own.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        cfg = get_provider_config("anthropic", {"base_url": base_url})
        self._base_url: str = cfg["base_url"]
        self._path: str = cfg["path"]
        self._api_version: str = cfg["api_version"]
        self._timeout = timeout_seconds
        self._extra_headers = dict(headers or {})
        self._logger = get_logger("providers.anthropic")

    @classmethod
    def from_params(cls, params: AdapterParams) -> "AnthropicProvider":
        """Build an adapter from a typed :class:`AdapterParams`."""
        return cls(**params.model_dump(exclude_none=True))

    @property
    def provider_name(self) -> str:
        """Return ``"anthropic"``."""
        return "anthropic"

    def build_payload(self, messages: Sequence[Message], model: str, max_tokens: int) -> Dict[str, Any]:
        """Translate messages into a Messages API request body.

        The ``system`` key is only present when a system message was supplied.
        """
        system_text, remaining = split_system_messages(messages)
        payload: Dict[str, Any] = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": remaining,
        }
        if system_text is not None:
            payload["system"] = system_text
        return payload

    def build_headers(self, api_key: str) -> Dict[str, str]:
        return {
            **self._extra_headers,
            "x-api-key": api_key,
            "anthropic-version": self._api_version,
            "Content-Type": JSON_CONTENT_TYPE,
        }

    def parse_response(self, status_code: int, body: Any) -> Response:
        """Normalize a successful Messages API body into a :class:`Response`.

        Text and model must be strings and token counts non-negative integers;
        anything else, ``null`` included, is malformed.
        """
        try:
            return Response(
                text_content=dig_str(body, "content", 0, "text"),
                usage=Usage(
                    input_tokens=dig_count(body, "usage", "input_tokens"),
                    output_tokens=dig_count(body, "usage", "output_tokens"),
                ),
                model=dig_str(body, "model"),
            )
        except (KeyError, TypeError) as exc:
            reason = "missing" if isinstance(exc, KeyError) else "invalid"
            raise MalformedResponseError(
                status_code, body, f"Anthropic response {reason} field: {exc.args[0]}", provider=self.provider_name
            ) from exc

    def send(self, messages: Sequence[Message], model: str, max_tokens: int) -> Response:
        """Send a chat completion request and return the normalized response.

        Raises:
            ConfigurationError: ``ANTHROPIC_API_KEY`` is unset or empty.
            ApiError: the API answered with a non-2xx status.
            TransportError: no HTTP response was received.
        """
        api_key = require_api_key(self.provider_name)
        ctx = LogContext(provider=self.provider_name, model=model)
        payload = self.build_payload(messages, model, max_tokens)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            message_count=len(payload["messages"]),
            has_system="system" in payload,
            max_tokens=max_tokens,
        )

        client = get_httpx_client(self._base_url, purpose="anthropic.chat", timeout=self._timeout)
        try:
            resp = post_json(client, self._path, self.build_headers(api_key), payload, self.provider_name)
            body = decode_body(resp, self.provider_name)
            raise_for_api_error(resp, body, self.provider_name, _FALLBACK_ERROR_MESSAGE)
            response = self.parse_response(resp.status_code, body)
        except (ApiError, TransportError) as exc:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_code=exc.code.value,
                level=logging.WARNING,
                http_status=getattr(exc, "status_code", None),
            )
            raise

        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=response.usage,
            http_status=resp.status_code,
            response_model=response.model,
        )
        return response


__all__ = ["AnthropicProvider"]
