"""OpenRouter provider adapter (OpenAI-style chat completions over HTTP).

Summary:
- ``POST /v1/chat/completions`` with bearer auth; messages pass through
  unchanged, system entries included.
- Text from ``choices[0].message.content``.
- Usage arrives as ``prompt_tokens`` / ``completion_tokens`` and is renamed
  to the normalized ``input_tokens`` / ``output_tokens``.
- The echoed ``model`` is whatever OpenRouter routed to, which differs from
  the request when aliases such as ``openrouter/auto`` are used.
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
    to_wire_messages,
)
from ..config import get_provider_config

_FALLBACK_ERROR_MESSAGE = "OpenRouter API error"


class OpenRouterProvider:
    """OpenRouter LLM provider implementation.

    Parameters:
        base_url: API base URL; if not provided, resolved from provider config
            (defaults to ``"https://openrouter.ai/api"``).
        timeout_seconds: Optional HTTP timeout for the pooled client.
        headers: Optional static headers, e.g. OpenRouter's ``HTTP-Referer``
            and ``X-Title`` attribution headers.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        cfg = get_provider_config("openrouter", {"base_url": base_url})
        self._base_url: str = cfg["base_url"]
        self._path: str = cfg["path"]
        self._timeout = timeout_seconds
        self._extra_headers = dict(headers or {})
        self._logger = get_logger("providers.openrouter")

    @classmethod
    def from_params(cls, params: AdapterParams) -> "OpenRouterProvider":
        """Build an adapter from a typed :class:`AdapterParams`."""
        return cls(**params.model_dump(exclude_none=True))

    @property
    def provider_name(self) -> str:
        """Return the canonical provider slug ``"openrouter"``."""
        return "openrouter"

    def build_payload(self, messages: Sequence[Message], model: str, max_tokens: int) -> Dict[str, Any]:
        return {
            "model": model,
            "messages": to_wire_messages(messages),
            "max_tokens": max_tokens,
        }

    def build_headers(self, api_key: str) -> Dict[str, str]:
        return {
            **self._extra_headers,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": JSON_CONTENT_TYPE,
        }

    def parse_response(self, status_code: int, body: Any) -> Response:
        """Normalize a chat completion body, renaming the usage fields.

        A ``null`` ``message.content`` (e.g. a reasoning model that spent its
        whole budget) is malformed rather than an empty reply.
        """
        try:
            return Response(
                text_content=dig_str(body, "choices", 0, "message", "content"),
                usage=Usage(
                    input_tokens=dig_count(body, "usage", "prompt_tokens"),
                    output_tokens=dig_count(body, "usage", "completion_tokens"),
                ),
                model=dig_str(body, "model"),
            )
        except (KeyError, TypeError) as exc:
            reason = "missing" if isinstance(exc, KeyError) else "invalid"
            raise MalformedResponseError(
                status_code, body, f"OpenRouter response {reason} field: {exc.args[0]}", provider=self.provider_name
            ) from exc

    def send(self, messages: Sequence[Message], model: str, max_tokens: int) -> Response:
        """Perform a non-streaming chat completion.

        Raises:
            ConfigurationError: ``OPENROUTER_API_KEY`` is unset or empty.
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
            max_tokens=max_tokens,
        )

        client = get_httpx_client(self._base_url, purpose="openrouter.chat", timeout=self._timeout)
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


__all__ = ["OpenRouterProvider"]
