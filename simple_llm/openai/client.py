"""OpenAIProvider adapter.

Talks to the OpenAI Responses API (``POST /v1/responses``) over ``httpx``.
Messages, system entries included, are sent unchanged as ``input``.

The Responses API returns a heterogeneous ``output`` list (reasoning items,
tool calls, messages). The generated text is taken from the first item whose
``type`` is ``"message"``; when there is none, or it carries no text, the
text is the empty string rather than an error.
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
    dig,
    dig_count,
    dig_str,
    post_json,
    raise_for_api_error,
    require_api_key,
    to_wire_messages,
)
from ..config import get_provider_config

_FALLBACK_ERROR_MESSAGE = "OpenAI API error"


def extract_output_text(body: Any) -> str:
    """Return ``content[0].text`` of the first ``message`` output item, or ``""``."""
    output = dig(body, "output", default=None)
    if not isinstance(output, list):
        return ""
    for item in output:
        if isinstance(item, dict) and item.get("type") == "message":
            text = dig(item, "content", 0, "text", default="")
            return text if isinstance(text, str) else ""
    return ""


class OpenAIProvider:
    """Adapter for the OpenAI Responses API.

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
        cfg = get_provider_config("openai", {"base_url": base_url})
        self._base_url: str = cfg["base_url"]
        self._path: str = cfg["path"]
        self._timeout = timeout_seconds
        self._extra_headers = dict(headers or {})
        self._logger = get_logger("providers.openai")

    @classmethod
    def from_params(cls, params: AdapterParams) -> "OpenAIProvider":
        """Build an adapter from a typed :class:`AdapterParams`."""
        return cls(**params.model_dump(exclude_none=True))

    @property
    def provider_name(self) -> str:
        return "openai"

    def build_payload(self, messages: Sequence[Message], model: str, max_tokens: int) -> Dict[str, Any]:
        return {
            "model": model,
            "input": to_wire_messages(messages),
            "max_output_tokens": max_tokens,
        }

    def build_headers(self, api_key: str) -> Dict[str, str]:
        return {
            **self._extra_headers,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": JSON_CONTENT_TYPE,
        }

    def parse_response(self, status_code: int, body: Any) -> Response:
        """Normalize a successful Responses API body into a :class:`Response`.

        Only a missing or mistyped ``usage`` or ``model`` is malformed; the text
        degrades to ``""``.
        """
        try:
            usage = Usage(
                input_tokens=dig_count(body, "usage", "input_tokens"),
                output_tokens=dig_count(body, "usage", "output_tokens"),
            )
            model = dig_str(body, "model")
        except (KeyError, TypeError) as exc:
            reason = "missing" if isinstance(exc, KeyError) else "invalid"
            raise MalformedResponseError(
                status_code, body, f"OpenAI response {reason} field: {exc.args[0]}", provider=self.provider_name
            ) from exc
        return Response(text_content=extract_output_text(body), usage=usage, model=model)

    def send(self, messages: Sequence[Message], model: str, max_tokens: int) -> Response:
        """Send a chat completion request and return the normalized response.

        Raises:
            ConfigurationError: ``OPENAI_API_KEY`` is unset or empty.
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
            message_count=len(payload["input"]),
            max_tokens=max_tokens,
        )

        client = get_httpx_client(self._base_url, purpose="openai.chat", timeout=self._timeout)
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
            emitted=bool(response.text_content),
            tokens=response.usage,
            http_status=resp.status_code,
            response_model=response.model,
        )
        return response


__all__ = ["OpenAIProvider", "extract_output_text"]
