"""HTTP helpers shared by the provider adapters.

Each adapter owns its request/response translation; the plumbing around it
(credential lookup, the POST itself, body decoding and error mapping) is
identical and lives here as plain functions.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

import httpx

from ...config.env import resolve_provider_key
from ..errors import ApiError, ConfigurationError, MalformedResponseError, TransportError, classify_exception
from .payload import dig


def require_api_key(provider: str) -> str:
    """Return the provider's API key from the environment.

    Raises:
        ConfigurationError: when the variable is unset or empty.
    """
    value, env_name = resolve_provider_key(provider)
    if not value:
        raise ConfigurationError(f"{env_name or provider.upper()} environment variable is not set")
    return value


def post_json(
    client: httpx.Client,
    path: str,
    headers: Mapping[str, str],
    payload: Dict[str, Any],
    provider: str,
) -> httpx.Response:
    """POST ``payload`` as JSON and return the raw response.

    Transport failures (no HTTP response at all) are wrapped in
    :class:`TransportError` with a normalized code; HTTP error statuses are
    returned untouched for the caller to map.
    """
    try:
        return client.post(path, json=payload, headers=dict(headers))
    except httpx.HTTPError as exc:
        raise TransportError(classify_exception(exc), str(exc), provider=provider) from exc


def decode_body(resp: httpx.Response, provider: str) -> Any:
    """Return the parsed JSON body.

    A body that is not JSON is kept as ``{"raw_text": <text>}`` so it is never
    lost: error responses (e.g. gateway HTML pages) still go through
    :func:`raise_for_api_error`, while a 2xx raises
    :class:`MalformedResponseError` straight away.
    """
    try:
        return resp.json()
    except ValueError as exc:
        body = {"raw_text": resp.text}
        if resp.is_success:
            raise MalformedResponseError(
                resp.status_code, body, "response body is not valid JSON", provider=provider
            ) from exc
        return body


def raise_for_api_error(resp: httpx.Response, body: Any, provider: str, fallback_message: str) -> None:
    """Raise :class:`ApiError` unless ``resp`` has a 2xx status.

    The message is ``body["error"]["message"]`` when it is a non-empty string,
    otherwise ``fallback_message``.
    """
    if resp.is_success:
        return
    message = dig(body, "error", "message", default=None)
    if not isinstance(message, str) or not message:
        message = fallback_message
    raise ApiError(resp.status_code, body, message, provider=provider)


__all__ = ["require_api_key", "post_json", "decode_body", "raise_for_api_error"]
