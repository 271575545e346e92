"""Shared helpers for adapter tests.

``RecordingTransport`` stands in for the network: it captures every request
an adapter sends and answers with a canned status and body through
``httpx.MockTransport``.
"""

from __future__ import annotations

import importlib
import json
from typing import Any, List, Optional

import httpx
import pytest


class RecordingTransport:
    """Canned HTTP responder that records outgoing requests."""

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        *,
        text: Optional[str] = None,
        exc: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.text = text
        self.exc = exc
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "expected at least one request to be sent"
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def install_transport(monkeypatch: pytest.MonkeyPatch, provider: str, transport: RecordingTransport) -> None:
    """Route ``provider``'s pooled HTTP client through ``transport``."""

    module = importlib.import_module(f"simple_llm.{provider}.client")

    def _client(base_url: Optional[str], purpose: str, timeout: Optional[float] = None) -> httpx.Client:
        return httpx.Client(base_url=base_url or "", transport=httpx.MockTransport(transport.handler))

    monkeypatch.setattr(module, "get_httpx_client", _client)


USER_HI = [{"role": "user", "content": "Hi"}]
