"""Unified chat client with a built-in record/replay test double.

``Client`` is the single entry point for application code: it holds a
provider/model pair, resolves the matching adapter through
:class:`~simple_llm.base.factory.ProviderFactory` on first use, and exposes
``send``.

Every ``send`` is recorded. After :meth:`Client.fake` installs a queue of
canned responses, ``send`` serves them in order instead of calling the
network, so code under test calls exactly the same method it calls in
production. The recorded log then backs ``assert_sent`` and
``assert_sent_count``.

Example
-------
>>> client = Client(from_="anthropic/claude-sonnet-4-20250514")
>>> client.fake([Response("Hello!", Usage(10, 5), "claude-sonnet-4-20250514")])
>>> client.send([{"role": "user", "content": "Hi"}]).text_content
'Hello!'
>>> client.assert_sent_count(1)

State is per instance: two clients never share a fake queue or a log.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, Sequence, Tuple

from .base.constants import DEFAULT_MAX_TOKENS
from .base.dto import AdapterParams
from .base.errors import AssertionFailure, ConfigurationError, FakeQueueExhaustedError
from .base.factory import ProviderFactory
from .base.interfaces import ProviderAdapter
from .base.logging import LogContext, get_logger, log_event
from .base.models import Message, RecordedCall, Response

_FROM_EXAMPLE = "anthropic/claude-sonnet-4-20250514"

SentPredicate = Callable[[Sequence[Message], Response], bool]


def parse_from(value: str) -> Tuple[str, str]:
    """Split ``"<provider>/<model>"`` on the first ``/``.

    Model names may themselves contain slashes (``openrouter/openai/gpt-4o``).

    Raises:
        ConfigurationError: no separator, or an empty provider or model part.
    """
    provider, sep, model = value.partition("/")
    if not sep or not provider or not model:
        raise ConfigurationError(
            f'Invalid "from" format {value!r}. Expected "provider/model" (e.g., "{_FROM_EXAMPLE}")'
        )
    return provider, model


class Client:
    """Provider-agnostic chat client.

    Parameters:
        provider: Provider name (``"anthropic"``, ``"openai"``, ``"openrouter"``).
        model: Model identifier passed through to the provider.
        from_: Alternative ``"<provider>/<model>"`` form; takes precedence over
            ``provider``/``model`` when given.
        params: Optional adapter parameters (base URL, timeout, headers) used
            when the adapter is first resolved.

    Raises:
        ConfigurationError: neither a valid ``from_`` nor both non-empty
            ``provider`` and ``model`` were supplied. The provider name itself is
            not checked until the first live ``send``.
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        *,
        from_: Optional[str] = None,
        params: Optional[AdapterParams] = None,
    ) -> None:
        if from_ is not None:
            provider, model = parse_from(from_)
        elif not provider or not model:
            raise ConfigurationError(
                'Either provide "provider" and "model", or use "from_" '
                f'(e.g., "{_FROM_EXAMPLE}")'
            )
        self._provider: str = provider
        self._model: str = model
        self._params = params
        self._adapter: Optional[ProviderAdapter] = None
        self._fake_responses: Optional[Tuple[Response, ...]] = None
        self._fake_index = 0
        self._recorded: List[RecordedCall] = []
        self._lock = threading.RLock()
        self._logger = get_logger("client")

    def __repr__(self) -> str:
        return f"Client(provider={self._provider!r}, model={self._model!r})"

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_faking(self) -> bool:
        """True once :meth:`fake` has been called."""
        return self._fake_responses is not None

    @property
    def remaining_fakes(self) -> int:
        """Number of canned responses not yet served (0 when not faking)."""
        with self._lock:
            if self._fake_responses is None:
                return 0
            return len(self._fake_responses) - self._fake_index

    # ---- Sending ----

    def send(self, messages: Sequence[Message], max_tokens: Optional[int] = None) -> Response:
        """Send ``messages`` and return the normalized response.

        Args:
            messages: Ordered ``{"role", "content"}`` mappings.
            max_tokens: Output token limit; ``None`` means ``DEFAULT_MAX_TOKENS``.

        Returns:
            The provider's response, or the next canned response in fake mode.

        Raises:
            FakeQueueExhaustedError: fake mode and no canned responses remain.
            ConfigurationError: unknown provider or missing credential.
            ApiError: the provider answered with a non-success status.
            TransportError: the request never produced an HTTP response.
        """
        if max_tokens is None:
            max_tokens = DEFAULT_MAX_TOKENS
        snapshot: Tuple[Message, ...] = tuple(Message(**m) for m in messages)
        with self._lock:
            if self._fake_responses is not None:
                response = self._next_fake(self._fake_responses)
                mode = "fake"
            else:
                response = self._get_adapter().send(snapshot, self._model, max_tokens)
                mode = "live"
            self._recorded.append(RecordedCall(messages=snapshot, response=response, max_tokens=max_tokens))
            log_event(
                self._logger,
                "client.send",
                LogContext(provider=self._provider, model=self._model),
                level=logging.DEBUG,
                mode=mode,
                message_count=len(snapshot),
                max_tokens=max_tokens,
                recorded=len(self._recorded),
            )
        return response

    def _next_fake(self, queue: Tuple[Response, ...]) -> Response:
        if self._fake_index >= len(queue):
            raise FakeQueueExhaustedError(
                f"No more fake responses available ({len(queue)} installed, all consumed)."
            )
        response = queue[self._fake_index]
        self._fake_index += 1
        return response

    def _get_adapter(self) -> ProviderAdapter:
        if self._adapter is None:
            self._adapter = ProviderFactory.create(self._provider, params=self._params)
        return self._adapter

    # ---- Record / replay ----

    def fake(self, responses: Sequence[Response]) -> None:
        """Serve ``responses`` in order from now on instead of calling the provider.

        Replaces any previous queue, resets the cursor and clears the recorded
        log. There is no way back to live mode on the same client.
        """
        with self._lock:
            self._fake_responses = queue = tuple(responses)
            self._fake_index = 0
            self._recorded = []
        log_event(
            self._logger,
            "client.fake",
            LogContext(provider=self._provider, model=self._model),
            level=logging.DEBUG,
            queued=len(queue),
        )

    def assert_sent(self, predicate: SentPredicate) -> None:
        """Pass if ``predicate(messages, response)`` holds for any recorded call.

        Calls are checked in order and scanning stops at the first match.

        Raises:
            AssertionFailure: no recorded call matches (including an empty log).
        """
        for record in self.get_recorded():
            if predicate(record.messages, record.response):
                return
        raise AssertionFailure("No matching request was sent.")

    def assert_sent_count(self, expected: int) -> None:
        """Raise :class:`AssertionFailure` unless exactly ``expected`` calls were recorded."""
        actual = len(self.get_recorded())
        if actual != expected:
            raise AssertionFailure(f"Expected {expected} requests, but {actual} were sent.")

    def get_recorded(self) -> Tuple[RecordedCall, ...]:
        """Return an immutable snapshot of the recorded calls, oldest first."""
        with self._lock:
            return tuple(self._recorded)


__all__ = ["Client", "parse_from", "SentPredicate"]
