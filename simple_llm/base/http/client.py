"""Process-wide pool of ``httpx.Client`` instances used by the adapters.

Adapters never build their own clients: they ask :func:`get_httpx_client` for
one keyed by ``(base_url, purpose, timeout)`` and post to relative paths, so
every adapter configured the same way shares one connection pool.

Only ``status_code``, ``is_success``, ``text`` and ``json()`` of the returned
``httpx.Response`` objects are relied upon. No retries are performed; the
timeout is ``DEFAULT_HTTP_TIMEOUT`` unless the adapter was given its own.

Pooled clients are closed at interpreter exit, or earlier through
:func:`close_all_clients`.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..constants import DEFAULT_HTTP_TIMEOUT

_PoolKey = Tuple[Optional[str], str, float]

_POOL: Dict[_PoolKey, httpx.Client] = {}
_POOL_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str, timeout: Optional[float] = None) -> httpx.Client:
    """Return the shared client for ``base_url`` / ``purpose`` / ``timeout``.

    Parameters:
        base_url: Set as the client's base URL so callers can post relative
            paths. ``None`` yields a client without one.
        purpose: Pool discriminator such as ``"openai.chat"``.
        timeout: Seconds; ``None`` means ``DEFAULT_HTTP_TIMEOUT``.
    """
    seconds = DEFAULT_HTTP_TIMEOUT if timeout is None else timeout
    key = (base_url, purpose, seconds)
    with _POOL_LOCK:
        client = _POOL.get(key)
        if client is None:
            kwargs = {"base_url": base_url} if base_url else {}
            client = _POOL[key] = httpx.Client(timeout=seconds, **kwargs)
        return client


def close_all_clients() -> None:
    """Close every pooled client and empty the pool."""
    with _POOL_LOCK:
        clients = list(_POOL.values())
        _POOL.clear()
    for client in clients:
        client.close()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
