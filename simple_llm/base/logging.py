"""Structured logging for the client and the provider adapters.

Every logger handed out by :func:`get_logger` is a child of the shared
``simple_llm`` logger. That logger owns a single stderr handler that writes
one JSON object per line, and it does not propagate to the root logger, so
host applications only see library output if they ask for it.

Level selection:
- ``SIMPLE_LLM_LOG_LEVEL`` (``DEBUG``, ``INFO``, ``WARNING``...) wins whenever
  it is set.
- Otherwise the level chosen via :func:`configure_logger` sticks.
- The initial default is ``INFO``, which hides the per-send ``client.*``
  events (emitted at ``DEBUG``).

Events are emitted through :func:`log_event` as a JSON string; the
``JsonFormatter`` hoists its keys into the output line. Adapters use
:func:`normalized_log_event` so ``chat.start`` / ``chat.end`` / ``chat.error``
share the keys in ``REQUIRED_NORMALIZED_KEYS`` regardless of vendor.

Never pass API keys or message contents to these helpers.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "simple_llm"
LOG_LEVEL_ENV = "SIMPLE_LLM_LOG_LEVEL"

# Markers set on objects this module manages.
_READY_FLAG = "_simple_llm_ready"
_CONSOLE_FLAG = "_simple_llm_console"
_FILE_FLAG = "_simple_llm_file"

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5

_LEVEL_NAMES: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Translate a level name (any case) into its numeric value, else ``default``."""
    if not value:
        return default
    return _LEVEL_NAMES.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_TEXT_FORMAT)


def _set_level(logger: logging.Logger, level: int, handlers: Optional[List[logging.Handler]] = None) -> None:
    logger.setLevel(level)
    for handler in logger.handlers if handlers is None else handlers:
        handler.setLevel(level)


def _base_logger(json_mode: bool, default_level: int) -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    env_value = os.getenv(LOG_LEVEL_ENV)

    if getattr(logger, _READY_FLAG, False):
        if env_value:
            consoles = [h for h in logger.handlers if getattr(h, _CONSOLE_FLAG, False)]
            _set_level(logger, _parse_level(env_value, default=logger.level), consoles)
        return logger

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_formatter(json_mode))
    setattr(console, _CONSOLE_FLAG, True)
    logger.handlers[:] = [console]
    logger.propagate = False
    _set_level(logger, _parse_level(env_value, default=default_level))
    setattr(logger, _READY_FLAG, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``simple_llm`` or one of its children.

    ``name`` may be given with or without the ``simple_llm.`` prefix.
    ``json_mode`` and ``level`` only matter on the very first call, when the
    shared console handler is created.
    """
    base = _base_logger(json_mode, level)
    if name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    child = logging.getLogger(name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def _detach(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    handler.close()


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Adjust the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        New level for the logger and all of its handlers. ``None`` keeps the
        current one.
    file_path: Optional[str]
        Also write to this file through a size-rotated handler (10 MB x 5).
        ``None`` removes a file handler added by an earlier call.
    json_mode: bool
        JSON lines (default) or plain text for the file handler.

    Returns
    -------
    logging.Logger
        The shared ``simple_llm`` logger.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)
    if isinstance(level, str):
        level = _parse_level(level, default=logger.level)
    if level is not None:
        _set_level(logger, level)

    file_handlers = [h for h in logger.handlers if getattr(h, _FILE_FLAG, False)]
    if file_path is None:
        for handler in file_handlers:
            _detach(logger, handler)
        return logger

    target = os.path.abspath(os.path.expanduser(file_path))
    kept: Optional[logging.Handler] = None
    for handler in file_handlers:
        if getattr(handler, "baseFilename", None) == target:
            kept = handler
        else:
            _detach(logger, handler)

    if kept is None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        kept = RotatingFileHandler(target, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8")
        setattr(kept, _FILE_FLAG, True)
        logger.addHandler(kept)
    kept.setFormatter(_formatter(json_mode))
    kept.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Log ``event`` as a single JSON object.

    The payload is ``{"event": event}`` plus the context fields plus
    ``fields``. ``None`` values in ``fields`` are dropped unless ``keep_none``.
    Nothing is serialized when ``level`` is disabled.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_dict())
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "phase",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    # Usage objects expose to_dict; plain mappings are copied as-is.
    if tokens is None or isinstance(tokens, Mapping):
        return None if tokens is None else dict(tokens)
    to_dict = getattr(tokens, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Log an adapter lifecycle event with the normalized key set.

    ``phase``, ``emitted`` and ``tokens`` are always present (possibly
    ``null``); ``error_code`` only when given. Extra fields whose value is
    ``None`` are dropped.
    """
    fields: Dict[str, Any] = {"phase": phase, "emitted": emitted, "tokens": _coerce_tokens(tokens)}
    if error_code is not None:
        fields["error_code"] = error_code
    fields.update({k: v for k, v in extra_fields.items() if v is not None})
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
]
