"""Defensive access into untyped JSON response bodies."""
from __future__ import annotations

from typing import Any, Union

_MISSING = object()

PathSegment = Union[str, int]


def _dotted(path: tuple) -> str:
    return ".".join(str(s) for s in path)


def dig(data: Any, *path: PathSegment, default: Any = _MISSING) -> Any:
    """Walk ``path`` through nested mappings and sequences.

    String segments index mappings, integer segments index lists. When a
    segment is absent (or the container has the wrong type) ``default`` is
    returned if given, otherwise ``KeyError`` is raised naming the full path.

    >>> dig({"a": [{"b": 1}]}, "a", 0, "b")
    1
    """
    current = data
    for segment in path:
        if isinstance(segment, int):
            ok = isinstance(current, list) and -len(current) <= segment < len(current)
        else:
            ok = isinstance(current, dict) and segment in current
        if not ok:
            if default is not _MISSING:
                return default
            raise KeyError(_dotted(path))
        current = current[segment]
    return current


def dig_str(data: Any, *path: PathSegment) -> str:
    """Like :func:`dig`, but the value must be a string.

    Raises:
        KeyError: the path is absent.
        TypeError: the value is present but not a ``str`` (``null`` included).
    """
    value = dig(data, *path)
    if not isinstance(value, str):
        raise TypeError(f"{_dotted(path)} (expected string, got {type(value).__name__})")
    return value


def dig_count(data: Any, *path: PathSegment) -> int:
    """Like :func:`dig`, but the value must be a non-negative integer.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Raises:
        KeyError: the path is absent.
        TypeError: the value is not a non-negative ``int``.
    """
    value = dig(data, *path)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TypeError(f"{_dotted(path)} (expected non-negative integer, got {value!r})")
    return value


__all__ = ["dig", "dig_str", "dig_count"]
