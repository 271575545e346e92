"""Provider/model context attached to every structured log event."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class LogContext:
    """Identity of the client or adapter emitting an event.

    ``extra`` carries any further per-call fields; ``None`` values are pruned
    from :meth:`to_dict` so events stay compact.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        merged = {"provider": self.provider, "model": self.model, **self.extra}
        return {k: v for k, v in merged.items() if v is not None}


__all__ = ["LogContext"]
