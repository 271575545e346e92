"""
Usage DTO holding normalized token accounting.

Providers disagree on field names (``input_tokens`` vs ``prompt_tokens``);
adapters translate into this shape so callers see one contract.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Usage:
    """Token counts reported for a single completion.

    Both counts must be non-negative integers; construction fails otherwise,
    so hand-built fake responses obey the same contract as parsed ones.

    Attributes:
        input_tokens: Tokens consumed by the prompt.
        output_tokens: Tokens produced by the completion.
    """

    input_tokens: int
    output_tokens: int

    def __post_init__(self) -> None:
        for name in ("input_tokens", "output_tokens"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Usage.{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"Usage.{name} must be non-negative, got {value}")

    @property
    def total_tokens(self) -> int:
        """Return the sum of input and output tokens."""
        return self.input_tokens + self.output_tokens

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the usage counts."""
        return asdict(self)


__all__ = ["Usage"]
