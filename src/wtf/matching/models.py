"""Data shapes shared by the matching engine and its callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Confidence(Enum):
    """How a suggestion was derived."""

    CUSTOM = "custom"
    EXACT = "exact"
    FUZZY = "fuzzy"

    @property
    def priority(self) -> int:
        """Ranking weight, higher sorts first."""
        return _PRIORITY[self]


_PRIORITY = {
    Confidence.CUSTOM: 3,
    Confidence.EXACT: 2,
    Confidence.FUZZY: 1,
}


@dataclass(frozen=True)
class TypoEntry:
    """A stored (wrong, correct) pair."""

    wrong: str
    correct: str


@dataclass(frozen=True)
class Suggestion:
    """A corrected command proposed for the failed one."""

    command: str
    confidence: Confidence
    score: float  # 0.0 to 1.0
    explanation: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize for display or JSON output."""
        return {
            "command": self.command,
            "confidence": self.confidence.value,
            "score": self.score,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class MatchQuery:
    """A failed command prepared for lookup.

    ``raw`` keeps the text exactly as typed. ``text`` is trimmed and used for
    whole-string lookups, ``tokens`` is its whitespace split.
    """

    raw: str
    text: str = field(init=False)
    tokens: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        text = self.raw.strip()
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "tokens", tuple(text.split()))

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    @property
    def head(self) -> str:
        """First token, or an empty string for blank input."""
        return self.tokens[0] if self.tokens else ""

    @property
    def tail(self) -> tuple[str, ...]:
        return self.tokens[1:]

    def replace_head(self, replacement: str, count: int = 1) -> str:
        """Swap the first ``count`` tokens for ``replacement``.

        Remaining tokens are re-joined with single spaces.
        """
        rest = self.tokens[count:]
        if not rest:
            return replacement
        return " ".join((replacement, *rest))
