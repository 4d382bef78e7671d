"""Read-only candidate sources queried by the match engine."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from .builtin import COMMON_COMMANDS, builtin_entries
from .models import MatchQuery, TypoEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class TypoSource:
    """Exact lookup over a collection of (wrong, correct) pairs."""

    def __init__(self, entries: Iterable[TypoEntry]) -> None:
        """Index entries for lookup.

        Args:
            entries: Typo entries; on duplicate ``wrong`` strings the first wins
        """
        self._exact: dict[str, str] = {}
        self._by_head: dict[str, list[TypoEntry]] = {}

        for entry in entries:
            if entry.wrong in self._exact:
                continue
            self._exact[entry.wrong] = entry.correct
            # Single words are looked up as whole tokens, phrases by prefix
            words = entry.wrong.split()
            if len(words) > 1:
                self._by_head.setdefault(words[0], []).append(entry)

        # Longest phrase first so lookup_phrase returns the most specific match
        for bucket in self._by_head.values():
            bucket.sort(key=lambda e: len(e.wrong), reverse=True)

    def __contains__(self, wrong: object) -> bool:
        return wrong in self._exact

    def __len__(self) -> int:
        return len(self._exact)

    def lookup_exact(self, text: str) -> str | None:
        """Return the correction stored for ``text``, case-sensitive."""
        return self._exact.get(text)

    def lookup_phrase(self, query: MatchQuery) -> TypoEntry | None:
        """Find the longest stored multi-word phrase that prefixes the query.

        The phrase must end on a word boundary and be followed by more input,
        e.g. ``"npm onstall"`` matches ``"npm onstall express"``.
        """
        text = query.text
        for entry in self._by_head.get(query.head, ()):
            wrong = entry.wrong
            if len(wrong) < len(text) and text.startswith(wrong) and text[len(wrong)].isspace():
                return entry
        return None


class CustomSource(TypoSource):
    """User-maintained typo overrides, read from a config snapshot."""


class BuiltinExactSource(TypoSource):
    """The compiled-in typo table."""

    @classmethod
    def default(cls) -> BuiltinExactSource:
        return _default_builtin()


class CanonicalSource:
    """Known-good commands used as fuzzy-match targets."""

    def __init__(self, commands: Iterable[str]) -> None:
        seen: set[str] = set()
        ordered: list[str] = []
        for command in commands:
            command = command.strip()
            if command and command not in seen:
                seen.add(command)
                ordered.append(command)
        self._commands = tuple(ordered)
        self._known = frozenset(ordered)

    def __contains__(self, command: object) -> bool:
        return command in self._known

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def iterate(self) -> tuple[str, ...]:
        """All canonical commands in load order."""
        return self._commands

    @classmethod
    def default(cls) -> CanonicalSource:
        return _default_canonical()


@lru_cache(maxsize=1)
def _default_builtin() -> BuiltinExactSource:
    return BuiltinExactSource(builtin_entries())


@lru_cache(maxsize=1)
def _default_canonical() -> CanonicalSource:
    return CanonicalSource(COMMON_COMMANDS)
