"""Match engine - rank corrections for a failed command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .models import Confidence, MatchQuery, Suggestion, TypoEntry
from .similarity import jaro_winkler
from .sources import BuiltinExactSource, CanonicalSource, CustomSource, TypoSource

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

FUZZY_THRESHOLD = 0.85
MAX_SUGGESTIONS = 5
CUSTOM_EXPLANATION = "custom fix"


def _to_entries(items: Iterable[Any]) -> list[TypoEntry]:
    """Accept TypoEntry values or plain (wrong, correct) pairs."""
    entries = []
    for item in items:
        if isinstance(item, TypoEntry):
            entries.append(item)
        else:
            wrong, correct = item
            entries.append(TypoEntry(wrong, correct))
    return entries


class MatchEngine:
    """Finds likely intended commands for a mistyped one.

    Sources are consulted in priority order: the user's custom typos, the
    built-in typo table (whole input, phrase prefix, then first token), and
    finally fuzzy similarity against canonical commands.
    """

    def __init__(
        self,
        threshold: float = FUZZY_THRESHOLD,
        limit: int = MAX_SUGGESTIONS,
        scorer: Callable[[str, str], float] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            threshold: Minimum similarity (inclusive) for fuzzy suggestions
            limit: Maximum number of suggestions returned
            scorer: Similarity function, Jaro-Winkler by default
        """
        self.threshold = threshold
        self.limit = limit
        self.scorer = scorer or jaro_winkler

    def find_suggestions(
        self,
        command: str,
        custom_entries: CustomSource | Iterable[Any] = (),
        builtin_entries: BuiltinExactSource | Iterable[Any] | None = None,
        canonical_commands: CanonicalSource | Iterable[str] | None = None,
    ) -> list[Suggestion]:
        """Suggest corrections for a failed command.

        Args:
            command: The failed command line as typed
            custom_entries: User typo overrides (TypoEntry or pairs)
            builtin_entries: Built-in typo table, compiled-in table if None
            canonical_commands: Fuzzy targets, compiled-in list if None

        Returns:
            At most ``limit`` suggestions, best first, with unique commands
        """
        query = MatchQuery(command)
        if query.is_empty:
            return []

        custom = self._custom_source(custom_entries)
        builtin = self._builtin_source(builtin_entries)
        canonical = self._canonical_source(canonical_commands)

        found: list[Suggestion] = []
        # Wrong strings already handled by a custom entry
        claimed: set[str] = set()

        self._match_custom(query, custom, found, claimed)
        self._match_builtin(query, builtin, found, claimed)
        self._match_first_token(query, builtin, found, claimed)

        if query.head in claimed or query.text in claimed:
            logger.debug(f"Custom fix owns '{query.head}', skipping fuzzy pass")
        elif len({s.command for s in found}) >= self.limit:
            logger.debug("Exact matches fill every slot, skipping fuzzy pass")
        else:
            self._match_fuzzy(query, canonical, found)

        ranked = self._rank(found)
        logger.debug(f"{len(ranked)} suggestion(s) for: {query.text[:50]}")
        return ranked

    def _custom_source(self, entries: CustomSource | Iterable[Any]) -> TypoSource:
        if isinstance(entries, TypoSource):
            return entries
        return CustomSource(_to_entries(entries))

    def _builtin_source(self, entries: BuiltinExactSource | Iterable[Any] | None) -> TypoSource:
        if entries is None:
            return BuiltinExactSource.default()
        if isinstance(entries, TypoSource):
            return entries
        return BuiltinExactSource(_to_entries(entries))

    def _canonical_source(self, commands: CanonicalSource | Iterable[str] | None) -> CanonicalSource:
        if commands is None:
            return CanonicalSource.default()
        if isinstance(commands, CanonicalSource):
            return commands
        return CanonicalSource(commands)

    def _match_custom(
        self,
        query: MatchQuery,
        source: TypoSource,
        found: list[Suggestion],
        claimed: set[str],
    ) -> None:
        """Whole input, stored phrase prefix, then first token."""
        correct = source.lookup_exact(query.text)
        if correct is not None:
            found.append(Suggestion(correct, Confidence.CUSTOM, 1.0, CUSTOM_EXPLANATION))
            claimed.add(query.text)
            return

        entry = source.lookup_phrase(query)
        if entry is not None:
            remainder = query.text[len(entry.wrong):]
            found.append(Suggestion(
                entry.correct + remainder, Confidence.CUSTOM, 1.0, CUSTOM_EXPLANATION,
            ))
            claimed.add(entry.wrong)

        correct = source.lookup_exact(query.head)
        if correct is not None:
            found.append(Suggestion(
                query.replace_head(correct), Confidence.CUSTOM, 1.0, CUSTOM_EXPLANATION,
            ))
            claimed.add(query.head)

    def _match_builtin(
        self,
        query: MatchQuery,
        source: TypoSource,
        found: list[Suggestion],
        claimed: set[str],
    ) -> None:
        """Whole input, or the longest stored phrase with arguments reattached."""
        explanation = f"{query.head} typo"

        if query.text not in claimed:
            correct = source.lookup_exact(query.text)
            if correct is not None:
                found.append(Suggestion(correct, Confidence.EXACT, 1.0, explanation))
                return

        entry = source.lookup_phrase(query)
        if entry is not None and entry.wrong not in claimed:
            remainder = query.text[len(entry.wrong):]
            found.append(Suggestion(
                entry.correct + remainder, Confidence.EXACT, 1.0, explanation,
            ))

    def _match_first_token(
        self,
        query: MatchQuery,
        source: TypoSource,
        found: list[Suggestion],
        claimed: set[str],
    ) -> None:
        """Fix only the tool name, e.g. ``gti status`` -> ``git status``."""
        if len(query.tokens) < 2 or query.head in claimed:
            return

        correct = source.lookup_exact(query.head)
        if correct is not None:
            found.append(Suggestion(
                query.replace_head(correct), Confidence.EXACT, 1.0, f"{query.head} typo",
            ))

    def _match_fuzzy(
        self,
        query: MatchQuery,
        source: CanonicalSource,
        found: list[Suggestion],
    ) -> None:
        """Score leading tokens against every canonical command.

        A canonical command of N words is compared with the first N tokens of
        the input and replaces them when similar enough. Leading tokens that
        already spell a canonical command are never rewritten, and every word
        that differs must clear the threshold on its own, so ``git push`` is
        not turned into ``git pull``.
        """
        present = {s.command for s in found}
        as_typed = " ".join(query.tokens)

        for canonical in source.iterate():
            words = canonical.lower().split()
            width = len(words)
            if width > len(query.tokens):
                continue

            typed = [token.lower() for token in query.tokens[:width]]
            target = " ".join(typed)
            if target in source:
                continue

            score = self.scorer(target, " ".join(words))
            if score < self.threshold:
                continue
            if width > 1 and not self._words_similar(typed, words):
                continue

            candidate = query.replace_head(canonical, width)
            if candidate == as_typed or candidate in present:
                continue

            present.add(candidate)
            found.append(Suggestion(
                candidate, Confidence.FUZZY, score, f"similar to '{canonical}'",
            ))

    def _words_similar(self, typed: list[str], words: list[str]) -> bool:
        return all(
            a == b or self.scorer(a, b) >= self.threshold
            for a, b in zip(typed, words)
        )

    def _rank(self, found: list[Suggestion]) -> list[Suggestion]:
        """Order by confidence then score, drop repeated commands, truncate."""
        ordered = sorted(
            found,
            key=lambda s: (s.confidence.priority, s.score),
            reverse=True,
        )

        seen: set[str] = set()
        unique: list[Suggestion] = []
        for suggestion in ordered:
            if suggestion.command not in seen:
                seen.add(suggestion.command)
                unique.append(suggestion)

        return unique[:self.limit]


_default_engine = MatchEngine()


def find_suggestions(
    command: str,
    custom_entries: CustomSource | Iterable[Any] = (),
    builtin_entries: BuiltinExactSource | Iterable[Any] | None = None,
    canonical_commands: CanonicalSource | Iterable[str] | None = None,
) -> list[Suggestion]:
    """Suggest corrections with the default threshold and limit."""
    return _default_engine.find_suggestions(
        command,
        custom_entries,
        builtin_entries,
        canonical_commands,
    )
