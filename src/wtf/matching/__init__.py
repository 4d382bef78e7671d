"""Typo matching: similarity scoring, candidate sources and ranking."""

from .engine import MatchEngine, find_suggestions
from .models import Confidence, MatchQuery, Suggestion, TypoEntry
from .similarity import jaro, jaro_winkler
from .sources import BuiltinExactSource, CanonicalSource, CustomSource

__all__ = [
    "MatchEngine",
    "find_suggestions",
    "Confidence",
    "MatchQuery",
    "Suggestion",
    "TypoEntry",
    "jaro",
    "jaro_winkler",
    "BuiltinExactSource",
    "CanonicalSource",
    "CustomSource",
]
