"""wtf - fix typos in your previous shell command."""

__version__ = "0.1.0"

# Lazy imports
def __getattr__(name: str):
    """Lazy import of the public entry points."""
    if name == "MatchEngine":
        from wtf.matching.engine import MatchEngine
        return MatchEngine
    elif name == "find_suggestions":
        from wtf.matching.engine import find_suggestions
        return find_suggestions
    elif name == "Suggestion":
        from wtf.matching.models import Suggestion
        return Suggestion
    elif name == "TypoEntry":
        from wtf.matching.models import TypoEntry
        return TypoEntry
    elif name == "ConfigStore":
        from wtf.config import ConfigStore
        return ConfigStore
    elif name == "TypoFixer":
        from wtf.core import TypoFixer
        return TypoFixer
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "MatchEngine",
    "find_suggestions",
    "Suggestion",
    "TypoEntry",
    "ConfigStore",
    "TypoFixer",
]
