"""Core wtf functionality - ties history, config, matching and the AI path."""

from __future__ import annotations

import logging
from pathlib import Path

from wtf.ai import GeminiClient, resolve_api_key
from wtf.config import ConfigStore, UserConfig
from wtf.history import get_previous_command
from wtf.matching.builtin import is_builtin_typo
from wtf.matching.engine import MatchEngine
from wtf.matching.models import Suggestion

logger = logging.getLogger(__name__)


class TypoFixer:
    """Main wtf orchestrator.

    Holds no terminal I/O. The CLI renders whatever this returns.
    """

    def __init__(
        self,
        store: ConfigStore | None = None,
        engine: MatchEngine | None = None,
        history_path: str | Path | None = None,
    ):
        self.store = store or ConfigStore()
        self.engine = engine or MatchEngine()
        self.history_path = history_path
        self._config: UserConfig | None = None

        logger.debug(f"TypoFixer initialized with config {self.store.path}")

    @property
    def config(self) -> UserConfig:
        """The user config, loaded on first access."""
        if self._config is None:
            self._config = self.store.load()
        return self._config

    def save(self) -> None:
        """Persist the current config.

        Raises:
            ConfigError: If the file cannot be written
        """
        self.store.save(self.config)

    def previous_command(self) -> str:
        """Read the failed command from shell history.

        Raises:
            HistoryError: If no command can be found
        """
        return get_previous_command(self.history_path)

    def suggest(self, command: str) -> list[Suggestion]:
        """Rank corrections for ``command`` using the current custom typos."""
        return self.engine.find_suggestions(command, tuple(self.config.custom_typos))

    def ai_fix(self, command: str, client: GeminiClient | None = None) -> str:
        """Fix ``command`` through the AI path.

        Raises:
            AIFixError: If no key is configured or the request fails
        """
        if client is None:
            client = GeminiClient(resolve_api_key(self.config))
        return client.fix_command(command)

    def is_builtin_typo(self, wrong: str, correct: str | None = None) -> bool:
        return is_builtin_typo(wrong, correct)

    def add_custom(self, wrong: str, correct: str) -> bool:
        """Add a custom typo and save.

        Returns:
            True if the pair overlaps the built-in table
        """
        builtin = self.is_builtin_typo(wrong, correct)
        self.config.add_typo(wrong, correct)
        self.save()
        return builtin

    def remove_custom(self, wrong: str) -> bool:
        """Remove a custom typo, saving only when something changed."""
        removed = self.config.remove_typo(wrong)
        if removed:
            self.save()
        return removed

    def save_previous_as(self, correct: str) -> str:
        """Record the last history command as a typo for ``correct``.

        Returns:
            The command that was recorded
        """
        wrong = self.previous_command()
        self.config.add_typo(wrong, correct)
        self.save()
        return wrong
