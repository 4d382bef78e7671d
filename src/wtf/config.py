"""User configuration - custom typos and behaviour flags stored as JSON."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wtf.matching.models import TypoEntry

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WTF_CONFIG_PATH"


class ConfigError(RuntimeError):
    """Configuration could not be written."""


@dataclass
class UserConfig:
    """Persisted user settings."""

    custom_typos: list[TypoEntry] = field(default_factory=list)
    first_run_complete: bool = False
    auto_mode: bool = False
    ai_mode: bool = False
    google_api_key: str | None = None

    def add_typo(self, wrong: str, correct: str) -> None:
        """Add a typo, replacing any existing entry for ``wrong``."""
        self.custom_typos = [e for e in self.custom_typos if e.wrong != wrong]
        self.custom_typos.append(TypoEntry(wrong, correct))

    def remove_typo(self, wrong: str) -> bool:
        """Remove the entry for ``wrong``. Returns True if one was removed."""
        before = len(self.custom_typos)
        self.custom_typos = [e for e in self.custom_typos if e.wrong != wrong]
        return len(self.custom_typos) < before

    def clear_typos(self) -> int:
        """Drop every custom typo. Returns how many were removed."""
        count = len(self.custom_typos)
        self.custom_typos = []
        return count

    def mark_first_run_complete(self) -> None:
        self.first_run_complete = True

    def set_auto_mode(self, enabled: bool) -> None:
        self.auto_mode = enabled

    def toggle_auto_mode(self) -> bool:
        self.auto_mode = not self.auto_mode
        return self.auto_mode

    def set_ai_mode(self, enabled: bool) -> None:
        self.ai_mode = enabled

    def toggle_ai_mode(self) -> bool:
        self.ai_mode = not self.ai_mode
        return self.ai_mode

    def set_google_api_key(self, key: str) -> None:
        self.google_api_key = key

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk JSON layout."""
        return {
            "custom_typos": [[e.wrong, e.correct] for e in self.custom_typos],
            "first_run_complete": self.first_run_complete,
            "auto_mode": self.auto_mode,
            "ai_mode": self.ai_mode,
            "google_api_key": self.google_api_key,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserConfig:
        """Build a config from parsed JSON, defaulting missing keys.

        Raises:
            ValueError: If ``custom_typos`` is not a list of string pairs
        """
        typos = []
        for item in data.get("custom_typos", []):
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise ValueError(f"Invalid custom typo entry: {item!r}")
            wrong, correct = item
            if not isinstance(wrong, str) or not isinstance(correct, str):
                raise ValueError(f"Invalid custom typo entry: {item!r}")
            typos.append(TypoEntry(wrong, correct))

        return cls(
            custom_typos=typos,
            first_run_complete=bool(data.get("first_run_complete", False)),
            auto_mode=bool(data.get("auto_mode", False)),
            ai_mode=bool(data.get("ai_mode", False)),
            google_api_key=data.get("google_api_key") or None,
        )


class ConfigStore:
    """Loads and saves UserConfig as a JSON file."""

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize the store.

        Args:
            path: Config file path. Defaults to ``$WTF_CONFIG_PATH`` or
                ``~/.wtf/config.json``
        """
        if path:
            self.path = Path(path)
        elif os.getenv(CONFIG_ENV_VAR):
            self.path = Path(os.environ[CONFIG_ENV_VAR])
        else:
            self.path = Path.home() / ".wtf" / "config.json"

    def load(self) -> UserConfig:
        """Read the config, falling back to defaults if missing or corrupt."""
        if not self.path.exists():
            return UserConfig()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level value is not an object")
            return UserConfig.from_dict(data)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable config {self.path}: {e}")
            return UserConfig()

    def save(self, config: UserConfig) -> None:
        """Write the config as pretty-printed JSON.

        Raises:
            ConfigError: If the directory or file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to write config: {e}") from e

        logger.debug(f"Saved config to {self.path}")

    def load_custom_typos(self) -> list[TypoEntry]:
        return list(self.load().custom_typos)

    def save_custom_typos(self, entries: list[TypoEntry]) -> None:
        """Replace the stored custom typos, keeping the other settings."""
        config = self.load()
        config.custom_typos = list(entries)
        self.save(config)
