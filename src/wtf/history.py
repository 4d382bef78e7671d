"""Shell history discovery - find the command typed before ``wtf``."""

from __future__ import annotations

import logging
import os
import re
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Commands whose first word is this are our own invocations
SELF_PREFIX = "wtf"

BASH_HISTORY_LINES = (
    "shopt -s histappend",
    "PROMPT_COMMAND='history -a'",
)

BASH_HINT = (
    "History file is not up to date. Add this to your ~/.bashrc:\n"
    + "\n".join(BASH_HISTORY_LINES)
)

_ZSH_EXTENDED = re.compile(r"^: \d+:\d+;(.+)$")
_FISH_CMD = re.compile(r"- cmd: (.+)")


class HistoryError(RuntimeError):
    """The previous command could not be determined."""


class ShellType(Enum):
    """Supported history file dialects."""

    POWERSHELL = "powershell"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


def detect_shell_type(path: str | Path) -> ShellType:
    """Guess the history dialect from the file path."""
    path_str = str(path).lower()

    if "powershell" in path_str or "consolehost_history" in path_str:
        return ShellType.POWERSHELL
    if "fish" in path_str:
        return ShellType.FISH
    if "zsh" in path_str:
        return ShellType.ZSH
    return ShellType.BASH


def get_history_path(
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
    windows: bool | None = None,
) -> Path:
    """Locate the shell history file.

    Args:
        env: Environment to read ``HISTFILE``/``APPDATA`` from
        home: Home directory override
        windows: Force Windows lookup rules, detected when None

    Returns:
        Path to an existing history file

    Raises:
        HistoryError: If no history file exists
    """
    env = os.environ if env is None else env
    if windows is None:
        windows = sys.platform == "win32"

    if windows:
        appdata = env.get("APPDATA")
        if appdata:
            ps_history = (
                Path(appdata) / "Microsoft" / "Windows" / "PowerShell"
                / "PSReadLine" / "ConsoleHost_history.txt"
            )
            if ps_history.exists():
                return ps_history
        raise HistoryError("PowerShell history not found")

    home = home or Path.home()

    histfile = env.get("HISTFILE")
    if histfile:
        path = Path(histfile)
        if path.exists():
            return path

    for path in (
        home / ".zsh_history",
        home / ".bash_history",
        home / ".local" / "share" / "fish" / "fish_history",
    ):
        if path.exists():
            return path

    raise HistoryError("No shell history file found")


def parse_powershell_history(content: str) -> str:
    """The last line is the running ``wtf`` itself, so take the one before."""
    lines = content.splitlines()
    if len(lines) < 2:
        raise HistoryError("Not enough history")
    return lines[-2].strip()


def parse_bash_zsh_history(content: str) -> str:
    """Return the newest command, unwrapping zsh extended-history lines."""
    lines = content.splitlines()
    if not lines:
        raise HistoryError("Empty history")

    for line in reversed(lines):
        match = _ZSH_EXTENDED.match(line)
        cmd = (match.group(1) if match else line).strip()
        if cmd and not _is_self(cmd):
            return cmd

    raise HistoryError("No valid command found in history")


def parse_fish_history(content: str) -> str:
    for line in reversed(content.splitlines()):
        match = _FISH_CMD.search(line)
        if match:
            cmd = match.group(1).strip()
            if cmd and not _is_self(cmd):
                return cmd

    raise HistoryError("No valid command found in history")


def _is_self(cmd: str) -> bool:
    return cmd.split()[:1] == [SELF_PREFIX]


_PARSERS = {
    ShellType.POWERSHELL: parse_powershell_history,
    ShellType.BASH: parse_bash_zsh_history,
    ShellType.ZSH: parse_bash_zsh_history,
    ShellType.FISH: parse_fish_history,
}


def get_previous_command(path: str | Path | None = None) -> str:
    """Read the command typed before ``wtf``.

    Args:
        path: History file, discovered from the environment when None

    Returns:
        The previous command line

    Raises:
        HistoryError: If the history cannot be read or holds no command
    """
    history_path = Path(path) if path else get_history_path()
    if not history_path.exists():
        raise HistoryError(f"History file not found: {history_path}")

    try:
        content = history_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise HistoryError(f"Failed to read history: {e}") from e

    shell_type = detect_shell_type(history_path)
    logger.debug(f"Reading {shell_type.value} history from {history_path}")

    try:
        return _PARSERS[shell_type](content)
    except HistoryError as e:
        if shell_type is ShellType.BASH:
            raise HistoryError(BASH_HINT) from e
        raise


def needs_bash_history_setup(
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> bool:
    """True when the user runs bash and ~/.bashrc lacks real-time history."""
    env = os.environ if env is None else env
    if "bash" not in env.get("SHELL", ""):
        return False

    bashrc = (home or Path.home()) / ".bashrc"
    if not bashrc.exists():
        return False

    try:
        content = bashrc.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False

    has_histappend = "shopt -s histappend" in content
    has_prompt_command = "PROMPT_COMMAND" in content and "history -a" in content
    return not (has_histappend and has_prompt_command)


def configure_bash_history(home: Path | None = None) -> Path:
    """Append the history settings to ~/.bashrc.

    Returns:
        Path of the updated file

    Raises:
        HistoryError: If ~/.bashrc cannot be written
    """
    bashrc = (home or Path.home()) / ".bashrc"
    try:
        existing = bashrc.read_text(encoding="utf-8") if bashrc.exists() else ""
        missing = [line for line in BASH_HISTORY_LINES if line not in existing]
        if missing:
            with open(bashrc, "a", encoding="utf-8") as f:
                f.write("\n# Added by wtf: write history after every command\n")
                for line in missing:
                    f.write(f"{line}\n")
    except OSError as e:
        raise HistoryError(f"Failed to update {bashrc}: {e}") from e

    logger.info(f"Configured bash history in {bashrc}")
    return bashrc
