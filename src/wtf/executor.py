"""Run a chosen fix through the host shell."""

from __future__ import annotations

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)


class ExecutionError(RuntimeError):
    """The command could not be started or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


def shell_invocation(command: str, windows: bool | None = None) -> list[str]:
    """Build the argv that runs ``command`` in the platform shell."""
    if windows is None:
        windows = sys.platform == "win32"
    if windows:
        return ["powershell", "-Command", command]
    return ["sh", "-c", command]


def execute_command(command: str) -> int:
    """Execute a command with inherited stdin/stdout/stderr.

    Args:
        command: Shell command line

    Returns:
        The exit code (always 0)

    Raises:
        ExecutionError: If the shell cannot be spawned or the command fails
    """
    argv = shell_invocation(command)
    logger.debug(f"Executing: {argv}")

    try:
        result = subprocess.run(argv, check=False)
    except OSError as e:
        raise ExecutionError(f"Failed to execute command: {e}") from e

    if result.returncode != 0:
        raise ExecutionError(
            f"Command exited with status: {result.returncode}",
            returncode=result.returncode,
        )
    return result.returncode
