"""Subprocess-based implementation of the CommandRunnerPort."""

from __future__ import annotations

import logging
import shutil
import subprocess

from gobinary.adapters.ports import CommandResult

logger = logging.getLogger(__name__)

# Exit code shells report for a command that cannot be found
COMMAND_NOT_FOUND = 127


class SubprocessCommandRunner:
    """Adapter that runs commands with subprocess.run.

    The program is looked up on PATH first so that wrappers such as
    ``npm.cmd`` on Windows are found without going through a shell.
    A program that cannot be located or started is reported as a failed
    CommandResult rather than an exception.
    """

    def run(self, args: list[str]) -> CommandResult:
        """Run a command and capture its output.

        Args:
            args: Program and arguments.

        Returns:
            CommandResult with exit code and captured streams.
        """
        executable = shutil.which(args[0])
        if executable is None:
            logger.debug("Command not found on PATH: %s", args[0])
            return CommandResult(
                returncode=COMMAND_NOT_FOUND,
                stdout="",
                stderr=f"{args[0]}: command not found",
            )

        try:
            completed = subprocess.run(
                [executable, *args[1:]],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug("Failed to start %s: %s", args[0], e)
            return CommandResult(returncode=COMMAND_NOT_FOUND, stdout="", stderr=str(e))

        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
