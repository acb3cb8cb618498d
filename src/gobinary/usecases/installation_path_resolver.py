"""Installation path resolver use case.

Determines the directory npm expects local executables in by trying an
ordered list of strategies; the first one that produces a path wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Protocol, Sequence, runtime_checkable

from gobinary.adapters.ports import CommandRunnerPort
from gobinary.domain.exceptions import GoBinaryError, InstallPathResolutionFailedError
from gobinary.domain.settings import LOCAL_BIN_DIR, NPM_PREFIX_ENV_VAR, InstallerEnvironment

logger = logging.getLogger(__name__)

NPM_BIN_COMMAND = ["npm", "bin"]


@runtime_checkable
class InstallPathStrategy(Protocol):
    """One way of finding the installation directory.

    Contract:
        - find() returns a Path, or None when this strategy has no answer
    """

    def find(self) -> Path | None: ...


class PackageManagerBinStrategy:
    """Ask npm itself via ``npm bin``.

    The answer is used only when the command exits 0, prints nothing on
    stderr and prints a non-empty path on stdout.
    """

    def __init__(
        self, runner: CommandRunnerPort, command: Sequence[str] = NPM_BIN_COMMAND
    ) -> None:
        self._runner = runner
        self._command = list(command)

    def find(self) -> Path | None:
        result = self._runner.run(self._command)
        output = result.stdout.strip()
        if not result.ok or not output:
            logger.debug(
                "%s gave no usable answer (exit %d): %s",
                " ".join(self._command),
                result.returncode,
                result.stderr.strip(),
            )
            return None
        return Path(output)


class PrefixEnvironmentStrategy:
    """Use ``$npm_config_prefix/bin``, which npm sets while running scripts."""

    def __init__(self, environ: Mapping[str, str], variable: str = NPM_PREFIX_ENV_VAR) -> None:
        self._environ = environ
        self._variable = variable

    def find(self) -> Path | None:
        prefix = self._environ.get(self._variable)
        if not prefix:
            return None
        return Path(prefix) / "bin"


class LocalBinStrategy:
    """Fall back to ``node_modules/.bin`` under the working directory."""

    def __init__(self, cwd: Path) -> None:
        self._cwd = cwd

    def find(self) -> Path | None:
        return self._cwd / LOCAL_BIN_DIR


class InstallationPathResolver:
    """Use case for resolving the binary installation directory.

    Tries each strategy in order. A strategy that raises GoBinaryError is
    treated as having no answer.
    """

    def __init__(self, strategies: Sequence[InstallPathStrategy]) -> None:
        """Initialize the resolver.

        Args:
            strategies: Strategies in priority order.
        """
        self._strategies = list(strategies)

    @classmethod
    def default(
        cls, environment: InstallerEnvironment, runner: CommandRunnerPort
    ) -> InstallationPathResolver:
        """Build the standard ``npm bin`` → prefix → node_modules/.bin chain."""
        return cls(
            [
                PackageManagerBinStrategy(runner),
                PrefixEnvironmentStrategy(environment.environ),
                LocalBinStrategy(environment.cwd),
            ]
        )

    def resolve(self) -> Path:
        """Return the first directory produced by a strategy.

        Returns:
            The installation directory.

        Raises:
            InstallPathResolutionFailedError: If no strategy produced a path.
        """
        for strategy in self._strategies:
            try:
                path = strategy.find()
            except GoBinaryError as e:
                logger.warning("%s failed: %s", type(strategy).__name__, e)
                continue
            if path is not None and str(path):
                logger.debug("Installation path from %s: %s", type(strategy).__name__, path)
                return path

        raise InstallPathResolutionFailedError(
            "Error getting binary installation path from `npm bin`"
        )
