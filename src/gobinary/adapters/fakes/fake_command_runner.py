"""Fake command runner for testing.

Provides a test double for CommandRunnerPort that returns preconfigured
results without spawning processes.
"""

from __future__ import annotations

from gobinary.adapters.ports import CommandResult


class FakeCommandRunner:
    """Fake implementation of CommandRunnerPort for testing.

    Returns the same configured CommandResult for every command and records
    the argument lists it was called with.

    Example:
        >>> fake = FakeCommandRunner.succeeding("/usr/local/bin\\n")
        >>> fake.run(["npm", "bin"]).stdout
        '/usr/local/bin\\n'
        >>> fake.calls
        [['npm', 'bin']]
    """

    def __init__(self, result: CommandResult | None = None) -> None:
        """Initialize with the result to return.

        Args:
            result: CommandResult to return from run(). Defaults to a
                command that could not be found.
        """
        self._result = result or CommandResult(
            returncode=127, stdout="", stderr="command not found"
        )
        self._calls: list[list[str]] = []

    @classmethod
    def succeeding(cls, stdout: str) -> FakeCommandRunner:
        """Create a runner whose commands exit 0 with the given output."""
        return cls(CommandResult(returncode=0, stdout=stdout, stderr=""))

    @classmethod
    def failing(cls, stderr: str = "error", returncode: int = 1) -> FakeCommandRunner:
        """Create a runner whose commands fail."""
        return cls(CommandResult(returncode=returncode, stdout="", stderr=stderr))

    @property
    def calls(self) -> list[list[str]]:
        """Return argument lists from run() calls, in order."""
        return self._calls

    def run(self, args: list[str]) -> CommandResult:
        """Record the call and return the configured result."""
        self._calls.append(list(args))
        return self._result
