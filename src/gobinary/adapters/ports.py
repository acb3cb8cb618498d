"""Port interfaces for gobinary.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
    ContextManager,
    Iterable,
    Iterator,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from gobinary.domain.binary import Platform
    from gobinary.domain.release import ApiRequest


@dataclass(frozen=True)
class CommandResult:
    """Outcome of running an external command.

    Attributes:
        returncode: Process exit code.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """True when the command exited cleanly without writing to stderr."""
        return self.returncode == 0 and not self.stderr


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the target platform.

    Contract:
        - detect() returns a Platform in Go naming
        - Raises UnsupportedPlatformError for unknown OS or architecture
    """

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object.

        Raises:
            UnsupportedPlatformError: If the OS or architecture is not supported.
        """
        ...


@runtime_checkable
class CommandRunnerPort(Protocol):
    """Port interface for running an external command to completion.

    Contract:
        - run(args) blocks until the process exits
        - Failure to start the process is reported through the result,
          never raised
    """

    def run(self, args: list[str]) -> CommandResult:
        """Run a command and capture its output.

        Args:
            args: Program and arguments.

        Returns:
            CommandResult with exit code and captured streams.
        """
        ...


@runtime_checkable
class StreamedResponse(Protocol):
    """An open HTTP response whose body has not been read yet."""

    @property
    def status_code(self) -> int: ...

    def iter_bytes(self) -> Iterator[bytes]: ...


@runtime_checkable
class HttpClientPort(Protocol):
    """Port interface for talking to the release host.

    Contract:
        - get_json() returns the decoded body of a 200 response
        - get_json() raises ReleaseQueryFailedError on network errors,
          non-200 status or undecodable bodies
        - stream() yields the response before its body is read, so callers
          can check the status first
        - stream() raises DownloadFailedError on network errors
    """

    def get_json(self, request: ApiRequest) -> Any:
        """Issue a request and decode its JSON body.

        Args:
            request: The request to send.

        Returns:
            Decoded JSON value.

        Raises:
            ReleaseQueryFailedError: On transport errors or non-200 status.
        """
        ...

    def stream(self, request: ApiRequest) -> ContextManager[StreamedResponse]:
        """Open a streamed response for a request.

        Args:
            request: The request to send.

        Returns:
            Context manager yielding the open response.

        Raises:
            DownloadFailedError: On transport errors.
        """
        ...


@runtime_checkable
class ArchiveExtractorPort(Protocol):
    """Port interface for unpacking a compressed archive stream.

    Contract:
        - extract() consumes chunks lazily and returns once the archive ends
        - Members never land outside destination
        - Raises DownloadFailedError on decompression or archive errors
    """

    def extract(self, chunks: Iterable[bytes], destination: Path) -> None:
        """Decompress and unpack a byte stream into a directory.

        Args:
            chunks: Compressed archive bytes in order.
            destination: Existing directory to unpack into.

        Raises:
            DownloadFailedError: If the stream is not a valid archive.
        """
        ...
