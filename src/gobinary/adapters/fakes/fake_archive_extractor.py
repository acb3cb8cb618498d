"""Fake archive extractor for testing.

Provides a test double for ArchiveExtractorPort that writes a fixed set of
files instead of parsing an archive.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class FakeArchiveExtractor:
    """Fake implementation of ArchiveExtractorPort for testing.

    Drains the incoming chunks (recording them) and then writes the
    configured files into the destination directory.
    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        """Initialize with the files to produce.

        Args:
            files: Mapping of relative file name to content.
        """
        self._files = dict(files or {})
        self._exception: BaseException | None = None
        self._calls: list[Path] = []
        self.received = b""

    @property
    def calls(self) -> list[Path]:
        """Return destinations from extract() calls, in order."""
        return self._calls

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from extract(), or None to clear."""
        self._exception = exception

    def extract(self, chunks: Iterable[bytes], destination: Path) -> None:
        self._calls.append(destination)
        self.received = b"".join(chunks)
        if self._exception is not None:
            raise self._exception
        for name, content in self._files.items():
            target = destination / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
