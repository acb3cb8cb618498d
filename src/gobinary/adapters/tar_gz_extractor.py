"""Streaming gzip + tar extraction implementing ArchiveExtractorPort."""

from __future__ import annotations

import io
import logging
import tarfile
import zlib
from pathlib import Path
from typing import Iterable, Iterator

from gobinary.adapters.ports import ArchiveExtractorPort
from gobinary.domain.exceptions import DownloadFailedError

logger = logging.getLogger(__name__)


class _ChunkReader(io.RawIOBase):
    """Read-only file object pulling bytes from an iterator on demand.

    Nothing is read ahead of what tarfile asks for, so a slow consumer
    slows the producer down.
    """

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self._chunks = iter(chunks)
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        while not self._pending:
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                return 0
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size


class TarGzExtractor:
    """Adapter that gunzips and untars a byte stream into a directory.

    Uses tarfile's sequential stream mode (``r|gz``), so the archive is
    never held in memory or written to disk as a whole. Members that would
    land outside the destination are rejected.
    """

    def extract(self, chunks: Iterable[bytes], destination: Path) -> None:
        """Decompress and unpack a byte stream into a directory.

        Returns only after the archive's end has been read.

        Args:
            chunks: Compressed archive bytes in order.
            destination: Existing directory to unpack into.

        Raises:
            DownloadFailedError: If decompression, parsing or writing fails.
        """
        reader = io.BufferedReader(_ChunkReader(chunks))
        try:
            with tarfile.open(fileobj=reader, mode="r|gz") as archive:
                members = self._safe_members(archive, destination)
                if hasattr(tarfile, "data_filter"):
                    archive.extractall(destination, members=members, filter="data")
                else:
                    archive.extractall(destination, members=members)
        except (tarfile.TarError, zlib.error, EOFError, OSError) as e:
            raise DownloadFailedError(
                f"Error extracting archive into {destination}: {e}",
                original_error=e,
            ) from e

        logger.debug("Extracted archive into %s", destination)

    def _safe_members(
        self, archive: tarfile.TarFile, destination: Path
    ) -> Iterator[tarfile.TarInfo]:
        """Yield members, refusing any whose path or link target escapes destination."""
        root = destination.resolve()
        for member in archive:
            target = (root / member.name).resolve()
            if not _is_within(root, target):
                raise DownloadFailedError(
                    f"Archive member escapes extraction directory: {member.name}"
                )
            if member.issym() or member.islnk():
                # Symlinks resolve from the member's directory, hard links from the root
                base = (root / member.name).parent if member.issym() else root
                if not _is_within(root, (base / member.linkname).resolve()):
                    raise DownloadFailedError(
                        "Archive link escapes extraction directory: "
                        f"{member.name} -> {member.linkname}"
                    )
            yield member


def _is_within(root: Path, path: Path) -> bool:
    return path == root or root in path.parents


# Runtime protocol check
assert isinstance(TarGzExtractor(), ArchiveExtractorPort)
