"""Binary placer use case: move the extracted binary into place."""

from __future__ import annotations

import logging
from pathlib import Path

from gobinary.domain.exceptions import BinaryMissingFromArchiveError, BinaryPlacementError
from gobinary.usecases.installation_path_resolver import InstallationPathResolver

logger = logging.getLogger(__name__)


class BinaryPlacer:
    """Verifies the extracted binary and renames it into the install directory."""

    def __init__(self, path_resolver: InstallationPathResolver) -> None:
        self._path_resolver = path_resolver

    def place(self, bin_name: str, bin_path: Path) -> Path:
        """Move ``bin_path / bin_name`` into the installation directory.

        Args:
            bin_name: Executable file name.
            bin_path: Directory the archive was extracted into.

        Returns:
            Final location of the binary.

        Raises:
            BinaryMissingFromArchiveError: If the binary was not extracted.
            InstallPathResolutionFailedError: If no installation directory is found.
            BinaryPlacementError: If the file cannot be moved.
        """
        source = bin_path / bin_name
        if not source.is_file():
            raise BinaryMissingFromArchiveError(bin_name)

        install_dir = self._path_resolver.resolve()
        target = install_dir / bin_name

        try:
            install_dir.mkdir(parents=True, exist_ok=True)
            source.replace(target)
        except OSError as e:
            raise BinaryPlacementError(f"Unable to move {source} to {target}: {e}") from e

        logger.info("Installed %s", target)
        return target
