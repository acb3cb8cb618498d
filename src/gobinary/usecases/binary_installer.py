"""Binary installer use case orchestrating install and uninstall."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from gobinary.adapters.ports import PlatformDetectorPort
from gobinary.domain.binary import InstallOptions, resolve_install_options
from gobinary.domain.exceptions import GoBinaryError
from gobinary.domain.settings import InstallerEnvironment
from gobinary.usecases.asset_fetcher import AssetFetcher
from gobinary.usecases.binary_placer import BinaryPlacer
from gobinary.usecases.installation_path_resolver import InstallationPathResolver
from gobinary.usecases.manifest_loader import ManifestLoader
from gobinary.usecases.release_asset_resolver import ReleaseAssetResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallResult:
    """Result of an install operation.

    Attributes:
        success: True if the binary was placed.
        installed_path: Final binary location on success, None otherwise.
        error: Error message on failure, None otherwise.
    """

    success: bool
    installed_path: Path | None
    error: str | None

    @classmethod
    def create_success(cls, installed_path: Path) -> InstallResult:
        return cls(success=True, installed_path=installed_path, error=None)

    @classmethod
    def create_failure(cls, error: str) -> InstallResult:
        return cls(success=False, installed_path=None, error=error)


@dataclass(frozen=True)
class UninstallResult:
    """Result of an uninstall operation.

    Attributes:
        success: False only when the options or install path could not be resolved.
        removed_path: Path a deletion was attempted at, whether or not it existed.
        error: Error message on failure, None otherwise.
    """

    success: bool
    removed_path: Path | None
    error: str | None

    @classmethod
    def create_success(cls, removed_path: Path) -> UninstallResult:
        return cls(success=True, removed_path=removed_path, error=None)

    @classmethod
    def create_failure(cls, error: str) -> UninstallResult:
        return cls(success=False, removed_path=None, error=error)


class BinaryInstaller:
    """Orchestrates the install and uninstall pipelines.

    Install stages run strictly in order, each starting only after the
    previous one returned:

    1. Detect the platform and load the manifest into InstallOptions
    2. Resolve the release asset
    3. Stream, decompress and unpack it into the extraction directory
    4. Verify the binary and move it into the installation directory

    Any GoBinaryError ends the pipeline and is reported as a failed result.
    """

    def __init__(
        self,
        environment: InstallerEnvironment,
        platform_detector: PlatformDetectorPort,
        manifest_loader: ManifestLoader,
        asset_resolver: ReleaseAssetResolver,
        fetcher: AssetFetcher,
        path_resolver: InstallationPathResolver,
    ) -> None:
        self._environment = environment
        self._platform_detector = platform_detector
        self._manifest_loader = manifest_loader
        self._asset_resolver = asset_resolver
        self._fetcher = fetcher
        self._path_resolver = path_resolver
        self._placer = BinaryPlacer(path_resolver)

    def resolve_options(self) -> InstallOptions:
        """Detect the platform and load the manifest.

        Raises:
            UnsupportedPlatformError, ManifestNotFoundError, ManifestParseError,
            InvalidConfigurationError.
        """
        platform = self._platform_detector.detect()
        distribution = self._manifest_loader.load()
        options = resolve_install_options(distribution, platform, self._environment.cwd)
        logger.debug("Resolved install options: %s", options)
        return options

    def install(self) -> InstallResult:
        """Download the release asset and place the binary.

        Returns:
            InstallResult with the installed path, or the error message.
        """
        try:
            options = self.resolve_options()
            resolved = self._asset_resolver.resolve(options)
            self._fetcher.fetch(resolved.download_request, options.bin_path)
            installed_path = self._placer.place(options.bin_name, options.bin_path)
        except GoBinaryError as e:
            logger.debug("Install failed", exc_info=True)
            return InstallResult.create_failure(str(e))

        return InstallResult.create_success(installed_path)

    def uninstall(self) -> UninstallResult:
        """Delete the previously placed binary.

        A missing file, or any other deletion error, still counts as success.

        Returns:
            UninstallResult with the path a deletion was attempted at.
        """
        try:
            options = self.resolve_options()
            install_dir = self._path_resolver.resolve()
        except GoBinaryError as e:
            return UninstallResult.create_failure(str(e))

        target = install_dir / options.bin_name
        try:
            target.unlink()
            logger.info("Removed %s", target)
        except OSError as e:
            logger.debug("Ignoring failure to remove %s: %s", target, e)

        return UninstallResult.create_success(target)
