"""Factory functions for wiring the installer from production adapters.

Keeps adapter construction out of the use cases, which only ever see ports.
"""

from __future__ import annotations

import httpx

from gobinary.adapters.httpx_release_client import HttpxReleaseClient
from gobinary.adapters.platform_detector import OsPlatformDetector
from gobinary.adapters.subprocess_command_runner import SubprocessCommandRunner
from gobinary.adapters.tar_gz_extractor import TarGzExtractor
from gobinary.domain.settings import InstallerEnvironment
from gobinary.usecases.asset_fetcher import AssetFetcher
from gobinary.usecases.binary_installer import BinaryInstaller
from gobinary.usecases.installation_path_resolver import InstallationPathResolver
from gobinary.usecases.manifest_loader import ManifestLoader
from gobinary.usecases.release_asset_resolver import ReleaseAssetResolver


def create_http_client() -> httpx.Client:
    """Create the httpx client shared by one invocation.

    Redirects are followed for asset downloads and no timeout is applied,
    so a stalled request waits indefinitely.
    """
    return httpx.Client(timeout=None, follow_redirects=True)


def create_installer(
    environment: InstallerEnvironment,
    client: httpx.Client | None = None,
) -> BinaryInstaller:
    """Create a BinaryInstaller backed by real platform, subprocess, HTTP and tar I/O.

    Args:
        environment: Invocation environment (working directory and variables).
        client: Optional httpx.Client reused for every request. If not
            provided, a new client is created per request.

    Returns:
        A fully wired BinaryInstaller.

    Example:
        >>> with create_http_client() as client:  # doctest: +SKIP
        ...     result = create_installer(InstallerEnvironment.from_process(), client).install()
    """
    http_client = HttpxReleaseClient(client=client)
    return BinaryInstaller(
        environment=environment,
        platform_detector=OsPlatformDetector(),
        manifest_loader=ManifestLoader(environment),
        asset_resolver=ReleaseAssetResolver(
            http_client,
            api_url=environment.api_url,
            token=environment.token,
        ),
        fetcher=AssetFetcher(http_client, TarGzExtractor()),
        path_resolver=InstallationPathResolver.default(
            environment, SubprocessCommandRunner()
        ),
    )
