"""Binary-related domain value objects.

This module contains value objects describing the binary to install: the
target platform in Go's naming, the ``goBinary`` descriptor read from the
manifest, and the resolved install options derived from both.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Mapping

from gobinary.domain.exceptions import UnsupportedPlatformError

GoOS = Literal["darwin", "linux", "windows", "freebsd"]
GoArch = Literal["386", "amd64", "arm", "arm64"]

SUPPORTED_OS: tuple[str, ...] = ("darwin", "linux", "windows", "freebsd")
SUPPORTED_ARCH: tuple[str, ...] = ("386", "amd64", "arm", "arm64")

# Placeholders understood inside the assetName template
ARCH_PLACEHOLDER = "{{arch}}"
PLATFORM_PLACEHOLDER = "{{platform}}"
VERSION_PLACEHOLDER = "{{version}}"
BIN_NAME_PLACEHOLDER = "{{bin_name}}"

WINDOWS_EXECUTABLE_SUFFIX = ".exe"


@dataclass(frozen=True)
class Platform:
    """Platform value object using Go's ``GOOS``/``GOARCH`` vocabulary.

    Attributes:
        os: Operating system, one of darwin, linux, windows, freebsd.
        arch: Architecture, one of 386, amd64, arm, arm64.
    """

    os: GoOS
    arch: GoArch

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        self._validate_arch()
        self._validate_os()

    def _validate_arch(self) -> None:
        if self.arch not in SUPPORTED_ARCH:
            raise UnsupportedPlatformError(
                f"Installation is not supported for this architecture: {self.arch}"
            )

    def _validate_os(self) -> None:
        if self.os not in SUPPORTED_OS:
            raise UnsupportedPlatformError(
                f"Installation is not supported for this platform: {self.os}"
            )

    @property
    def is_windows(self) -> bool:
        """Return True when binaries need the ``.exe`` suffix."""
        return self.os == "windows"

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


@dataclass(frozen=True)
class BinaryDistribution:
    """The ``goBinary`` descriptor from package.json.

    Immutable once loaded. Field presence is checked by the manifest
    validator before construction.

    Attributes:
        name: Executable base name, without any platform suffix.
        path: Directory the archive is extracted into, usually relative.
        version: Release version, optionally prefixed with ``v``.
        owner: Repository owner on the release host.
        repo: Repository name on the release host.
        asset_name: Asset name template with ``{{...}}`` placeholders.
        auth: Whether requests must carry the token from the environment.
    """

    name: str
    path: str
    version: str
    owner: str
    repo: str
    asset_name: str
    auth: bool = False

    @classmethod
    def from_manifest(cls, descriptor: Mapping[str, Any]) -> BinaryDistribution:
        """Build a descriptor from an already validated ``goBinary`` mapping.

        Args:
            descriptor: The ``goBinary`` object from package.json.

        Returns:
            BinaryDistribution instance.
        """
        return cls(
            name=str(descriptor["name"]),
            path=str(descriptor["path"]),
            version=str(descriptor["version"]),
            owner=str(descriptor["owner"]),
            repo=str(descriptor["repo"]),
            asset_name=str(descriptor["assetName"]),
            auth=bool(descriptor.get("auth", False)),
        )


@dataclass(frozen=True)
class InstallOptions:
    """Install options resolved for the current platform.

    Lives for a single invocation and is never mutated.

    Attributes:
        bin_name: Executable file name, ``.exe`` suffixed on windows.
        bin_path: Absolute extraction directory.
        version: Version with any leading ``v`` removed.
        owner: Repository owner on the release host.
        repo: Repository name on the release host.
        asset_name: Fully rendered asset name.
        auth: Whether requests must carry a token.
        platform: The platform the options were resolved for.
    """

    bin_name: str
    bin_path: Path
    version: str
    owner: str
    repo: str
    asset_name: str
    auth: bool
    platform: Platform

    @property
    def tag(self) -> str:
        """Release tag the version is published under."""
        return f"v{self.version}"


def strip_version_prefix(version: str) -> str:
    """Strip a single leading ``v``: ``v0.0.1`` becomes ``0.0.1``."""
    if version.startswith("v"):
        return version[1:]
    return version


def render_asset_name(
    template: str,
    *,
    arch: str,
    platform: str,
    version: str,
    bin_name: str,
) -> str:
    """Replace every placeholder occurrence in an asset name template.

    Matching is case-sensitive and global. Text without placeholders is
    returned unchanged, so rendering an already rendered name is a no-op.

    Args:
        template: Asset name template, e.g. ``mytool-{{platform}}-{{arch}}``.
        arch: Value for ``{{arch}}``.
        platform: Value for ``{{platform}}``.
        version: Value for ``{{version}}``.
        bin_name: Value for ``{{bin_name}}``.

    Returns:
        The rendered asset name.
    """
    rendered = template.replace(ARCH_PLACEHOLDER, arch)
    rendered = rendered.replace(PLATFORM_PLACEHOLDER, platform)
    rendered = rendered.replace(VERSION_PLACEHOLDER, version)
    return rendered.replace(BIN_NAME_PLACEHOLDER, bin_name)


def resolve_install_options(
    distribution: BinaryDistribution,
    platform: Platform,
    cwd: Path,
) -> InstallOptions:
    """Combine a descriptor with the detected platform.

    Args:
        distribution: Validated descriptor from the manifest.
        platform: Detected target platform.
        cwd: Directory relative extraction paths are anchored to.

    Returns:
        InstallOptions ready for the install pipeline.
    """
    version = strip_version_prefix(distribution.version)

    bin_name = distribution.name
    if platform.is_windows:
        bin_name += WINDOWS_EXECUTABLE_SUFFIX

    asset_name = render_asset_name(
        distribution.asset_name,
        arch=platform.arch,
        platform=platform.os,
        version=version,
        bin_name=bin_name,
    )

    return InstallOptions(
        bin_name=bin_name,
        bin_path=cwd / distribution.path,
        version=version,
        owner=distribution.owner,
        repo=distribution.repo,
        asset_name=asset_name,
        auth=distribution.auth,
        platform=platform,
    )
