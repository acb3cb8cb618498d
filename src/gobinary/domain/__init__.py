"""Domain layer: Entities with zero external dependencies."""

from gobinary.domain.binary import (
    BinaryDistribution,
    InstallOptions,
    Platform,
    render_asset_name,
    resolve_install_options,
)
from gobinary.domain.exceptions import GoBinaryError
from gobinary.domain.release import ApiRequest, Asset, Release
from gobinary.domain.settings import InstallerEnvironment

__all__ = [
    "ApiRequest",
    "Asset",
    "BinaryDistribution",
    "GoBinaryError",
    "InstallOptions",
    "InstallerEnvironment",
    "Platform",
    "Release",
    "render_asset_name",
    "resolve_install_options",
]
