"""Use cases: Application logic layer."""

from gobinary.usecases.asset_fetcher import AssetFetcher
from gobinary.usecases.binary_installer import (
    BinaryInstaller,
    InstallResult,
    UninstallResult,
)
from gobinary.usecases.binary_placer import BinaryPlacer
from gobinary.usecases.installation_path_resolver import (
    InstallationPathResolver,
    LocalBinStrategy,
    PackageManagerBinStrategy,
    PrefixEnvironmentStrategy,
)
from gobinary.usecases.manifest_loader import ManifestLoader, validate_configuration
from gobinary.usecases.release_asset_resolver import ReleaseAssetResolver, ResolvedAsset

__all__ = [
    "AssetFetcher",
    "BinaryInstaller",
    "BinaryPlacer",
    "InstallResult",
    "InstallationPathResolver",
    "LocalBinStrategy",
    "ManifestLoader",
    "PackageManagerBinStrategy",
    "PrefixEnvironmentStrategy",
    "ReleaseAssetResolver",
    "ResolvedAsset",
    "UninstallResult",
    "validate_configuration",
]
