"""Manifest loader use case for reading and validating the goBinary descriptor."""

from __future__ import annotations

import json
from typing import Any

from gobinary.domain.binary import BinaryDistribution
from gobinary.domain.exceptions import (
    InvalidConfigurationError,
    ManifestNotFoundError,
    ManifestParseError,
)
from gobinary.domain.settings import MANIFEST_KEY, InstallerEnvironment

# Required descriptor properties, in the order they are checked
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("version", "'version' property must be specified"),
    ("name", "'name' property is necessary"),
    ("path", "'path' property is necessary"),
    ("owner", "'owner' property is necessary"),
    ("repo", "'repo' property is necessary"),
    ("assetName", "'assetName' property is required"),
)


def validate_configuration(manifest: Any) -> tuple[str, str] | None:
    """Check a parsed package.json for a usable goBinary descriptor.

    The descriptor itself is checked before any of its fields, then each
    required field in turn; the first failure wins.

    Args:
        manifest: Decoded package.json content.

    Returns:
        ``(field, message)`` for the first failed check, or None if valid.
    """
    descriptor = manifest.get(MANIFEST_KEY) if isinstance(manifest, dict) else None
    if not isinstance(descriptor, dict):
        return MANIFEST_KEY, f"'{MANIFEST_KEY}' property must be defined and be an object"

    for field, message in REQUIRED_FIELDS:
        if not descriptor.get(field):
            return field, message

    return None


class ManifestLoader:
    """Use case for loading the binary distribution descriptor.

    Reads package.json from the invocation's working directory, decodes it,
    validates the goBinary descriptor and returns it as a BinaryDistribution.
    """

    def __init__(self, environment: InstallerEnvironment) -> None:
        """Initialize the manifest loader.

        Args:
            environment: Invocation environment providing the working directory.
        """
        self._environment = environment

    def load(self) -> BinaryDistribution:
        """Load and validate the descriptor.

        Returns:
            The validated BinaryDistribution.

        Raises:
            ManifestNotFoundError: If package.json does not exist.
            ManifestParseError: If package.json is not valid JSON.
            InvalidConfigurationError: If the descriptor fails validation.
        """
        manifest_path = self._environment.manifest_path
        if not manifest_path.is_file():
            raise ManifestNotFoundError(
                "Unable to find package.json. "
                "Please run this script at root of the package you want to be installed"
            )

        try:
            manifest = json.loads(manifest_path.read_bytes())
        except (ValueError, UnicodeDecodeError) as e:
            raise ManifestParseError(f"Unable to parse {manifest_path}: {e}") from e

        error = validate_configuration(manifest)
        if error is not None:
            field, message = error
            raise InvalidConfigurationError(f"Invalid package.json: {message}", field=field)

        return BinaryDistribution.from_manifest(manifest[MANIFEST_KEY])
