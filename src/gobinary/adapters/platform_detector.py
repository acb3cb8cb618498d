"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module and translating its
answers into Go's GOOS/GOARCH names.
"""

from __future__ import annotations

import platform

from gobinary.domain.binary import GoArch, GoOS, Platform
from gobinary.domain.exceptions import UnsupportedPlatformError


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Implements PlatformDetectorPort by querying platform.system() and
    platform.machine() to determine the current OS and architecture.

    Machine type mappings:
        - i386, i686, x86 -> 386
        - x86_64, AMD64, x64 -> amd64
        - arm, armv6l, armv7l -> arm
        - aarch64, arm64 -> arm64
    """

    # Mapping from platform.machine() values to Go's $GOARCH
    ARCH_MAPPING: dict[str, GoArch] = {
        "i386": "386",
        "i686": "386",
        "x86": "386",
        "x86_64": "amd64",
        "amd64": "amd64",
        "x64": "amd64",
        "arm": "arm",
        "armv6l": "arm",
        "armv7l": "arm",
        "aarch64": "arm64",
        "arm64": "arm64",
    }

    # Mapping from platform.system() values to Go's $GOOS
    PLATFORM_MAPPING: dict[str, GoOS] = {
        "darwin": "darwin",
        "linux": "linux",
        "windows": "windows",
        "freebsd": "freebsd",
    }

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.

        Raises:
            UnsupportedPlatformError: If the current OS or architecture is not supported.
        """
        return self.resolve(system=platform.system(), machine=platform.machine())

    def resolve(self, system: str, machine: str) -> Platform:
        """Translate raw platform identifiers into a Platform.

        The architecture is checked first, matching the order users see
        errors reported in.

        Args:
            system: Value in the shape of platform.system(), e.g. 'Linux'.
            machine: Value in the shape of platform.machine(), e.g. 'x86_64'.

        Returns:
            Platform value object.

        Raises:
            UnsupportedPlatformError: If either identifier is not mapped.
        """
        arch = self.ARCH_MAPPING.get(machine.lower())
        if arch is None:
            raise UnsupportedPlatformError(
                f"Installation is not supported for this architecture: {machine}"
            )

        os_name = self.PLATFORM_MAPPING.get(system.lower())
        if os_name is None:
            raise UnsupportedPlatformError(
                f"Installation is not supported for this platform: {system}"
            )

        return Platform(os=os_name, arch=arch)
