"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
actual OS/architecture detection.
"""

from __future__ import annotations

from gobinary.domain.binary import GoArch, GoOS, Platform


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Example:
        >>> fake = FakePlatformDetector(Platform(os="linux", arch="amd64"))
        >>> fake.detect()
        Platform(os='linux', arch='amd64')

        >>> fake = FakePlatformDetector.from_tuple("windows", "386")
        >>> fake.detect()
        Platform(os='windows', arch='386')
    """

    def __init__(self, platform: Platform | None = None) -> None:
        """Initialize with the platform to return.

        Args:
            platform: The Platform to return from detect(). Defaults to linux/amd64.
        """
        self._platform = platform or Platform(os="linux", arch="amd64")
        self._exception: BaseException | None = None

    @classmethod
    def from_tuple(cls, os: GoOS, arch: GoArch) -> FakePlatformDetector:
        """Create a FakePlatformDetector from OS and architecture strings.

        Args:
            os: Go operating system name.
            arch: Go architecture name.

        Returns:
            FakePlatformDetector configured with the specified platform.
        """
        return cls(Platform(os=os, arch=arch))

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from detect(), or None to clear."""
        self._exception = exception

    def detect(self) -> Platform:
        """Return the configured platform or raise the configured exception."""
        if self._exception is not None:
            raise self._exception
        return self._platform
