"""Domain exceptions.

Exception hierarchy:
- GoBinaryError: Base exception for every failure of an install or uninstall.
  - UnsupportedPlatformError
  - ManifestNotFoundError
  - ManifestParseError
  - InvalidConfigurationError
  - MissingTokenError
  - ReleaseQueryFailedError
  - ReleaseNotFoundError
  - AssetNotFoundError
  - DownloadFailedError
  - BinaryMissingFromArchiveError
  - InstallPathResolutionFailedError
  - BinaryPlacementError

All of them are terminal for the current invocation. Nothing is retried.
"""

from __future__ import annotations


class GoBinaryError(Exception):
    """Base exception for gobinary failures.

    The message is the single line reported to the user on standard error.
    """

    pass


class UnsupportedPlatformError(GoBinaryError):
    """Raised when the OS or CPU architecture has no Go equivalent."""

    pass


class ManifestNotFoundError(GoBinaryError):
    """Raised when package.json is absent from the working directory."""

    pass


class ManifestParseError(GoBinaryError):
    """Raised when package.json is not valid JSON."""

    pass


class InvalidConfigurationError(GoBinaryError):
    """Raised when the goBinary descriptor fails validation.

    Attributes:
        message: Human-readable error description.
        field: Name of the manifest property that failed validation.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class MissingTokenError(GoBinaryError):
    """Raised when ``auth`` is enabled but no token is in the environment."""

    pass


class ReleaseQueryFailedError(GoBinaryError):
    """Raised when listing releases fails.

    Attributes:
        message: Human-readable error description.
        url: The releases URL that was requested.
        status_code: HTTP status code, if a response was received.
        original_error: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class ReleaseNotFoundError(GoBinaryError):
    """Raised when no release carries the requested tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Release with tag {tag} not found")
        self.tag = tag


class AssetNotFoundError(GoBinaryError):
    """Raised when the release has no asset with the rendered asset name."""

    def __init__(self, asset_name: str) -> None:
        super().__init__(f"Asset with name {asset_name} not found")
        self.asset_name = asset_name


class DownloadFailedError(GoBinaryError):
    """Raised when downloading, decompressing or unpacking the asset fails.

    Attributes:
        message: Human-readable error description.
        url: The asset URL that was requested (optional).
        status_code: HTTP status code, if a response was received.
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class BinaryMissingFromArchiveError(GoBinaryError):
    """Raised when the extracted archive lacks the configured binary."""

    def __init__(self, bin_name: str) -> None:
        super().__init__(
            "Downloaded binary does not contain the binary specified in "
            f"configuration - {bin_name}"
        )
        self.bin_name = bin_name


class InstallPathResolutionFailedError(GoBinaryError):
    """Raised when no strategy could determine the installation directory."""

    pass


class BinaryPlacementError(GoBinaryError):
    """Raised when the binary cannot be moved into the installation directory."""

    pass
