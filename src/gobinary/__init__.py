"""gobinary: Install Go release binaries from GitHub as an npm post-install hook."""

__version__ = "0.1.0"

from gobinary.domain.exceptions import GoBinaryError
from gobinary.domain.settings import InstallerEnvironment
from gobinary.factories import create_installer
from gobinary.usecases.binary_installer import BinaryInstaller, InstallResult, UninstallResult

__all__ = [
    "BinaryInstaller",
    "GoBinaryError",
    "InstallResult",
    "InstallerEnvironment",
    "UninstallResult",
    "create_installer",
]
