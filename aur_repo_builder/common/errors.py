"""
Error types raised by the repository builder
"""

from typing import Optional


class BuilderError(Exception):
    """Base class for every error the builder raises on purpose"""


class ConfigError(BuilderError):
    """Package list is missing, malformed or lacks required metadata"""


class ToolMissingError(BuilderError):
    """A required external tool is not available on PATH"""


class NetworkError(BuilderError):
    """The AUR RPC lookup failed at transport level or returned an error status"""


class PackageError(BuilderError):
    """Failure scoped to a single package"""

    def __init__(self, message: str, package_name: Optional[str] = None):
        self.package_name = package_name
        super().__init__(message)


class FetchError(PackageError):
    """Cloning or updating the build recipe failed"""


class BuildError(PackageError):
    """Dependency installation, makepkg or artifact harvesting failed"""


class DatabaseError(BuilderError):
    """repo-add exited with a non-zero status"""


class VersionParseError(ValueError):
    """A version string does not have the <pkgver>-<pkgrel> shape"""
