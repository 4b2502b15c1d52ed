"""
Version Tracker Module - Reads indexed package versions from the repository database
"""

import tarfile
import zlib
import logging
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple

from aur_repo_builder.build.version_manager import Version
from aur_repo_builder.common.errors import VersionParseError

logger = logging.getLogger(__name__)


class VersionTracker:
    """
    Looks up package versions in ``<repo>.db.tar.gz`` without extracting it.

    The database holds one top-level directory per package named
    ``<name>-<pkgver>-<pkgrel>`` with a ``desc`` file inside. Only the
    directory names are needed. A missing or damaged database means no
    package is indexed yet.
    """

    def __init__(self, db_path):
        self.db_path = Path(db_path)

    def _iter_entry_dirs(self) -> Iterator[str]:
        """Yield `<name>-<version>` directory names of every desc entry"""
        if not self.db_path.is_file():
            return

        try:
            with tarfile.open(self.db_path, 'r|gz') as tar:
                for member in tar:
                    parts = member.name.strip('/').split('/')
                    if len(parts) >= 2 and parts[1] == 'desc':
                        yield parts[0]
        except (tarfile.TarError, OSError, EOFError, zlib.error) as e:
            logger.warning(f"⚠️ Could not read repository database {self.db_path.name}: {e}")

    @staticmethod
    def split_entry(entry_name: str, pkg_name: str) -> Optional[str]:
        """
        Return the version part of entry_name if it belongs to pkg_name.

        The remainder after `<pkg_name>-` must be exactly `<pkgver>-<pkgrel>`,
        so `foo` does not match the entry of `foo-git`.
        """
        prefix = f"{pkg_name}-"
        if not entry_name.startswith(prefix):
            return None

        remainder = entry_name[len(prefix):]
        if remainder.count('-') != 1:
            return None

        try:
            return str(Version.parse(remainder))
        except VersionParseError:
            return None

    @staticmethod
    def parse_entry(entry_name: str) -> Tuple[Optional[str], Optional[str]]:
        """Split `<name>-<pkgver>-<pkgrel>` into (name, version)"""
        parts = entry_name.rsplit('-', 2)
        if len(parts) != 3 or not all(parts):
            return None, None
        return parts[0], f"{parts[1]}-{parts[2]}"

    def get_repo_version(self, pkg_name: str) -> Optional[str]:
        """
        Get the version of pkg_name currently in the database.

        Returns:
            `<pkgver>-<pkgrel>` (with epoch if any) or None when not indexed
        """
        for entry_name in self._iter_entry_dirs():
            version = self.split_entry(entry_name, pkg_name)
            if version:
                return version
        return None

    def list_repo_packages(self) -> Dict[str, str]:
        """Map every indexed package name to its version"""
        packages = {}
        for entry_name in self._iter_entry_dirs():
            name, version = self.parse_entry(entry_name)
            if name and name not in packages:
                packages[name] = version
        return packages
