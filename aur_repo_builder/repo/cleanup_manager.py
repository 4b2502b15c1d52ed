"""
Cleanup Manager Module - Housekeeping of the AUR clone cache
"""

import shutil
import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


class CleanupManager:
    """Removes cached clones of packages that are no longer declared"""

    def __init__(self, clone_dir):
        self.clone_dir = Path(clone_dir)

    def cleanup_aur_cache(self, declared_packages: Iterable[str]) -> List[str]:
        """
        Remove clone directories whose name is not a declared package.

        Failures are logged and skipped; nothing here stops the run.

        Returns:
            Names of the removed clone directories
        """
        logger.info("Cleaning up AUR cache...")
        declared = set(declared_packages)
        removed = []

        try:
            entries = sorted(self.clone_dir.iterdir())
        except FileNotFoundError:
            logger.debug(f"AUR cache directory does not exist: {self.clone_dir}")
            return removed
        except OSError as e:
            logger.warning(f"⚠️ Could not list AUR cache {self.clone_dir}: {e}")
            return removed

        for entry in entries:
            if not entry.is_dir() or entry.name in declared:
                continue

            logger.warning(f"Removing unused AUR clone: {entry.name}")
            try:
                shutil.rmtree(entry)
            except OSError as e:
                logger.error(f"Failed to remove {entry.name}: {e}")
                continue
            removed.append(entry.name)

        return removed
