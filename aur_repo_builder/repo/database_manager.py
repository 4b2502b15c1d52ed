"""
Database manager for repository database operations
"""

import logging
from pathlib import Path
from typing import List

from aur_repo_builder.common.errors import DatabaseError
from aur_repo_builder.common.logging_utils import log_success
from aur_repo_builder.common.shell_executor import ShellExecutor

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages repository database operations"""

    def __init__(self, repo_name: str, output_dir, shell_executor: ShellExecutor):
        self.repo_name = repo_name
        self.output_dir = Path(output_dir)
        self.shell_executor = shell_executor

    @property
    def db_file(self) -> str:
        return f"{self.repo_name}.db.tar.gz"

    @property
    def lock_file(self) -> Path:
        return self.output_dir / f"{self.db_file}.lck"

    def remove_stale_lock(self) -> bool:
        """Remove a lock left behind by a crashed run; returns True if one was removed"""
        if not self.lock_file.exists():
            return False

        logger.warning(f"Removing stale lock file: {self.lock_file}")
        try:
            self.lock_file.unlink()
        except OSError as e:
            logger.warning(f"Could not remove lock file {self.lock_file.name}: {e}")
            return False
        return True

    def remove_backup_files(self) -> List[Path]:
        """Delete *.old backups repo-add leaves in the output tree"""
        removed = []
        for backup in self.output_dir.rglob("*.old"):
            if not backup.is_file():
                continue
            try:
                backup.unlink()
                removed.append(backup)
            except OSError as e:
                logger.warning(f"Could not remove backup {backup.name}: {e}")
        logger.debug(f"DB_BACKUPS_REMOVED count={len(removed)}")
        return removed

    def update_database(self, package_files: List[str]) -> bool:
        """
        Add newly built package files to the repository database.

        Args:
            package_files: Bare file names inside the output directory

        Returns:
            True on success (including the nothing-to-do case)

        Raises:
            DatabaseError: repo-add exited non-zero
        """
        if not package_files:
            logger.info("No new packages to add to database.")
            return True

        logger.info(f"Updating repository database with {len(package_files)} new packages...")
        self.remove_stale_lock()

        try:
            result = self.shell_executor.run_command(
                ['repo-add', self.db_file] + list(package_files),
                cwd=self.output_dir,
                capture=False,
                log_cmd=True
            )
        except OSError as e:
            raise DatabaseError(f"Failed to run repo-add: {e}") from e

        if result.returncode != 0:
            logger.error("Failed to update database")
            raise DatabaseError(f"repo-add exited with status {result.returncode}")

        self.remove_backup_files()
        log_success(logger, "Repository database updated")
        return True
