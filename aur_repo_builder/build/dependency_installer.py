"""
Dependency Installer Module - Installs build-time dependencies of a recipe
"""

import logging
from pathlib import Path
from typing import List

from aur_repo_builder.common.errors import BuildError
from aur_repo_builder.common.shell_executor import ShellExecutor

logger = logging.getLogger(__name__)


class DependencyInstaller:
    """Extracts makedepends from a build recipe and installs them with pacman"""

    def __init__(self, shell_executor: ShellExecutor):
        self.shell_executor = shell_executor

    @staticmethod
    def parse_makedepends(srcinfo_content: str) -> List[str]:
        """Collect values of `makedepends = <name>` lines from .SRCINFO text"""
        makedepends = []
        for line in srcinfo_content.splitlines():
            line = line.strip()
            if not line or '=' not in line:
                continue
            key, value = line.split('=', 1)
            if key.strip() == 'makedepends':
                value = value.strip()
                if value and value not in makedepends:
                    makedepends.append(value)
        return makedepends

    def extract_makedepends(self, pkg_dir: Path) -> List[str]:
        """
        Run `makepkg --printsrcinfo` in the recipe directory and parse it.

        Raises:
            BuildError: makepkg could not print the recipe metadata
        """
        try:
            result = self.shell_executor.run_command(
                ['makepkg', '--printsrcinfo'],
                cwd=pkg_dir,
                capture=True
            )
        except OSError as e:
            raise BuildError(f"Failed to extract makedepends: {e}", Path(pkg_dir).name) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise BuildError(f"Failed to extract makedepends: {stderr[:500]}", Path(pkg_dir).name)

        return self.parse_makedepends(result.stdout or "")

    def install_packages(self, packages: List[str]):
        """
        Install packages in one non-interactive pacman transaction.

        Raises:
            BuildError: pacman exited non-zero
        """
        if not packages:
            return

        logger.info(f"DEP_INSTALL_START=1 count={len(packages)}")
        logger.info(f"  Installing: {' '.join(packages)}")
        try:
            result = self.shell_executor.run_command(
                ['sudo', 'pacman', '-S', '--noconfirm', '--needed'] + list(packages),
                capture=False,
                log_cmd=True
            )
        except OSError as e:
            raise BuildError(f"Failed to install build dependencies: {e}") from e

        if result.returncode != 0:
            logger.error(f"DEP_INSTALL_FAIL=1 exitcode={result.returncode}")
            raise BuildError("Failed to install build dependencies")

        logger.info(f"DEP_INSTALL_OK=1 count={len(packages)}")

    def install_build_dependencies(self, pkg_dir: Path) -> List[str]:
        """Extract and install makedepends; returns the installed names"""
        logger.info("Checking for build dependencies")
        makedepends = self.extract_makedepends(pkg_dir)
        if not makedepends:
            logger.info("No build dependencies found")
            return []

        self.install_packages(makedepends)
        return makedepends
