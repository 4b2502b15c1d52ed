"""
AUR Builder Module - Handles AUR package building logic
"""

import logging
from pathlib import Path
from typing import List

from aur_repo_builder import config
from aur_repo_builder.build.artifact_manager import ArtifactManager, BuiltArtifact
from aur_repo_builder.build.dependency_installer import DependencyInstaller
from aur_repo_builder.common.errors import BuildError
from aur_repo_builder.common.shell_executor import ShellExecutor

logger = logging.getLogger(__name__)


class AURBuilder:
    """Runs makepkg for a cloned recipe and harvests the produced packages"""

    def __init__(self, shell_executor: ShellExecutor, dependency_installer: DependencyInstaller,
                 artifact_manager: ArtifactManager, build_flags: List[str] = None):
        self.shell_executor = shell_executor
        self.dependency_installer = dependency_installer
        self.artifact_manager = artifact_manager
        self.build_flags = list(build_flags or config.MAKEPKG_BUILD_FLAGS)

    def install_dependencies(self, pkg_name: str, pkg_dir: Path) -> List[str]:
        """Install makedepends, tagging failures with the package name"""
        try:
            return self.dependency_installer.install_build_dependencies(Path(pkg_dir))
        except BuildError as e:
            raise BuildError(f"Build failed for {pkg_name}: {e}", pkg_name) from e

    def run_makepkg(self, pkg_name: str, pkg_dir: Path):
        """
        Run makepkg with output streamed to the console.

        Raises:
            BuildError: makepkg could not be started or exited non-zero
        """
        logger.info("   Building...")
        try:
            result = self.shell_executor.run_command(
                ['makepkg'] + self.build_flags,
                cwd=pkg_dir,
                capture=False
            )
        except OSError as e:
            raise BuildError(f"Build failed for {pkg_name}: {e}", pkg_name) from e

        if result.returncode != 0:
            logger.error(f"❌ Build failed with exit code: {result.returncode}")
            raise BuildError(f"Build failed for {pkg_name}: Makepkg returned error.", pkg_name)

    def build_package(self, pkg_name: str, pkg_dir: Path) -> List[BuiltArtifact]:
        """
        Build an AUR package whose makedepends are already installed.

        Args:
            pkg_name: AUR package name
            pkg_dir: Directory containing the cloned recipe

        Returns:
            Artifacts copied into the output directory

        Raises:
            BuildError: makepkg or artifact harvesting failed
        """
        pkg_dir = Path(pkg_dir)
        logger.info(f"🔨 Building AUR package {pkg_name}...")

        self.run_makepkg(pkg_name, pkg_dir)

        package_files = self.artifact_manager.find_package_files(pkg_dir)
        if not package_files:
            logger.error(f"❌ No package files created for {pkg_name}")
            raise BuildError(f"No package files found after build for {pkg_name}", pkg_name)

        artifacts = self.artifact_manager.collect(pkg_name, package_files)
        logger.info(f"✅ Successfully built {pkg_name}: {len(artifacts)}/{len(package_files)} package(s) copied")
        return artifacts
