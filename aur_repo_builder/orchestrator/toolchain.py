"""
Toolchain - the external programs a build run depends on
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from aur_repo_builder.build.artifact_manager import ArtifactManager, BuiltArtifact
from aur_repo_builder.build.aur_builder import AURBuilder
from aur_repo_builder.build.dependency_installer import DependencyInstaller
from aur_repo_builder.common.shell_executor import ShellExecutor
from aur_repo_builder.orchestrator.state import RunContext
from aur_repo_builder.repo.database_manager import DatabaseManager
from aur_repo_builder.scm.git_client import GitClient


class Toolchain(ABC):
    """One method per external capability used by the orchestrator"""

    @abstractmethod
    def fetch_source(self, pkg_name: str) -> Path:
        """Clone or update the recipe; raises FetchError"""

    @abstractmethod
    def install_dependencies(self, pkg_dir: Path) -> List[str]:
        """Install the recipe's makedepends; raises BuildError"""

    @abstractmethod
    def build(self, pkg_name: str, pkg_dir: Path) -> List[BuiltArtifact]:
        """Build the recipe and move its packages into the repository; raises BuildError"""

    @abstractmethod
    def index_database(self, file_names: List[str]) -> bool:
        """Add package files to the repository database; raises DatabaseError"""


class SystemToolchain(Toolchain):
    """Toolchain backed by git, pacman, makepkg and repo-add"""

    def __init__(self, context: RunContext, shell_executor: ShellExecutor = None):
        self.shell_executor = shell_executor or ShellExecutor()
        self.git_client = GitClient(context.clone_dir, self.shell_executor)
        self.dependency_installer = DependencyInstaller(self.shell_executor)
        self.artifact_manager = ArtifactManager(context.arch_dir)
        self.aur_builder = AURBuilder(self.shell_executor, self.dependency_installer, self.artifact_manager)
        self.database_manager = DatabaseManager(context.repo.repo_name, context.arch_dir, self.shell_executor)

    def fetch_source(self, pkg_name: str) -> Path:
        return self.git_client.fetch(pkg_name)

    def install_dependencies(self, pkg_dir: Path) -> List[str]:
        return self.aur_builder.install_dependencies(pkg_dir.name, pkg_dir)

    def build(self, pkg_name: str, pkg_dir: Path) -> List[BuiltArtifact]:
        return self.aur_builder.build_package(pkg_name, pkg_dir)

    def index_database(self, file_names: List[str]) -> bool:
        return self.database_manager.update_database(file_names)
