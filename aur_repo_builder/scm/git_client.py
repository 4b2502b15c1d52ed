"""
Git Client Module - Clones and updates AUR build recipes
"""

import logging
from pathlib import Path

from aur_repo_builder import config
from aur_repo_builder.common.errors import FetchError
from aur_repo_builder.common.shell_executor import ShellExecutor

logger = logging.getLogger(__name__)


class GitClient:
    """Handles Git operations for the AUR clone cache"""

    def __init__(self, clone_dir, shell_executor: ShellExecutor, url_template: str = config.AUR_GIT_URL):
        self.clone_dir = Path(clone_dir)
        self.shell_executor = shell_executor
        self.url_template = url_template

    def package_dir(self, pkg_name: str) -> Path:
        return self.clone_dir / pkg_name

    def clone_repository(self, pkg_name: str, target_dir: Path):
        """Fresh clone of the package's recipe repository"""
        url = self.url_template.format(pkg_name=pkg_name)
        logger.info("  Cloning from AUR")
        self._run(['git', 'clone', '--quiet', url, str(target_dir)], pkg_name, "git clone")

    def pull_latest(self, pkg_name: str, repo_dir: Path):
        """Fast-forward an existing clone"""
        logger.info("  Updating cache")
        self._run(['git', '-C', str(repo_dir), 'pull', '--quiet'], pkg_name, "git pull")

    def fetch(self, pkg_name: str) -> Path:
        """
        Clone or update the recipe for pkg_name.

        Returns:
            Path of the package clone directory

        Raises:
            FetchError: git failed or the clone has no PKGBUILD
        """
        pkg_dir = self.package_dir(pkg_name)
        if pkg_dir.exists():
            self.pull_latest(pkg_name, pkg_dir)
        else:
            self.clone_dir.mkdir(parents=True, exist_ok=True)
            self.clone_repository(pkg_name, pkg_dir)

        if not (pkg_dir / config.PKGBUILD_FILE).is_file():
            raise FetchError(f"no PKGBUILD found for {pkg_name}", pkg_name)

        return pkg_dir

    def _run(self, cmd, pkg_name: str, label: str):
        try:
            result = self.shell_executor.run_command(cmd, capture=True)
        except OSError as e:
            raise FetchError(f"{label} failed: {e}", pkg_name) from e

        if result.returncode != 0:
            output = ((result.stdout or "") + (result.stderr or "")).strip()
            raise FetchError(f"{label} failed: {output}", pkg_name)
