"""
Run context shared by every stage of a build run
"""

from dataclasses import dataclass
from pathlib import Path

from aur_repo_builder import config
from aur_repo_builder.common.config_loader import RepositoryConfig


@dataclass(frozen=True)
class RunContext:
    """Immutable settings of one run, built once at startup"""
    repo: RepositoryConfig
    build_dir: Path
    clone_dir: Path
    template_dir: Path
    arch: str = config.ARCH

    @classmethod
    def create(cls, repo: RepositoryConfig, env_config: dict, base_dir=None) -> "RunContext":
        """Resolve directories from ConfigLoader.load_environment_config() output"""
        base = Path(base_dir) if base_dir else Path.cwd()
        return cls(
            repo=repo,
            build_dir=base / env_config['build_dir'],
            clone_dir=base / env_config['aur_clone_dir'],
            template_dir=base / env_config['template_dir'],
        )

    @property
    def arch_dir(self) -> Path:
        return self.build_dir / self.arch

    @property
    def db_file(self) -> str:
        return f"{self.repo.repo_name}.db.tar.gz"

    @property
    def db_path(self) -> Path:
        return self.arch_dir / self.db_file
