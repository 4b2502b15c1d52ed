"""
Config Loader Module - Handles configuration loading and validation
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

import yaml

from aur_repo_builder import config as defaults
from aur_repo_builder.common.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageSpec:
    name: str
    force: bool = False


@dataclass(frozen=True)
class RepositoryConfig:
    repo_name: str
    repo_url: str
    project_url: str
    packages: Tuple[PackageSpec, ...] = field(default_factory=tuple)

    @property
    def package_names(self) -> List[str]:
        return [pkg.name for pkg in self.packages]


class ConfigLoader:
    """Handles configuration loading and validation"""

    REQUIRED_META = (
        ('repo-name', 'repo_name'),
        ('repo-url', 'repo_url'),
        ('project-url', 'project_url'),
    )

    @staticmethod
    def load_environment_config() -> Dict:
        """Load directory and mode settings from environment variables"""
        debug_value = os.getenv('DEBUG_MODE', '').strip().lower()
        return {
            'config_file': os.getenv('CONFIG_FILE') or defaults.CONFIG_FILE_NAME,
            'build_dir': os.getenv('BUILD_DIR') or defaults.BUILD_DIR,
            'aur_clone_dir': os.getenv('AUR_CLONE_DIR') or defaults.AUR_CLONE_DIR,
            'template_dir': os.getenv('TEMPLATE_DIR') or defaults.TEMPLATE_DIR,
            'log_file': os.getenv('LOG_FILE') or None,
            'debug_mode': debug_value in ('1', 'true', 'yes'),
            'ci': bool(os.getenv('CI')),
        }

    @staticmethod
    def load_config(path) -> RepositoryConfig:
        """
        Load and validate the package list document.

        Args:
            path: Path to the YAML package list

        Returns:
            RepositoryConfig

        Raises:
            ConfigError: file missing, YAML malformed, or required fields empty
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Package file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping at top level")

        meta = data.get('meta') or {}
        if not isinstance(meta, dict):
            raise ConfigError("'meta' must be a mapping")

        values = {}
        for key, attr in ConfigLoader.REQUIRED_META:
            value = meta.get(key)
            if value is None or not str(value).strip():
                raise ConfigError(f"meta.{key} is required")
            values[attr] = str(value).strip()

        packages = ConfigLoader._parse_packages(data.get('packages'))

        repo_config = RepositoryConfig(packages=tuple(packages), **values)
        logger.info(f"CONFIG_LOADED repo={repo_config.repo_name} packages={len(packages)}")
        return repo_config

    @staticmethod
    def _parse_packages(section) -> List[PackageSpec]:
        """Parse packages.aur into PackageSpec entries, keeping declaration order"""
        if section is None:
            return []
        if not isinstance(section, dict):
            raise ConfigError("'packages' must be a mapping")

        entries = section.get('aur') or []
        if not isinstance(entries, list):
            raise ConfigError("'packages.aur' must be a list")

        specs = []
        seen = set()
        for index, entry in enumerate(entries):
            # Bare strings are accepted as shorthand for {name: ...}
            if isinstance(entry, str):
                entry = {'name': entry}
            if not isinstance(entry, dict):
                raise ConfigError(f"packages.aur[{index}] must be a mapping")

            name = entry.get('name')
            if name is None or not str(name).strip():
                raise ConfigError(f"packages.aur[{index}] has no name")
            name = str(name).strip()

            force = entry.get('force', False)
            if force is None:
                force = False
            if not isinstance(force, bool):
                raise ConfigError(f"packages.aur[{index}].force must be true or false")

            if name in seen:
                raise ConfigError(f"Package declared twice: {name}")
            seen.add(name)

            specs.append(PackageSpec(name=name, force=force))

        return specs


def load_config(path) -> RepositoryConfig:
    """Shortcut for ConfigLoader.load_config"""
    return ConfigLoader.load_config(path)
