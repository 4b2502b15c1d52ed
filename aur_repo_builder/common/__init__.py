"""
Common modules shared by every build stage
"""

from .config_loader import ConfigLoader, PackageSpec, RepositoryConfig, load_config
from .environment import validate_environment, prepare_directories
from .errors import (
    BuilderError,
    BuildError,
    ConfigError,
    DatabaseError,
    FetchError,
    NetworkError,
    ToolMissingError,
    VersionParseError,
)
from .logging_utils import setup_logging, log_success
from .shell_executor import ShellExecutor

__all__ = [
    'ConfigLoader',
    'PackageSpec',
    'RepositoryConfig',
    'load_config',
    'validate_environment',
    'prepare_directories',
    'BuilderError',
    'BuildError',
    'ConfigError',
    'DatabaseError',
    'FetchError',
    'NetworkError',
    'ToolMissingError',
    'VersionParseError',
    'setup_logging',
    'log_success',
    'ShellExecutor',
]
