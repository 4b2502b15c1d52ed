"""
Build module for package building operations
"""

from .artifact_manager import ArtifactManager, BuiltArtifact
from .aur_builder import AURBuilder
from .build_tracker import BuildTracker
from .dependency_installer import DependencyInstaller
from .version_manager import (
    BuildDecision,
    Decision,
    DecisionReason,
    Version,
    VersionInfo,
    VersionManager,
    decide,
)

__all__ = [
    'ArtifactManager',
    'BuiltArtifact',
    'AURBuilder',
    'BuildTracker',
    'DependencyInstaller',
    'BuildDecision',
    'Decision',
    'DecisionReason',
    'Version',
    'VersionInfo',
    'VersionManager',
    'decide',
]
