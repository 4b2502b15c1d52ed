"""
Build Tracker Module - Tracks build progress and statistics
"""

import time
from typing import Dict, List
import logging

from aur_repo_builder.build.artifact_manager import BuiltArtifact

logger = logging.getLogger(__name__)


class BuildTracker:
    """Tracks built, skipped and failed packages for the final summary"""

    def __init__(self):
        self.built_packages: List[str] = []
        self.skipped_packages: List[str] = []
        self.failed_packages: Dict[str, str] = {}
        self.artifacts: List[BuiltArtifact] = []

        self.start_time = time.time()

    def record_built_package(self, pkg_name: str, artifacts: List[BuiltArtifact]):
        """Record a successfully built package and the files it produced"""
        self.built_packages.append(pkg_name)
        self.artifacts.extend(artifacts)
        logger.debug(f"BUILD_RECORDED pkg={pkg_name} files={len(artifacts)}")

    def record_failed_package(self, pkg_name: str, reason: str):
        """Record a package whose fetch or build failed"""
        self.failed_packages[pkg_name] = reason
        logger.debug(f"FAILURE_RECORDED pkg={pkg_name}")

    def record_skipped_package(self, pkg_name: str):
        """Record a skipped package (already up-to-date)"""
        self.skipped_packages.append(pkg_name)

    @property
    def artifact_file_names(self) -> List[str]:
        return [artifact.file_name for artifact in self.artifacts]

    @property
    def failed_count(self) -> int:
        return len(self.failed_packages)

    def get_elapsed_time(self) -> float:
        """Get elapsed time since tracking started"""
        return time.time() - self.start_time

    def get_summary(self) -> Dict:
        """Get build summary statistics"""
        return {
            "elapsed": self.get_elapsed_time(),
            "built": len(self.built_packages),
            "artifacts": len(self.artifacts),
            "skipped": len(self.skipped_packages),
            "failed": self.failed_count,
        }
