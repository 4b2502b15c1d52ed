"""
Artifact manager - handles package files and artifacts
"""

import os
import shutil
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from aur_repo_builder import config
from aur_repo_builder.common.logging_utils import log_success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuiltArtifact:
    package_name: str
    file_name: str
    path: Path


class ArtifactManager:
    """Moves built package files from a clone directory into the repository"""

    def __init__(self, output_dir):
        self.output_dir = Path(output_dir)

    @staticmethod
    def find_package_files(source_dir) -> List[Path]:
        """Package archives makepkg left in source_dir, sorted by name"""
        found = []
        for entry in Path(source_dir).iterdir():
            if entry.is_file() and entry.name.endswith(config.PACKAGE_SUFFIXES):
                found.append(entry)
        return sorted(found)

    def collect(self, package_name: str, package_files: List[Path]) -> List[BuiltArtifact]:
        """
        Copy each package file into the output directory and delete the source.

        A file that cannot be copied is logged and left out of the result;
        the remaining files are still processed.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        artifacts = []

        for src in package_files:
            dest = self.output_dir / src.name
            try:
                self._copy_into_place(src, dest)
            except OSError as e:
                logger.error(f"Failed to copy {src.name}: {e}")
                continue

            log_success(logger, f"Packaged: {src.name}")
            artifacts.append(BuiltArtifact(package_name=package_name, file_name=src.name, path=dest))

            try:
                src.unlink()
            except OSError as e:
                logger.error(f"Failed to remove artifact: {src.name} ({e})")

        return artifacts

    @staticmethod
    def _copy_into_place(src: Path, dest: Path):
        """Copy next to dest, then rename over it so a published file is never left half written"""
        partial = dest.with_name(f".{dest.name}.part")
        try:
            shutil.copyfile(src, partial)
            os.replace(partial, dest)
        except OSError:
            if partial.exists():
                partial.unlink()
            raise
