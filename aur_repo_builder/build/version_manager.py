"""
Version Manager Module - Version values and the build/skip decision
"""

import glob
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from aur_repo_builder.common.config_loader import PackageSpec
from aur_repo_builder.common.errors import VersionParseError
from aur_repo_builder.common.logging_utils import log_success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Version:
    """
    A package version of the form ``[epoch:]pkgver-pkgrel``.

    A version string must contain at least one ``-`` separator with
    non-empty text on both sides of the last one. The release is everything
    after the last separator.
    """
    pkgver: str
    pkgrel: str
    epoch: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "Version":
        if not value or value.count('-') < 1:
            raise VersionParseError(f"Invalid version '{value}': expected <pkgver>-<pkgrel>")

        head, pkgrel = value.rsplit('-', 1)
        epoch = None
        if ':' in head:
            epoch, head = head.split(':', 1)
            if not epoch:
                raise VersionParseError(f"Invalid version '{value}': empty epoch")

        if not head or not pkgrel:
            raise VersionParseError(f"Invalid version '{value}': empty pkgver or pkgrel")

        return cls(pkgver=head, pkgrel=pkgrel, epoch=epoch)

    def __str__(self) -> str:
        if self.epoch:
            return f"{self.epoch}:{self.pkgver}-{self.pkgrel}"
        return f"{self.pkgver}-{self.pkgrel}"


@dataclass(frozen=True)
class VersionInfo:
    upstream_version: Optional[str] = None
    local_version: Optional[str] = None


class BuildDecision(Enum):
    SKIP = "skip"
    BUILD = "build"


class DecisionReason(Enum):
    UPSTREAM_UNKNOWN_KEEP = "upstream_unknown_keep"
    UPSTREAM_UNKNOWN_BUILD = "upstream_unknown_build"
    NOT_IN_REPO = "not_in_repo"
    VERSION_MISMATCH = "version_mismatch"
    FORCED = "forced"
    ARTIFACT_MISSING = "artifact_missing"
    UP_TO_DATE = "up_to_date"


@dataclass(frozen=True)
class Decision:
    action: BuildDecision
    reason: DecisionReason

    @property
    def needs_build(self) -> bool:
        return self.action is BuildDecision.BUILD


def decide(spec: PackageSpec, info: VersionInfo, artifact_present: bool) -> Decision:
    """
    Decide whether a package has to be (re)built.

    Rules are checked in order; the artifact check is only reached when the
    repository database already lists the upstream version.
    """
    upstream = info.upstream_version
    local = info.local_version

    if not upstream:
        if local:
            return Decision(BuildDecision.SKIP, DecisionReason.UPSTREAM_UNKNOWN_KEEP)
        return Decision(BuildDecision.BUILD, DecisionReason.UPSTREAM_UNKNOWN_BUILD)

    if not local:
        return Decision(BuildDecision.BUILD, DecisionReason.NOT_IN_REPO)

    if local != upstream:
        return Decision(BuildDecision.BUILD, DecisionReason.VERSION_MISMATCH)

    if spec.force:
        return Decision(BuildDecision.BUILD, DecisionReason.FORCED)

    if not artifact_present:
        return Decision(BuildDecision.BUILD, DecisionReason.ARTIFACT_MISSING)

    return Decision(BuildDecision.SKIP, DecisionReason.UP_TO_DATE)


class VersionManager:
    """Evaluates staleness of declared packages against the output directory"""

    MESSAGES = {
        DecisionReason.UPSTREAM_UNKNOWN_KEEP: "Could not get version from AUR API. Keeping repo version.",
        DecisionReason.UPSTREAM_UNKNOWN_BUILD: "Package not found in AUR API.",
        DecisionReason.NOT_IN_REPO: "Package not in repo, downloading...",
        DecisionReason.VERSION_MISMATCH: "Version mismatch, updating...",
        DecisionReason.FORCED: "Force flag set, rebuilding...",
        DecisionReason.ARTIFACT_MISSING: "Package file missing, rebuilding...",
        DecisionReason.UP_TO_DATE: "Up-to-date, skipping",
    }

    def __init__(self, arch_dir: Path):
        self.arch_dir = Path(arch_dir)

    def artifact_exists(self, pkg_name: str, version: Optional[str]) -> bool:
        """Check for a built <name>-<version>-*.pkg.tar.* file in the output directory"""
        if not version:
            return False
        pattern = str(self.arch_dir / f"{glob.escape(pkg_name)}-{glob.escape(version)}-*.pkg.tar.*")
        matches = [m for m in glob.glob(pattern) if not m.endswith('.sig')]
        return bool(matches)

    def evaluate(self, spec: PackageSpec, info: VersionInfo) -> Decision:
        """Run the decision table for one package and log the outcome"""
        artifact_present = self.artifact_exists(spec.name, info.local_version)
        decision = decide(spec, info, artifact_present)

        message = self.MESSAGES[decision.reason]
        if decision.needs_build or decision.reason is DecisionReason.UPSTREAM_UNKNOWN_KEEP:
            logger.warning(message)
        else:
            log_success(logger, message)
        return decision

    @staticmethod
    def describe(version: Optional[str], fallback: str) -> str:
        return version if version else fallback
