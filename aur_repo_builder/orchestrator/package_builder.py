"""
Package Builder Module - Main orchestrator for package building coordination
"""

import logging
from typing import Dict, List, Optional

from aur_repo_builder.aur_client import AURClient
from aur_repo_builder.build.build_tracker import BuildTracker
from aur_repo_builder.build.version_manager import Decision, VersionInfo, VersionManager
from aur_repo_builder.common.config_loader import PackageSpec
from aur_repo_builder.common.errors import BuildError, DatabaseError, FetchError, NetworkError
from aur_repo_builder.common.logging_utils import log_success
from aur_repo_builder.orchestrator.state import RunContext
from aur_repo_builder.orchestrator.toolchain import Toolchain
from aur_repo_builder.repo.cleanup_manager import CleanupManager
from aur_repo_builder.repo.landing_page import LandingPageGenerator
from aur_repo_builder.repo.version_tracker import VersionTracker

logger = logging.getLogger(__name__)


class PackageBuilder:
    """
    Main orchestrator: decides, builds and indexes every declared package.

    Packages are processed one at a time in declaration order. A fetch or
    build failure marks that package failed and the loop moves on; only the
    exit code reflects it.
    """

    def __init__(self, context: RunContext, toolchain: Toolchain, aur_client: Optional[AURClient] = None,
                 version_tracker: Optional[VersionTracker] = None,
                 cleanup_manager: Optional[CleanupManager] = None,
                 landing_page: Optional[LandingPageGenerator] = None):
        self.context = context
        self.toolchain = toolchain
        self.aur_client = aur_client or AURClient()
        self.version_tracker = version_tracker or VersionTracker(context.db_path)
        self.version_manager = VersionManager(context.arch_dir)
        self.cleanup_manager = cleanup_manager or CleanupManager(context.clone_dir)
        self.landing_page = landing_page or LandingPageGenerator(context.template_dir, context.build_dir)
        self.build_tracker = BuildTracker()
        self.database_status = "unchanged"

    def fetch_upstream_versions(self, package_names: List[str]) -> Dict[str, str]:
        """Batched AUR lookup; a failed lookup means every upstream version is unknown"""
        logger.info("Fetching upstream versions from AUR...")
        try:
            return self.aur_client.get_versions(package_names)
        except NetworkError as e:
            logger.error(f"Failed to fetch AUR versions: {e}")
            logger.warning("Continuing with empty remote versions map")
            return {}

    def process_package(self, spec: PackageSpec, upstream_versions: Dict[str, str]) -> Decision:
        """Decide and, if needed, fetch and build a single package"""
        logger.info(f"Processing package: {spec.name}")

        info = VersionInfo(
            upstream_version=upstream_versions.get(spec.name),
            local_version=self.version_tracker.get_repo_version(spec.name),
        )
        logger.info(f"     AUR  version: {VersionManager.describe(info.upstream_version, '<unknown>')}")
        logger.info(f"     Repo version: {VersionManager.describe(info.local_version, '<not in repo>')}")

        decision = self.version_manager.evaluate(spec, info)
        logger.info(f"DECISION pkg={spec.name} action={decision.action.value} reason={decision.reason.value}")

        if not decision.needs_build:
            self.build_tracker.record_skipped_package(spec.name)
            return decision

        try:
            pkg_dir = self.toolchain.fetch_source(spec.name)
        except FetchError as e:
            logger.error(f"Failed to clone {spec.name}: {e}")
            self.build_tracker.record_failed_package(spec.name, str(e))
            return decision

        try:
            self.toolchain.install_dependencies(pkg_dir)
            artifacts = self.toolchain.build(spec.name, pkg_dir)
        except BuildError as e:
            logger.error(str(e))
            self.build_tracker.record_failed_package(spec.name, str(e))
            return decision

        if not artifacts:
            logger.warning(f"⚠️ {spec.name} built but no package file could be copied")
        self.build_tracker.record_built_package(spec.name, artifacts)
        return decision

    def update_database(self):
        """Index this run's artifacts; a repo-add failure leaves them for the next run"""
        file_names = self.build_tracker.artifact_file_names
        if not file_names:
            logger.info("Repository update not needed")
            return

        try:
            self.toolchain.index_database(file_names)
        except DatabaseError as e:
            self.database_status = "failed"
            logger.error(f"Failed to update repo database: {e}")
            return
        self.database_status = "updated"

    def generate_landing_page(self):
        versions = self.version_tracker.list_repo_packages()
        data = LandingPageGenerator.collect_data(self.context.repo, versions, self.context.arch)
        self.landing_page.generate(data)

    def log_summary(self):
        summary = self.build_tracker.get_summary()
        logger.info("Build Summary:")
        log_success(logger, f"   Built:   {summary['built']}")
        logger.warning(f"   Skipped: {summary['skipped']}")
        logger.error(f"   Failed:  {summary['failed']}")
        if self.database_status == "failed":
            logger.error("   Database: not updated, this run's packages are rebuilt next run")
        else:
            logger.info(f"   Database: {self.database_status}")
        logger.info(f"BUILD_SUMMARY built={summary['built']} artifacts={summary['artifacts']} "
                    f"skipped={summary['skipped']} failed={summary['failed']} "
                    f"database={self.database_status} elapsed={summary['elapsed']:.1f}s")

    def run(self) -> int:
        """
        Execute the whole pipeline.

        Returns:
            0 when no package failed, 1 otherwise
        """
        repo = self.context.repo
        package_names = repo.package_names
        logger.info(f"Found {len(package_names)} packages in repository {repo.repo_name}")

        upstream_versions = self.fetch_upstream_versions(package_names)

        for spec in repo.packages:
            self.process_package(spec, upstream_versions)

        self.update_database()
        self.cleanup_manager.cleanup_aur_cache(package_names)
        self.log_summary()
        self.generate_landing_page()

        failed = self.build_tracker.failed_count
        if failed > 0:
            logger.error(f"Build failed for {failed} packages: {', '.join(self.build_tracker.failed_packages)}")
            return 1

        log_success(logger, "Build completed successfully")
        return 0
