"""
Landing Page Module - Renders index.html, README and installer for the repository
"""

import html
import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from aur_repo_builder import config
from aur_repo_builder.common.logging_utils import log_success

logger = logging.getLogger(__name__)

LAST_UPDATED_MARKER = 'id="last-updated"'


@dataclass(frozen=True)
class LandingPageData:
    repo_name: str
    repo_url: str
    project_url: str
    generated_at: str
    package_count: int
    rows: Tuple[Tuple[str, str, str], ...] = field(default_factory=tuple)


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601-like local timestamp with minute precision, e.g. 2026-01-31T12:00+01:00"""
    moment = moment or datetime.now().astimezone()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    stamp = moment.strftime('%Y-%m-%dT%H:%M%z')
    # strftime gives +0100, the page shows +01:00
    return f"{stamp[:-2]}:{stamp[-2:]}"


def render_rows(rows, aur_base_url: str = config.AUR_BASE_URL) -> str:
    """Render one <tr> per (name, version, arch)"""
    parts = []
    for name, version, arch in rows:
        name_html = html.escape(name)
        parts.append(
            "<tr>"
            f"<td class='ps-3'><a href='{aur_base_url}/packages/{name_html}' target='_blank' "
            f"class='package-name text-decoration-none'>{name_html}</a></td>"
            f"<td class='text-center'><span class='badge rounded-pill badge-version'>{html.escape(version)}</span></td>"
            f"<td class='text-end pe-3 text-secondary'>{html.escape(arch)}</td>"
            "</tr>"
        )
    return "".join(parts)


def render_template(template: str, data: LandingPageData) -> str:
    replacements = {
        '{{REPO_NAME}}': data.repo_name,
        '{{REPO_URL}}': data.repo_url,
        '{{PROJECT_URL}}': data.project_url,
        '{{LAST_UPDATED}}': data.generated_at,
        '{{PACKAGE_COUNT}}': str(data.package_count),
        '{{PACKAGE_ROWS}}': render_rows(data.rows),
    }
    content = template
    for placeholder, value in replacements.items():
        content = content.replace(placeholder, value)
    return content


def _strip_volatile(content: str) -> List[str]:
    return [line for line in content.splitlines() if LAST_UPDATED_MARKER not in line]


class LandingPageGenerator:
    """Writes the static landing page and companion files into the build root"""

    def __init__(self, template_dir, build_dir):
        self.template_dir = Path(template_dir)
        self.build_dir = Path(build_dir)

    @staticmethod
    def collect_data(repo_config, versions: Dict[str, str], arch: str,
                     moment: Optional[datetime] = None) -> LandingPageData:
        """
        Build the landing page data for the declared packages.

        Args:
            repo_config: RepositoryConfig of this run
            versions: Indexed version per package name; packages without one get no row
            arch: Architecture shown in every row
        """
        rows = tuple(
            (name, versions[name], arch)
            for name in repo_config.package_names
            if versions.get(name)
        )
        return LandingPageData(
            repo_name=repo_config.repo_name,
            repo_url=repo_config.repo_url,
            project_url=repo_config.project_url,
            generated_at=format_timestamp(moment),
            package_count=len(repo_config.packages),
            rows=rows,
        )

    def generate(self, data: LandingPageData) -> bool:
        """
        Render every template that exists. Errors are logged, never raised.

        Returns:
            True if index.html was written
        """
        index_template = self.template_dir / config.INDEX_HTML_TEMPLATE
        if not index_template.is_file():
            logger.warning(f"Landing page template not found: {index_template}. Skipping generation.")
            return False

        logger.info("Generating landing pages...")
        written = self._render_file(index_template, self.build_dir / "index.html", data, "Landing page")
        self._render_file(self.template_dir / config.README_TEMPLATE, self.build_dir / "README.md", data, "README")
        self._render_file(self.template_dir / config.INSTALLER_TEMPLATE, self.build_dir / "install.sh", data, "Installer")
        self._copy_icon()
        return written

    def _render_file(self, template_path: Path, output_path: Path, data: LandingPageData, label: str) -> bool:
        if not template_path.is_file():
            logger.debug(f"TEMPLATE_MISSING name={template_path.name}")
            return False

        try:
            content = render_template(template_path.read_text(encoding='utf-8'), data)
            if output_path.is_file():
                existing = output_path.read_text(encoding='utf-8')
                if _strip_volatile(existing) == _strip_volatile(content):
                    logger.info(f"   Unchanged: {label}.")
                    return False

            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding='utf-8')
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to write {output_path.name}: {e}")
            return False

        log_success(logger, f"   Generated: {label}.")
        return True

    def _copy_icon(self) -> bool:
        icon = self.template_dir / config.ICON_FILE
        if not icon.is_file():
            return False

        dest = self.build_dir / config.ICON_FILE
        try:
            if dest.is_file() and dest.read_bytes() == icon.read_bytes():
                return False
            shutil.copyfile(icon, dest)
        except OSError as e:
            logger.error(f"Failed to copy {icon.name}: {e}")
            return False

        log_success(logger, "   Copied: Icon.")
        return True
