"""Unit tests for landing page rendering."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from aur_repo_builder.common.config_loader import PackageSpec, RepositoryConfig
from aur_repo_builder.repo.landing_page import (
    LandingPageData,
    LandingPageGenerator,
    format_timestamp,
    render_rows,
    render_template,
)

MOMENT = datetime(2026, 1, 31, 12, 5, tzinfo=timezone(timedelta(hours=1)))

INDEX = """<h1>{{REPO_NAME}}</h1>
<p>{{PACKAGE_COUNT}} packages from <a href="{{PROJECT_URL}}">project</a></p>
<span id="last-updated">{{LAST_UPDATED}}</span>
<code>Server = {{REPO_URL}}/$arch</code>
<tbody>{{PACKAGE_ROWS}}</tbody>
"""


@pytest.fixture
def repo_config() -> RepositoryConfig:
    return RepositoryConfig(
        repo_name="myrepo",
        repo_url="https://repo.example.org",
        project_url="https://github.com/example/myrepo",
        packages=(PackageSpec("foo"), PackageSpec("bar"), PackageSpec("baz")),
    )


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    path = tmp_path / "templates"
    path.mkdir()
    (path / "index.html").write_text(INDEX, encoding="utf-8")
    (path / "repo-README.md").write_text("# {{REPO_NAME}}\n{{REPO_URL}}\n", encoding="utf-8")
    (path / "install.sh").write_text("REPO_NAME={{REPO_NAME}}\n", encoding="utf-8")
    (path / "icon.png").write_bytes(b"\x89PNG")
    return path


def test_format_timestamp() -> None:
    assert format_timestamp(MOMENT) == "2026-01-31T12:05+01:00"


def test_render_rows_escapes_values() -> None:
    html = render_rows([("foo", "1.0-1", "x86_64"), ("a<b", "2&3", "any")])

    assert "https://aur.archlinux.org/packages/foo" in html
    assert "a&lt;b" in html
    assert "2&amp;3" in html
    assert html.count("<tr>") == 2


def test_render_template_replaces_placeholders(repo_config: RepositoryConfig) -> None:
    data = LandingPageGenerator.collect_data(repo_config, {"foo": "1.0-1"}, "x86_64", MOMENT)

    content = render_template(INDEX, data)

    assert "{{" not in content
    assert "<h1>myrepo</h1>" in content
    assert "3 packages" in content
    assert "2026-01-31T12:05+01:00" in content


def test_collect_data_rows_only_for_indexed_packages(repo_config: RepositoryConfig) -> None:
    data = LandingPageGenerator.collect_data(
        repo_config, {"foo": "1.0-1", "baz": "3.0-2", "undeclared": "9-9"}, "x86_64", MOMENT,
    )

    assert data.rows == (("foo", "1.0-1", "x86_64"), ("baz", "3.0-2", "x86_64"))
    assert data.package_count == 3


def test_generate_writes_files(tmp_path: Path, template_dir: Path, repo_config: RepositoryConfig) -> None:
    build_dir = tmp_path / "build"
    data = LandingPageGenerator.collect_data(repo_config, {"foo": "1.0-1"}, "x86_64", MOMENT)

    assert LandingPageGenerator(template_dir, build_dir).generate(data) is True

    assert "<h1>myrepo</h1>" in (build_dir / "index.html").read_text(encoding="utf-8")
    assert (build_dir / "README.md").read_text(encoding="utf-8") == "# myrepo\nhttps://repo.example.org\n"
    assert (build_dir / "install.sh").read_text(encoding="utf-8") == "REPO_NAME=myrepo\n"
    assert (build_dir / "icon.png").read_bytes() == b"\x89PNG"


def test_timestamp_alone_does_not_rewrite(tmp_path: Path, template_dir: Path, repo_config: RepositoryConfig) -> None:
    build_dir = tmp_path / "build"
    generator = LandingPageGenerator(template_dir, build_dir)
    generator.generate(LandingPageGenerator.collect_data(repo_config, {"foo": "1.0-1"}, "x86_64", MOMENT))
    first = (build_dir / "index.html").read_text(encoding="utf-8")

    later = MOMENT + timedelta(hours=3)
    assert generator.generate(LandingPageGenerator.collect_data(repo_config, {"foo": "1.0-1"}, "x86_64", later)) is False
    assert (build_dir / "index.html").read_text(encoding="utf-8") == first

    assert generator.generate(LandingPageGenerator.collect_data(repo_config, {"foo": "1.1-1"}, "x86_64", later)) is True


def test_missing_template_skips(tmp_path: Path) -> None:
    data = LandingPageData("myrepo", "https://repo.example.org", "https://example.org", "now", 0)

    assert LandingPageGenerator(tmp_path / "none", tmp_path / "build").generate(data) is False
    assert not (tmp_path / "build" / "index.html").exists()
