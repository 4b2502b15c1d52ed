from __future__ import annotations

import io
import subprocess
import tarfile
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

from aur_repo_builder.build.artifact_manager import BuiltArtifact
from aur_repo_builder.common.config_loader import PackageSpec, RepositoryConfig
from aur_repo_builder.common.errors import BuildError, DatabaseError, FetchError
from aur_repo_builder.orchestrator.state import RunContext
from aur_repo_builder.orchestrator.toolchain import Toolchain


def write_repo_db(db_path: Path, entries: List[str]) -> Path:
    """Create a gzip tar shaped like a pacman db: one <name>-<ver>-<rel>/desc per entry."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with tarfile.open(db_path, "w:gz") as tar:
        for entry in entries:
            dir_info = tarfile.TarInfo(entry)
            dir_info.type = tarfile.DIRTYPE
            tar.addfile(dir_info)

            payload = f"%NAME%\n{entry}\n".encode()
            desc_info = tarfile.TarInfo(f"{entry}/desc")
            desc_info.size = len(payload)
            tar.addfile(desc_info, io.BytesIO(payload))
    return db_path


class FakeShellExecutor:
    """Records commands and answers them from a list of handlers."""

    def __init__(self) -> None:
        self.calls: List[dict] = []
        self.handlers: List[tuple] = []

    def on(self, prefix: List[str], returncode: int = 0, stdout: str = "", stderr: str = "",
           action: Optional[Callable[[List[str], Path], None]] = None) -> None:
        self.handlers.append((list(prefix), returncode, stdout, stderr, action))

    def run_command(self, cmd, cwd=None, capture=True, log_cmd=False):
        cmd = [str(part) for part in cmd]
        self.calls.append({"cmd": cmd, "cwd": cwd})
        for prefix, returncode, stdout, stderr, action in self.handlers:
            if cmd[: len(prefix)] == prefix:
                if action is not None:
                    action(cmd, Path(cwd) if cwd else None)
                return subprocess.CompletedProcess(cmd, returncode, stdout, stderr)
        return subprocess.CompletedProcess(cmd, 0, "", "")

    def commands(self) -> List[List[str]]:
        return [call["cmd"] for call in self.calls]


class FakeToolchain(Toolchain):
    """Toolchain that "builds" by writing package files and indexes into a real tar.gz db."""

    def __init__(self, context: RunContext, upstream: Dict[str, str]) -> None:
        self.context = context
        self.upstream = upstream
        self.fetch_failures: set = set()
        self.build_failures: set = set()
        self.database_fails = False
        self.fetched: List[str] = []
        self.built: List[str] = []
        self.indexed: List[List[str]] = []

    def fetch_source(self, pkg_name: str) -> Path:
        self.fetched.append(pkg_name)
        if pkg_name in self.fetch_failures:
            raise FetchError(f"git clone failed for {pkg_name}", pkg_name)
        pkg_dir = self.context.clone_dir / pkg_name
        pkg_dir.mkdir(parents=True, exist_ok=True)
        (pkg_dir / "PKGBUILD").write_text("pkgname=" + pkg_name)
        return pkg_dir

    def install_dependencies(self, pkg_dir: Path) -> List[str]:
        return []

    def build(self, pkg_name: str, pkg_dir: Path) -> List[BuiltArtifact]:
        if pkg_name in self.build_failures:
            raise BuildError(f"No package files found after build for {pkg_name}", pkg_name)
        self.built.append(pkg_name)
        version = self.upstream.get(pkg_name, "0.1-1")
        file_name = f"{pkg_name}-{version}-x86_64.pkg.tar.zst"
        self.context.arch_dir.mkdir(parents=True, exist_ok=True)
        path = self.context.arch_dir / file_name
        path.write_bytes(b"package")
        return [BuiltArtifact(pkg_name, file_name, path)]

    def index_database(self, file_names: List[str]) -> bool:
        self.indexed.append(list(file_names))
        if self.database_fails:
            raise DatabaseError("repo-add exited with status 1")

        entries = {}
        db_path = self.context.db_path
        if db_path.exists():
            with tarfile.open(db_path, "r:gz") as tar:
                for member in tar.getmembers():
                    if member.name.endswith("/desc"):
                        name, _, _ = member.name[: -len("/desc")].rsplit("-", 2)
                        entries[name] = member.name[: -len("/desc")]
        for file_name in file_names:
            base = file_name[: -len(".pkg.tar.zst")]
            name, version, release, _arch = base.rsplit("-", 3)
            entries[name] = f"{name}-{version}-{release}"
        write_repo_db(db_path, sorted(entries.values()))
        return True


class FakeAURClient:
    def __init__(self, versions: Optional[Dict[str, str]] = None, error: Optional[Exception] = None) -> None:
        self.versions = versions or {}
        self.error = error
        self.requests: List[List[str]] = []

    def get_versions(self, package_names):
        self.requests.append(list(package_names))
        if self.error is not None:
            raise self.error
        return dict(self.versions)


@pytest.fixture
def shell() -> FakeShellExecutor:
    return FakeShellExecutor()


@pytest.fixture
def make_context(tmp_path: Path):
    def _make(packages: List[PackageSpec], repo_name: str = "testrepo") -> RunContext:
        repo = RepositoryConfig(
            repo_name=repo_name,
            repo_url="https://repo.example.org",
            project_url="https://github.com/example/repo",
            packages=tuple(packages),
        )
        context = RunContext(
            repo=repo,
            build_dir=tmp_path / "build",
            clone_dir=tmp_path / "aur",
            template_dir=tmp_path / "templates",
        )
        context.arch_dir.mkdir(parents=True, exist_ok=True)
        context.clone_dir.mkdir(parents=True, exist_ok=True)
        return context

    return _make


@pytest.fixture
def repo_db():
    return write_repo_db


@pytest.fixture
def fake_toolchain():
    return FakeToolchain


@pytest.fixture
def fake_aur():
    return FakeAURClient
