"""Unit tests for AUR clone cache reconciliation."""

from pathlib import Path

from aur_repo_builder.repo.cleanup_manager import CleanupManager


def test_removes_undeclared_clones(tmp_path: Path) -> None:
    clone_dir = tmp_path / "aur"
    for name in ("foo", "bar", "old-package"):
        (clone_dir / name).mkdir(parents=True)
        (clone_dir / name / "PKGBUILD").write_text("")

    removed = CleanupManager(clone_dir).cleanup_aur_cache(["foo", "bar"])

    assert removed == ["old-package"]
    assert sorted(path.name for path in clone_dir.iterdir()) == ["bar", "foo"]


def test_keeps_plain_files(tmp_path: Path) -> None:
    clone_dir = tmp_path / "aur"
    clone_dir.mkdir()
    (clone_dir / "notes.txt").write_text("keep me")

    assert CleanupManager(clone_dir).cleanup_aur_cache([]) == []
    assert (clone_dir / "notes.txt").exists()


def test_missing_cache_directory(tmp_path: Path) -> None:
    assert CleanupManager(tmp_path / "absent").cleanup_aur_cache(["foo"]) == []


def test_empty_declaration_clears_cache(tmp_path: Path) -> None:
    clone_dir = tmp_path / "aur"
    (clone_dir / "foo").mkdir(parents=True)

    assert CleanupManager(clone_dir).cleanup_aur_cache([]) == ["foo"]
    assert list(clone_dir.iterdir()) == []
