"""Unit tests for reading versions out of the repository database."""

from pathlib import Path

from aur_repo_builder.repo.version_tracker import VersionTracker


def test_missing_database_returns_none(tmp_path: Path) -> None:
    tracker = VersionTracker(tmp_path / "nothing.db.tar.gz")
    assert tracker.get_repo_version("foo") is None
    assert tracker.list_repo_packages() == {}


def test_corrupt_database_returns_none(tmp_path: Path) -> None:
    db_path = tmp_path / "repo.db.tar.gz"
    db_path.write_bytes(b"\x1f\x8b\x08\x00garbage that is not a gzip stream")
    tracker = VersionTracker(db_path)

    assert tracker.get_repo_version("foo") is None
    assert tracker.list_repo_packages() == {}


def test_plain_file_returns_none(tmp_path: Path) -> None:
    db_path = tmp_path / "repo.db.tar.gz"
    db_path.write_text("not an archive at all")
    assert VersionTracker(db_path).get_repo_version("foo") is None


def test_finds_version(tmp_path: Path, repo_db) -> None:
    db_path = repo_db(tmp_path / "repo.db.tar.gz", ["bar-2.0-1", "foo-1.0-3"])
    tracker = VersionTracker(db_path)

    assert tracker.get_repo_version("foo") == "1.0-3"
    assert tracker.get_repo_version("bar") == "2.0-1"
    assert tracker.get_repo_version("baz") is None


def test_epoch_version(tmp_path: Path, repo_db) -> None:
    db_path = repo_db(tmp_path / "repo.db.tar.gz", ["foo-1:2.5-1"])
    assert VersionTracker(db_path).get_repo_version("foo") == "1:2.5-1"


def test_prefix_does_not_match_longer_name(tmp_path: Path, repo_db) -> None:
    db_path = repo_db(tmp_path / "repo.db.tar.gz", ["foo-git-r10.abc-1"])
    tracker = VersionTracker(db_path)

    assert tracker.get_repo_version("foo") is None
    assert tracker.get_repo_version("foo-git") == "r10.abc-1"


def test_list_repo_packages(tmp_path: Path, repo_db) -> None:
    db_path = repo_db(tmp_path / "repo.db.tar.gz", ["foo-1.0-1", "foo-git-r10.abc-2"])
    assert VersionTracker(db_path).list_repo_packages() == {"foo": "1.0-1", "foo-git": "r10.abc-2"}
