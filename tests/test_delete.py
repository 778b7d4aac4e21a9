"""Tests for forced deletion."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from safe_fileops.delete import ForceDeleter
from safe_fileops.errors import InvalidArgumentError, IOFailureError
from safe_fileops.filesystem import RealFileSystem


class StuckFileSystem(RealFileSystem):
    """Filesystem whose deletes silently do nothing, like a locked file."""

    def unlink(self, path: Path) -> None:
        pass

    def rmdir(self, path: Path) -> None:
        pass


class DeniedFileSystem(RealFileSystem):
    """Filesystem whose deletes of one name fail with a permission error."""

    def __init__(self, protected: str) -> None:
        self.protected = protected

    def unlink(self, path: Path) -> None:
        if path.name == self.protected:
            raise PermissionError(f"Permission denied: {path}")
        super().unlink(path)


@pytest.fixture
def deleter() -> ForceDeleter:
    """Create a deleter over the real filesystem."""
    return ForceDeleter.create()


class TestForceDelete:
    """Tests for ForceDeleter.force_delete."""

    def test_deletes_file(self, deleter: ForceDeleter, tmp_path: Path) -> None:
        """Test a file is removed."""
        path = tmp_path / "copy1.txt"
        path.touch()

        result = deleter.force_delete(path)

        assert not path.exists()
        assert result.existed is True
        assert result.files_deleted == 1
        assert result.directories_deleted == 0

    def test_deletes_tree(self, deleter: ForceDeleter, deep_tree: Path) -> None:
        """Test a non-empty tree is removed depth first."""
        result = deleter.force_delete(deep_tree)

        assert not deep_tree.exists()
        assert result.files_deleted == 4
        assert result.directories_deleted == 5

    def test_missing_target_reported(self, deleter: ForceDeleter, tmp_path: Path) -> None:
        """Test an absent target succeeds with existed=False."""
        result = deleter.force_delete(tmp_path / "never-was")

        assert result.existed is False
        assert result.files_deleted == 0

    def test_does_not_follow_links(self, deleter: ForceDeleter, source_tree: Path, tmp_path: Path) -> None:
        """Test links inside a tree are removed without touching their targets."""
        victim = tmp_path / "victim"
        victim.mkdir()
        (victim / "precious.txt").write_text("keep me")
        (source_tree / "link").symlink_to(victim)

        deleter.force_delete(source_tree)

        assert not source_tree.exists()
        assert (victim / "precious.txt").read_text() == "keep me"

    def test_deletes_dangling_link(self, deleter: ForceDeleter, tmp_path: Path) -> None:
        """Test a dangling link is removed."""
        link = tmp_path / "dangling"
        link.symlink_to(tmp_path / "gone")

        result = deleter.force_delete(link)

        assert result.existed is True
        assert not link.is_symlink()

    def test_post_condition_failure(self, tmp_path: Path) -> None:
        """Test a delete that silently does nothing is still a failure."""
        path = tmp_path / "locked.txt"
        path.touch()
        deleter = ForceDeleter.create(filesystem=StuckFileSystem())

        with pytest.raises(IOFailureError, match="unable to delete file"):
            deleter.force_delete(path)

        assert path.exists()

    def test_permission_failure(self, source_tree: Path) -> None:
        """Test a refused delete raises and the target still exists."""
        deleter = ForceDeleter.create(filesystem=DeniedFileSystem("b.txt"))

        with pytest.raises(IOFailureError, match="Permission denied") as exc_info:
            deleter.force_delete(source_tree)

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert source_tree.exists()
        assert (source_tree / "sub" / "b.txt").exists()

    def test_none(self, deleter: ForceDeleter) -> None:
        """Test None is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            deleter.force_delete(None)

    def test_vanished_entry_is_success(self) -> None:
        """Test an entry removed by someone else mid-delete still passes the check."""
        fs = MagicMock()
        fs.lexists.side_effect = [True, False]
        fs.is_symlink.return_value = False
        fs.is_dir.return_value = False
        fs.unlink.side_effect = FileNotFoundError("already gone")
        deleter = ForceDeleter.create(filesystem=fs)

        result = deleter.force_delete(Path("/some/file"))

        assert result.files_deleted == 1


class TestDeleteDirectory:
    """Tests for delete_directory and clean_directory."""

    def test_delete_directory(self, deleter: ForceDeleter, source_tree: Path) -> None:
        """Test a directory is removed."""
        deleter.delete_directory(source_tree)
        assert not source_tree.exists()

    def test_delete_directory_missing_is_noop(self, deleter: ForceDeleter, tmp_path: Path) -> None:
        """Test a missing directory is not an error."""
        result = deleter.delete_directory(tmp_path / "missing")
        assert result.existed is False

    def test_delete_directory_rejects_file(self, deleter: ForceDeleter, tmp_path: Path) -> None:
        """Test a file is not a directory."""
        path = tmp_path / "f"
        path.touch()

        with pytest.raises(InvalidArgumentError):
            deleter.delete_directory(path)
        assert path.exists()

    def test_clean_directory_keeps_root(self, deleter: ForceDeleter, deep_tree: Path) -> None:
        """Test contents go, the directory stays."""
        result = deleter.clean_directory(deep_tree)

        assert deep_tree.is_dir()
        assert list(deep_tree.iterdir()) == []
        assert result.files_deleted == 4
        assert result.directories_deleted == 4

    def test_clean_directory_missing(self, deleter: ForceDeleter, tmp_path: Path) -> None:
        """Test cleaning a missing directory is an invalid argument."""
        with pytest.raises(InvalidArgumentError, match="does not exist"):
            deleter.clean_directory(tmp_path / "missing")

    def test_clean_directory_file(self, deleter: ForceDeleter, tmp_path: Path) -> None:
        """Test cleaning a file is an invalid argument."""
        path = tmp_path / "f"
        path.touch()

        with pytest.raises(InvalidArgumentError, match="not a directory"):
            deleter.clean_directory(path)


class TestDeleteQuietly:
    """Tests for delete_quietly."""

    def test_success(self, deleter: ForceDeleter, source_tree: Path) -> None:
        """Test a deleted tree reports True."""
        assert deleter.delete_quietly(source_tree) is True
        assert not source_tree.exists()

    def test_missing(self, deleter: ForceDeleter, tmp_path: Path) -> None:
        """Test a missing path reports True."""
        assert deleter.delete_quietly(tmp_path / "missing") is True

    def test_none(self, deleter: ForceDeleter) -> None:
        """Test None reports False."""
        assert deleter.delete_quietly(None) is False

    def test_failure_is_logged_not_raised(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test failures are swallowed and logged."""
        path = tmp_path / "locked.txt"
        path.touch()
        deleter = ForceDeleter.create(filesystem=StuckFileSystem())

        with caplog.at_level(logging.WARNING, logger="safe_fileops.delete"):
            assert deleter.delete_quietly(path) is False

        assert "Quiet delete" in caplog.text

    def test_wrong_type_reports_false(
        self, deleter: ForceDeleter, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a value that is not a path is logged and reported, not raised."""
        with caplog.at_level(logging.WARNING, logger="safe_fileops.delete"):
            assert deleter.delete_quietly(42) is False  # type: ignore[arg-type]

        assert "must be a path" in caplog.text
