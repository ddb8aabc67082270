"""
Tests unitaires pour FileSystemAdapter (existence et renommage).
"""

import errno
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from moviecode.adapters.file_system import FileSystemAdapter


@pytest.fixture
def adapter() -> FileSystemAdapter:
    return FileSystemAdapter()


class TestExists:
    """Tests pour exists."""

    def test_existing_file(self, adapter: FileSystemAdapter, tmp_path: Path) -> None:
        (tmp_path / "a.mp4").touch()
        assert adapter.exists(tmp_path / "a.mp4") is True

    def test_missing_file(self, adapter: FileSystemAdapter, tmp_path: Path) -> None:
        assert adapter.exists(tmp_path / "a.mp4") is False

    def test_broken_symlink(self, adapter: FileSystemAdapter, tmp_path: Path) -> None:
        (tmp_path / "link.mp4").symlink_to(tmp_path / "missing")
        assert adapter.exists(tmp_path / "link.mp4") is True


class TestRename:
    """Tests pour rename."""

    def test_moves_file_and_preserves_content(
        self, adapter: FileSystemAdapter, tmp_path: Path
    ) -> None:
        source = tmp_path / "abc-1.mp4"
        source.write_bytes(b"payload")

        adapter.rename(source, tmp_path / "ABC-1.mp4")

        assert not source.exists()
        assert (tmp_path / "ABC-1.mp4").read_bytes() == b"payload"

    def test_missing_source_raises(self, adapter: FileSystemAdapter, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            adapter.rename(tmp_path / "absent.mp4", tmp_path / "ABC-1.mp4")

    def test_cross_device_error_propagates(
        self, adapter: FileSystemAdapter, tmp_path: Path
    ) -> None:
        source = tmp_path / "abc-1.mp4"
        source.touch()
        exdev = OSError(errno.EXDEV, os.strerror(errno.EXDEV))

        with patch("moviecode.adapters.file_system.os.replace", side_effect=exdev):
            with pytest.raises(OSError):
                adapter.rename(source, tmp_path / "ABC-1.mp4")

        assert source.exists()
