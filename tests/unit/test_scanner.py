"""
Tests unitaires pour ScannerService et le parcours du FileSystemAdapter.
"""

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from moviecode.adapters.file_system import FileSystemAdapter
from moviecode.config import RenamerConfig
from moviecode.core.errors import ScanError
from moviecode.services.scanner import ScannerService, matches_video_type


class TestMatchesVideoType:
    """Tests pour le filtrage par extension."""

    def test_matches_configured_suffix(self) -> None:
        assert matches_video_type(Path("a/ABC-1.mp4"), [".mp4"]) is True

    def test_case_insensitive(self) -> None:
        assert matches_video_type(Path("a/ABC-1.MKV"), [".mkv"]) is True

    def test_configured_suffix_case_ignored(self) -> None:
        assert matches_video_type(Path("a/ABC-1.avi"), [".AVI"]) is True

    def test_other_suffix_rejected(self) -> None:
        assert matches_video_type(Path("a/ABC-1.srt"), [".mp4", ".mkv"]) is False

    def test_empty_types_rejects_everything(self) -> None:
        assert matches_video_type(Path("a/ABC-1.mp4"), []) is False


class TestScannerWithMock:
    """Tests du service avec un systeme de fichiers simule."""

    def test_filters_walk_results(self, mock_file_system: MagicMock) -> None:
        mock_file_system.walk_files.return_value = iter(
            [Path("/r/a.mp4"), Path("/r/a.nfo"), Path("/r/sub/b.mkv")]
        )
        scanner = ScannerService(file_system=mock_file_system)

        files = scanner.collect_video_files(Path("/r"), [".mp4", ".mkv"])

        assert files == [Path("/r/a.mp4"), Path("/r/sub/b.mkv")]
        mock_file_system.walk_files.assert_called_once_with(Path("/r"))

    def test_walk_error_propagates(self, mock_file_system: MagicMock) -> None:
        mock_file_system.walk_files.side_effect = ScanError("boom")
        scanner = ScannerService(file_system=mock_file_system)

        with pytest.raises(ScanError):
            scanner.collect_video_files(Path("/r"), [".mp4"])

    def test_scan_uses_config(self, mock_file_system: MagicMock) -> None:
        mock_file_system.walk_files.return_value = iter([Path("/r/x.avi")])
        scanner = ScannerService(file_system=mock_file_system)

        files = scanner.scan(RenamerConfig(file_path="/r", video_types=[".avi"]))

        assert files == [Path("/r/x.avi")]


class TestScannerOnDisk:
    """Tests du scan avec le vrai adaptateur."""

    def test_recursive_scan(self, video_root: Path, make_file) -> None:
        make_file(video_root / "abc-1.mp4")
        make_file(video_root / "deep" / "deeper" / "def-2.mkv")
        make_file(video_root / "notes.txt")

        scanner = ScannerService(file_system=FileSystemAdapter())
        files = scanner.collect_video_files(video_root, [".mp4", ".mkv", ".avi"])

        assert sorted(files) == sorted(
            [video_root / "abc-1.mp4", video_root / "deep" / "deeper" / "def-2.mkv"]
        )

    def test_directories_named_like_videos_are_skipped(self, video_root: Path) -> None:
        (video_root / "folder.mp4").mkdir()

        scanner = ScannerService(file_system=FileSystemAdapter())

        assert scanner.collect_video_files(video_root, [".mp4"]) == []

    def test_symlinks_are_skipped(self, video_root: Path, make_file) -> None:
        real = make_file(video_root / "abc-1.mp4")
        (video_root / "link-2.mp4").symlink_to(real)

        scanner = ScannerService(file_system=FileSystemAdapter())

        assert scanner.collect_video_files(video_root, [".mp4"]) == [real]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        scanner = ScannerService(file_system=FileSystemAdapter())

        with pytest.raises(ScanError):
            scanner.collect_video_files(tmp_path / "absent", [".mp4"])

    @pytest.mark.skipif(
        hasattr(os, "geteuid") and os.geteuid() == 0,
        reason="root ignore les permissions de repertoire",
    )
    def test_unreadable_subdirectory_raises(self, video_root: Path, make_file) -> None:
        locked = video_root / "locked"
        make_file(locked / "abc-1.mp4")
        locked.chmod(0o000)
        try:
            scanner = ScannerService(file_system=FileSystemAdapter())
            with pytest.raises(ScanError):
                scanner.collect_video_files(video_root, [".mp4"])
        finally:
            locked.chmod(0o755)
