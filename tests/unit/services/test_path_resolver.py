"""
Tests unitaires pour la resolution de chemin sans collision.
"""

from pathlib import Path

from moviecode.services.path_resolver import resolve_unique_path


class TestResolveUniquePathOnDisk:
    """Tests avec de vrais fichiers dans tmp_path."""

    def test_free_path_returned_unchanged(self, tmp_path: Path) -> None:
        target = tmp_path / "XYZ-001.mkv"
        assert resolve_unique_path(target) == target

    def test_existing_path_gets_counter(self, tmp_path: Path) -> None:
        target = tmp_path / "XYZ-001.mkv"
        target.touch()

        resolved = resolve_unique_path(target)

        assert resolved == tmp_path / "XYZ-001_1.mkv"
        assert resolved != target
        assert not resolved.exists()

    def test_counter_increments_until_free(self, tmp_path: Path) -> None:
        for name in ("ABC-123.mp4", "ABC-123_1.mp4", "ABC-123_2.mp4"):
            (tmp_path / name).touch()

        assert resolve_unique_path(tmp_path / "ABC-123.mp4") == tmp_path / "ABC-123_3.mp4"

    def test_directory_counts_as_existing(self, tmp_path: Path) -> None:
        (tmp_path / "ABC-123.mp4").mkdir()

        assert resolve_unique_path(tmp_path / "ABC-123.mp4") == tmp_path / "ABC-123_1.mp4"

    def test_broken_symlink_counts_as_existing(self, tmp_path: Path) -> None:
        link = tmp_path / "ABC-123.mp4"
        link.symlink_to(tmp_path / "missing")

        assert resolve_unique_path(link) == tmp_path / "ABC-123_1.mp4"

    def test_name_without_extension(self, tmp_path: Path) -> None:
        (tmp_path / "ABC-123").touch()

        assert resolve_unique_path(tmp_path / "ABC-123") == tmp_path / "ABC-123_1"

    def test_only_last_suffix_is_extension(self, tmp_path: Path) -> None:
        (tmp_path / "ABC-123.part.mkv").touch()

        resolved = resolve_unique_path(tmp_path / "ABC-123.part.mkv")

        assert resolved == tmp_path / "ABC-123.part_1.mkv"


class TestResolveUniquePathInjectedPredicate:
    """Tests avec un predicat d'existence injecte."""

    def test_predicate_is_consulted(self) -> None:
        taken = {Path("/v/A-1.mp4"), Path("/v/A-1_1.mp4")}

        resolved = resolve_unique_path(Path("/v/A-1.mp4"), exists=taken.__contains__)

        assert resolved == Path("/v/A-1_2.mp4")

    def test_no_upper_bound_on_counter(self) -> None:
        """Le compteur depasse largement les petites valeurs si necessaire."""
        calls = []

        def exists(path: Path) -> bool:
            calls.append(path)
            return len(calls) <= 500

        resolved = resolve_unique_path(Path("/v/A-1.mp4"), exists=exists)

        assert resolved == Path("/v/A-1_500.mp4")
