"""
Fixtures pytest partagees pour les tests MovieCode.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de l'interface IFileSystem
- Arborescence video temporaire
- Configuration de renommage pointant sur tmp_path
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from moviecode.config import RenamerConfig
from moviecode.core.ports.file_system import IFileSystem


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut aucun chemin n'existe et les renommages reussissent.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.rename.return_value = None
    mock.walk_files.return_value = iter([])
    return mock


@pytest.fixture
def video_root(tmp_path: Path) -> Path:
    """Repertoire racine vide pour les scans."""
    root = tmp_path / "videos"
    root.mkdir()
    return root


@pytest.fixture
def make_file():
    """Fabrique de fichiers : cree le fichier (et ses parents) avec un contenu."""

    def _make(path: Path, content: bytes = b"video") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def renamer_config(video_root: Path) -> RenamerConfig:
    """Configuration de renommage pointant sur video_root."""
    return RenamerConfig(file_path=str(video_root))
