"""
Service de scan du repertoire racine.

Collecte la liste complete des fichiers video avant tout renommage,
pour que les fichiers renommes ne soient jamais revisites.
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from moviecode.config import RenamerConfig
from moviecode.core.ports.file_system import IFileSystem


def matches_video_type(path: Path, video_types: Iterable[str]) -> bool:
    """
    Vrai si le chemin se termine par l'un des suffixes configures.

    La comparaison porte sur le chemin complet, insensible a la casse.
    """
    lowered = str(path).lower()
    return any(lowered.endswith(suffix.lower()) for suffix in video_types)


class ScannerService:
    """
    Service de collecte des fichiers video.

    Coordonne le systeme de fichiers (IFileSystem) pour lister les fichiers
    et filtre par extension.
    """

    def __init__(self, file_system: IFileSystem) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour le parcours
        """
        self._file_system = file_system

    def collect_video_files(self, root: Path, video_types: Iterable[str]) -> list[Path]:
        """
        Liste les fichiers video sous root, dans l'ordre du parcours.

        Args:
            root: Repertoire racine
            video_types: Suffixes reconnus (ex: ".mp4")

        Returns:
            Liste complete des fichiers video trouves

        Raises:
            ScanError: si le parcours echoue (run a interrompre)
        """
        suffixes = tuple(video_types)
        video_files = [
            path
            for path in self._file_system.walk_files(root)
            if matches_video_type(path, suffixes)
        ]
        logger.info("Scan termine", root=str(root), count=len(video_files))
        return video_files

    def scan(self, config: RenamerConfig) -> list[Path]:
        """Collecte les fichiers video selon la configuration chargee."""
        return self.collect_video_files(config.root_dir, config.video_types)
