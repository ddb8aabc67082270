"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles.
"""

import os
from pathlib import Path
from typing import Iterator

from loguru import logger

from moviecode.core.errors import ScanError
from moviecode.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Fournit l'existence, le renommage atomique et le parcours recursif.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si une entree existe (lien casse compris)."""
        return os.path.lexists(path)

    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme un fichier de maniere atomique.

        Utilise os.replace : atomique sur le meme systeme de fichiers.
        Un deplacement entre volumes echoue (EXDEV) et l'erreur est propagee.
        """
        os.replace(source, destination)

    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt recursivement les fichiers reguliers sous root.

        Les liens symboliques ne sont pas suivis ni retournes.
        L'ordre est celui du systeme de fichiers (non trie).
        """

        def _raise(error: OSError) -> None:
            raise ScanError(f"{error.filename}: {error.strerror or error}") from error

        for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
            for name in filenames:
                path = Path(dirpath) / name
                # Ignorer les symlinks et les fichiers speciaux
                if path.is_symlink() or not path.is_file():
                    logger.trace("Entree ignoree", path=str(path))
                    continue
                yield path
