"""
Interfaces ports pour le systeme de fichiers.

Interfaces abstraites (ports) definissant les contrats pour les operations fichiers.
L'implementation (adaptateur) fournit l'acces concret au systeme de fichiers.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """
    Interface pour les operations sur les fichiers utilisees par le renommage.

    Definit les operations pour interagir avec le systeme de fichiers :
    verification d'existence, renommage atomique, parcours recursif.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """
        Verifie si une entree existe a ce chemin.

        Un lien symbolique casse compte comme une entree existante.
        """
        ...

    @abstractmethod
    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme un fichier sur le meme systeme de fichiers.

        Args :
            source : Chemin actuel du fichier
            destination : Chemin cible du fichier

        Leve :
            OSError : permission refusee, deplacement entre volumes, etc.
        """
        ...

    @abstractmethod
    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt recursivement les fichiers reguliers sous root.

        Args :
            root : Repertoire racine du parcours

        Retourne :
            Iterateur sur les chemins complets des fichiers reguliers

        Leve :
            ScanError : au premier echec de lecture d'un repertoire
        """
        ...
