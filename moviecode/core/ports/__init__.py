"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports systeme de fichiers : Contrats pour les operations fichiers
- IFileSystem : Existence, renommage et parcours recursif
"""

from moviecode.core.ports.file_system import IFileSystem

__all__ = [
    "IFileSystem",
]
