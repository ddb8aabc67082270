"""
MovieCode - Normalisation des noms de fichiers video par code film.

Ce package parcourt une arborescence, extrait de chaque nom de fichier
video un code film canonique (ex: ABC-123) et renomme le fichier en
evitant les collisions de noms.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (erreurs, ports)
- services/ : Couche application (extraction, deconfliction, renommage)
- adapters/ : Couche infrastructure (CLI, systeme de fichiers)
"""

__version__ = "0.1.0"
