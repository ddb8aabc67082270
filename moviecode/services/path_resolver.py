"""
Resolution d'un chemin cible sans collision.

Si le chemin demande est deja occupe, un compteur est insere avant
l'extension : XYZ-001.mkv -> XYZ-001_1.mkv -> XYZ-001_2.mkv ...

La verification est ponctuelle : rien n'empeche un autre processus de
creer le fichier entre la verification et le renommage.
"""

import os
from pathlib import Path
from typing import Callable

from loguru import logger

from moviecode.services.code_extractor import file_extension


def _entry_exists(path: Path) -> bool:
    """Vrai si une entree existe, lien symbolique casse compris."""
    return os.path.lexists(path)


def resolve_unique_path(
    target: Path,
    exists: Callable[[Path], bool] = _entry_exists,
) -> Path:
    """
    Retourne un chemin libre, derive de target si necessaire.

    Le compteur demarre a 1 et n'a pas de borne superieure : la boucle
    ne s'arrete que sur un nom libre.

    Args:
        target: Chemin souhaite.
        exists: Predicat d'existence (injectable pour les tests et les simulations).

    Returns:
        target s'il est libre, sinon le premier stem_N.ext libre.
    """
    if not exists(target):
        return target

    extension = file_extension(target.name)
    stem = target.name[: len(target.name) - len(extension)]

    counter = 1
    while True:
        candidate = target.parent / f"{stem}_{counter}{extension}"
        if not exists(candidate):
            logger.debug("Collision resolue", target=str(target), resolved=str(candidate))
            return candidate
        counter += 1
