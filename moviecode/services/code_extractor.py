"""
Extraction du code film depuis un nom de fichier.

Ce module fournit les transformations de nettoyage du nom de fichier
et l'extraction du code canonique.

Format du code : LETTRES-CHIFFRES, suffixe optionnel -C ou -UC,
en majuscules, suivi de l'extension d'origine (casse conservee).

Exemples :
    "[vendor-com]ABC-123(2020).mp4"  -> "ABC-123.mp4"
    "site-net_abp-042-c.MKV"         -> "ABP-042-C.MKV"
    "randomfile.mp4"                 -> "randomfile.mp4" (aucun code)
"""

import re
from pathlib import Path

from moviecode.utils.constants import URL_NOISE_TLDS

# Groupes entre crochets ou parentheses (non gourmand)
_BRACKET_GROUP = r"\[.*?\]|\(.*?\)"

# Separateur + domaine + tout ce qui suit jusqu'au prochain point
_URL_SUFFIX = r"[-_](?:" + "|".join(URL_NOISE_TLDS) + r")[^.]*"

BRACKET_GROUP_PATTERN = re.compile(_BRACKET_GROUP)
URL_SUFFIX_PATTERN = re.compile(_URL_SUFFIX)

# Passe de nettoyage complete : la premiere alternative qui correspond gagne
NOISE_PATTERN = re.compile(f"{_BRACKET_GROUP}|{_URL_SUFFIX}")

MOVIE_CODE_PATTERN = re.compile(r"[a-z]+-\d+(?:-(?:c|uc))?", re.IGNORECASE | re.ASCII)


def strip_bracket_groups(text: str) -> str:
    """Supprime les groupes [..] et (..)."""
    return BRACKET_GROUP_PATTERN.sub("", text)


def strip_url_suffixes(text: str) -> str:
    """
    Supprime les tags publicitaires de type URL.

    Un tag commence par - ou _ suivi de com/net/org/xyz et court
    jusqu'au prochain point (ex: "-javsite-com", "_fc2-net-hd").
    """
    return URL_SUFFIX_PATTERN.sub("", text)


def strip_noise(text: str) -> str:
    """
    Supprime tous les elements de bruit en une seule passe.

    Equivaut a strip_bracket_groups puis strip_url_suffixes, sauf quand un
    tag URL englobe un groupe entre crochets : le tag, plus a gauche, gagne.
    """
    return NOISE_PATTERN.sub("", text)


def file_extension(name: str) -> str:
    """
    Retourne l'extension d'un nom de fichier, point compris.

    Tout ce qui suit le dernier point, y compris pour un nom
    commencant par un point. Chaine vide s'il n'y a pas de point.
    """
    index = name.rfind(".")
    if index == -1:
        return ""
    return name[index:]


def find_movie_code(text: str) -> str | None:
    """Retourne le premier code film trouve (non normalise), ou None."""
    match = MOVIE_CODE_PATTERN.search(text)
    return match.group(0) if match else None


def extract_movie_code(filename: str | Path) -> str:
    """
    Calcule le nom normalise d'un fichier video.

    Le nom de base est nettoye, puis le premier code trouve est mis en
    majuscules et suivi de l'extension du nom d'origine.
    Sans code, le nom de base est retourne tel quel : l'appelant ne
    distingue pas ce cas d'un fichier deja bien nomme.

    Args:
        filename: Nom ou chemin du fichier.

    Returns:
        Nom de fichier normalise, ou le nom de base d'origine.
    """
    base = Path(filename).name
    code = find_movie_code(strip_noise(base))
    if code is None:
        return base
    return code.upper() + file_extension(base)


class CodeExtractor:
    """
    Service d'extraction des codes films.

    Fournit les methodes de haut niveau utilisees par le renommage
    et la CLI.

    Ce service est sans etat et peut etre utilise comme singleton.
    """

    def extract(self, filename: str | Path) -> str:
        """
        Calcule le nom normalise d'un fichier.

        Voir extract_movie_code() pour les details.
        """
        return extract_movie_code(filename)
