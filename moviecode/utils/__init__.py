"""
Utilitaires et constantes pour MovieCode.

Ce module contient les constantes partagees.
"""

from moviecode.utils.constants import (
    CONFIG_FILENAME,
    DEFAULT_FILE_PATH,
    DEFAULT_VIDEO_TYPES,
    URL_NOISE_TLDS,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_FILE_PATH",
    "DEFAULT_VIDEO_TYPES",
    "URL_NOISE_TLDS",
]
