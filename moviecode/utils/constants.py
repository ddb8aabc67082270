"""
Constantes globales pour MovieCode.

Ce module contient les constantes utilisees dans l'application:
- Nom du fichier de configuration
- Valeurs par defaut de la configuration
- Domaines reconnus comme bruit publicitaire dans les noms de fichiers
"""

# Fichier de configuration JSON (relatif au repertoire courant)
CONFIG_FILENAME = "config.json"

# Repertoire racine scanne par defaut
DEFAULT_FILE_PATH = "./"

# Extensions video reconnues par defaut
DEFAULT_VIDEO_TYPES = (
    ".mp4",
    ".mkv",
    ".avi",
)

# Suffixes de domaine reconnus dans les tags publicitaires (ex: "-site-com")
URL_NOISE_TLDS = (
    "com",
    "net",
    "org",
    "xyz",
)
