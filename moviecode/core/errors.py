"""
Erreurs du domaine MovieCode.

Deux niveaux de gravite :
- fatales (ConfigError, ScanError) : interrompent le run complet
- par fichier (OSError au renommage) : signalees puis ignorees
"""


class MovieCodeError(Exception):
    """Erreur de base de l'application."""


class ConfigError(MovieCodeError):
    """Fichier de configuration illisible, invalide ou impossible a creer."""


class ScanError(MovieCodeError):
    """Erreur d'entree/sortie pendant le parcours du repertoire racine."""
