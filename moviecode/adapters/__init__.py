"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- file_system : Operations sur le systeme de fichiers

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

from moviecode.adapters.file_system import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
]
