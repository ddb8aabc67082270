"""Sous-package CLI commands - re-exporte les commandes publiques."""

from moviecode.adapters.cli.commands.rename_commands import (
    extract,
    rename,
)

__all__ = [
    "extract",
    "rename",
]
