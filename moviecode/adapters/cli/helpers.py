"""
Utilitaires partages pour les commandes CLI de MovieCode.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container en premier argument
- format_outcome : ligne de progression pour un fichier traite
"""

from functools import wraps

from rich.console import Console
from rich.markup import escape

from moviecode.container import Container
from moviecode.services.renamer import RenameAction, RenameOutcome

console = Console(highlight=False, emoji=False)


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container()
        def my_command(container, ...):
            settings = container.config()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def format_outcome(outcome: RenameOutcome) -> str:
    """
    Construit la ligne Rich affichee pour un fichier traite.

    Les chemins sont echappes : un nom comme "[site]ABC-123.mp4"
    ne doit pas etre interprete comme du balisage Rich.
    """
    source = escape(str(outcome.source))

    if outcome.action is RenameAction.SKIPPED:
        return f"[dim]Skipped: {source} (already named correctly)[/dim]"

    if outcome.action is RenameAction.FAILED:
        destination = escape(str(outcome.destination))
        error = escape(outcome.error or "")
        return f"[red]Error renaming {source} to {destination}: {error}[/red]"

    new_name = escape(outcome.destination.name)
    if outcome.dry_run:
        return f"[yellow]Would rename: {source} -> {new_name}[/yellow]"
    return f"[green]Renamed: {source} -> {new_name}[/green]"
