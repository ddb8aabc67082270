"""
Point d'entree CLI de MovieCode.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer

from . import __version__
from .adapters.cli.commands import extract, rename
from .config import Settings, load_config
from .container import Container
from .logging_config import configure_logging, console_level

app = typer.Typer(
    name="moviecode",
    help="Renommage des fichiers video par code film",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MovieCode - Normalisation des noms de fichiers video."""
    if quiet:
        state["quiet"] = True
    else:
        state["verbose"] = verbose

    settings = get_config()
    configure_logging(
        log_level=console_level(settings.log_level, state["verbose"], state["quiet"]),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(rename)
app.command()(extract)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    settings = get_config()
    typer.echo(f"Fichier de configuration : {settings.config_file}")
    typer.echo(f"Fichier de log : {settings.log_file}")
    typer.echo(f"Niveau de log : {settings.log_level}")

    if not settings.config_file.exists():
        typer.echo("Configuration : absente (creee avec les valeurs par defaut au premier rename)")
        return

    result = load_config(settings.config_file)
    if not result.success:
        typer.echo(f"Configuration : invalide ({result.error})")
        raise typer.Exit(1)
    config = result.config
    typer.echo(f"Repertoire racine : {config.file_path}")
    typer.echo(f"Extensions video : {', '.join(config.video_types)}")
    typer.echo(f"Proxy : {config.proxy_addr or 'aucun'}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieCode v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
