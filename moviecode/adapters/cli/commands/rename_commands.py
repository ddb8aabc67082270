"""
Commandes CLI du renommage (rename, extract).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.markup import escape

from moviecode import __version__
from moviecode.adapters.cli.helpers import console, format_outcome, with_container
from moviecode.config import load_config
from moviecode.core.errors import ConfigError, ScanError


def rename(
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Fichier de configuration JSON"),
    ] = None,
    root: Annotated[
        Optional[Path],
        typer.Option("--root", "-r", help="Repertoire racine (remplace file_path)"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Simule sans renommer les fichiers"),
    ] = False,
) -> None:
    """Renomme les fichiers video du repertoire racine selon leur code film."""
    _rename(config_file, root, dry_run)


@with_container()
def _rename(
    container,
    config_file: Optional[Path],
    root: Optional[Path],
    dry_run: bool,
) -> None:
    """Implementation de la commande rename."""
    settings = container.config()
    config_path = config_file or settings.config_file

    console.print(f"MovieCode v{__version__}")

    result = load_config(config_path)
    try:
        config = result.unwrap()
    except ConfigError as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    if result.created:
        console.print("Created new config file with default values")
    else:
        console.print("Loaded existing config file")

    if root is not None:
        config = config.model_copy(update={"file_path": str(root)})
    console.print(f"Using config: {escape(str(config.model_dump()))}", soft_wrap=True)

    scanner = container.scanner_service()
    try:
        video_files = scanner.scan(config)
    except ScanError as e:
        logger.error("Parcours interrompu", root=config.file_path, error=str(e))
        console.print(f"[red]Error walking directory: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    console.print(f"Found {len(video_files)} video files")

    renamer = container.renamer_service()
    report = renamer.rename_all(
        video_files,
        dry_run=dry_run,
        on_outcome=lambda outcome: console.print(format_outcome(outcome), soft_wrap=True),
    )

    verb = "to rename" if dry_run else "renamed"
    console.print(
        f"\n[bold]Done: {report.renamed_count} {verb}, "
        f"{report.skipped_count} skipped, {report.failed_count} failed[/bold]"
    )


@with_container()
def _extract(container, names: list[str]) -> None:
    """Implementation de la commande extract."""
    extractor = container.code_extractor()
    for name in names:
        code = extractor.extract(name)
        console.print(f"{escape(name)} -> {escape(code)}", soft_wrap=True)


def extract(
    names: Annotated[
        list[str],
        typer.Argument(help="Noms de fichiers a analyser"),
    ],
) -> None:
    """Affiche le nom normalise calcule pour chaque nom, sans rien renommer."""
    _extract(names)
