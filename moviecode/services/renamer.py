"""
Service de renommage des fichiers video par code film.

Pour chaque fichier, dans l'ordre de la liste :
- calcul du nom normalise (code_extractor)
- nom identique au nom actuel : fichier ignore
- sinon resolution d'un chemin libre (path_resolver) puis renommage

Un echec de renommage est enregistre et n'interrompt pas le lot.
Aucun retour arriere des renommages deja effectues.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from moviecode.core.ports.file_system import IFileSystem
from moviecode.services.code_extractor import CodeExtractor
from moviecode.services.path_resolver import resolve_unique_path


class RenameAction(Enum):
    """
    Issue du traitement d'un fichier.

    RENAMED: Fichier renomme (ou renommage simule en dry-run)
    SKIPPED: Nom calcule identique au nom actuel
    FAILED: Le renommage a echoue
    """

    RENAMED = "renamed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class RenameOutcome:
    """
    Resultat du traitement d'un fichier.

    Attributs:
        source: Chemin d'origine du fichier
        action: Issue du traitement
        destination: Chemin resolu (si un renommage a ete tente)
        error: Message d'erreur (si echec)
        dry_run: True si le renommage a seulement ete simule
    """

    source: Path
    action: RenameAction
    destination: Optional[Path] = None
    error: Optional[str] = None
    dry_run: bool = False


@dataclass
class RenameReport:
    """Resultat d'un lot de renommages."""

    outcomes: list[RenameOutcome] = field(default_factory=list)

    def _count(self, action: RenameAction) -> int:
        return sum(1 for outcome in self.outcomes if outcome.action is action)

    @property
    def total(self) -> int:
        """Nombre total de fichiers traites."""
        return len(self.outcomes)

    @property
    def renamed_count(self) -> int:
        return self._count(RenameAction.RENAMED)

    @property
    def skipped_count(self) -> int:
        return self._count(RenameAction.SKIPPED)

    @property
    def failed_count(self) -> int:
        return self._count(RenameAction.FAILED)


class RenamerService:
    """
    Service de renommage des fichiers video.

    Utilisation:
        renamer = RenamerService(file_system, CodeExtractor())
        report = renamer.rename_all(files)
        print(f"{report.renamed_count} renommes, {report.failed_count} erreurs")
    """

    def __init__(
        self,
        file_system: IFileSystem,
        code_extractor: CodeExtractor,
    ) -> None:
        """
        Initialise le service de renommage.

        Args:
            file_system: Adaptateur systeme de fichiers (exists, rename)
            code_extractor: Service de calcul du nom normalise
        """
        self._file_system = file_system
        self._code_extractor = code_extractor

    def rename_file(
        self,
        source: Path,
        dry_run: bool = False,
        reserved: Optional[set[Path]] = None,
    ) -> RenameOutcome:
        """
        Renomme un fichier vers son code film.

        Args:
            source: Chemin du fichier
            dry_run: Si True, calcule la destination sans renommer
            reserved: Destinations deja attribuees dans ce lot simule,
                      considerees comme occupees

        Returns:
            RenameOutcome decrivant l'issue
        """
        target = source.parent / self._code_extractor.extract(source)
        if target == source:
            logger.debug("Fichier deja normalise", file=str(source))
            return RenameOutcome(source=source, action=RenameAction.SKIPPED)

        taken = reserved if reserved is not None else set()
        destination = resolve_unique_path(
            target,
            exists=lambda path: path in taken or self._file_system.exists(path),
        )

        if dry_run:
            taken.add(destination)
            logger.debug("Renommage simule", file=str(source), target=str(destination))
            return RenameOutcome(
                source=source,
                action=RenameAction.RENAMED,
                destination=destination,
                dry_run=True,
            )

        try:
            self._file_system.rename(source, destination)
        except OSError as e:
            logger.warning(
                "Echec du renommage",
                file=str(source),
                target=str(destination),
                error=str(e),
            )
            return RenameOutcome(
                source=source,
                action=RenameAction.FAILED,
                destination=destination,
                error=str(e),
            )

        logger.info("Fichier renomme", file=str(source), target=str(destination))
        return RenameOutcome(
            source=source,
            action=RenameAction.RENAMED,
            destination=destination,
        )

    def rename_all(
        self,
        files: Iterable[Path],
        dry_run: bool = False,
        on_outcome: Optional[Callable[[RenameOutcome], None]] = None,
    ) -> RenameReport:
        """
        Traite une liste de fichiers dans l'ordre.

        Args:
            files: Fichiers a traiter (liste complete collectee au prealable)
            dry_run: Si True, aucun fichier n'est renomme
            on_outcome: Callback appele apres chaque fichier (affichage)

        Returns:
            RenameReport avec une entree par fichier
        """
        report = RenameReport()
        reserved: set[Path] = set()
        for source in files:
            outcome = self.rename_file(source, dry_run=dry_run, reserved=reserved)
            report.outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)
        return report
