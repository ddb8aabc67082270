"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .config import Settings
from .services.code_extractor import CodeExtractor
from .services.renamer import RenamerService
from .services.scanner import ScannerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        scanner = container.scanner_service()
        renamer = container.renamer_service()
    """

    # Configuration - singleton chargee une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)

    # Services sans etat (Singletons)
    code_extractor = providers.Singleton(CodeExtractor)

    # Services
    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
    )
    renamer_service = providers.Factory(
        RenamerService,
        file_system=file_system,
        code_extractor=code_extractor,
    )
