"""
Configuration de l'application.

Deux niveaux de configuration :
- Settings (pydantic-settings) : parametres du processus, charges depuis les
  variables d'environnement avec le prefixe MOVIECODE_ et un fichier .env optionnel.
- RenamerConfig (pydantic) : fichier JSON du renommage (repertoire racine,
  extensions video, proxy reserve). Charge ou cree par load_config().
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moviecode.core.errors import ConfigError
from moviecode.utils.constants import (
    CONFIG_FILENAME,
    DEFAULT_FILE_PATH,
    DEFAULT_VIDEO_TYPES,
)

# Trouver le fichier .env a la racine du projet (parent de moviecode/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe MOVIECODE_.
    Exemple : MOVIECODE_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIECODE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fichier de configuration du renommage
    config_file: Path = Field(default=Path(CONFIG_FILENAME))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/moviecode.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("config_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()


class RenamerConfig(BaseModel):
    """
    Contenu du fichier de configuration JSON.

    Les cles absentes d'un fichier existant prennent leur valeur par defaut,
    les cles inconnues sont ignorees.

    Attributs:
        file_path: Repertoire racine a scanner
        video_types: Suffixes d'extension reconnus comme video
        proxy_addr: Adresse de proxy reservee, non utilisee
    """

    file_path: str = Field(default=DEFAULT_FILE_PATH, min_length=1)
    video_types: list[str] = Field(default_factory=lambda: list(DEFAULT_VIDEO_TYPES))
    proxy_addr: str = ""

    @property
    def root_dir(self) -> Path:
        """Repertoire racine avec expansion de ~."""
        return Path(self.file_path).expanduser()


@dataclass
class ConfigLoadResult:
    """
    Resultat du chargement de la configuration.

    Attributs:
        config: Configuration chargee ou creee (None si echec)
        created: True si le fichier n'existait pas et a ete cree avec les defauts
        error: Message d'erreur (si echec)
    """

    config: Optional[RenamerConfig] = None
    created: bool = False
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Vrai si une configuration utilisable est disponible."""
        return self.config is not None and self.error is None

    def unwrap(self) -> RenamerConfig:
        """
        Retourne la configuration ou leve ConfigError en cas d'echec.

        Raises:
            ConfigError: si le chargement a echoue
        """
        if not self.success:
            raise ConfigError(self.error or "configuration unavailable")
        return self.config


def write_default_config(path: Path) -> RenamerConfig:
    """
    Ecrit la configuration par defaut dans path et la retourne.

    Leve:
        OSError: si le fichier ne peut pas etre ecrit
    """
    config = RenamerConfig()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.model_dump(), indent=4), encoding="utf-8")
    return config


def load_config(path: Path) -> ConfigLoadResult:
    """
    Charge la configuration JSON, ou la cree avec les valeurs par defaut.

    - fichier absent : les defauts sont ecrits puis retournes (created=True)
    - autre erreur d'E/S : echec (lecture ou ecriture)
    - JSON invalide ou champ de mauvais type : echec

    Args:
        path: Chemin du fichier de configuration

    Returns:
        ConfigLoadResult decrivant le succes ou l'echec
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        try:
            config = write_default_config(path)
        except OSError as e:
            logger.error("Ecriture de la configuration impossible", path=str(path), error=str(e))
            return ConfigLoadResult(error=f"error writing config file: {e}")
        logger.info("Configuration par defaut creee", path=str(path))
        return ConfigLoadResult(config=config, created=True)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Lecture de la configuration impossible", path=str(path), error=str(e))
        return ConfigLoadResult(error=f"error reading config file: {e}")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("Configuration JSON invalide", path=str(path), error=str(e))
        return ConfigLoadResult(error=f"error parsing config file: {e}")

    try:
        config = RenamerConfig.model_validate(data)
    except ValidationError as e:
        logger.error("Configuration non conforme", path=str(path), error=str(e))
        return ConfigLoadResult(error=f"invalid config file: {e}")

    logger.debug("Configuration chargee", path=str(path))
    return ConfigLoadResult(config=config)
