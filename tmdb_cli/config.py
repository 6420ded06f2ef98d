"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe TMDB_,
et peut optionnellement etre fournie via un fichier .env.

Le jeton TMDB (TMDB_TOKEN) est optionnel ici: son absence n'est une erreur
qu'au moment de construire un client (ConfigurationError).
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de tmdb_cli/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe TMDB_.
    Exemple : TMDB_TOKEN=xxx TMDB_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API TMDB
    token: Optional[str] = Field(default=None)
    host: str = Field(default="https://api.themoviedb.org")
    timeout: float = Field(default=30.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="WARNING")
    log_file: Path = Field(default=Path("logs/tmdb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Supprime le "/" final de l'hote."""
        return v.rstrip("/")

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def token_configured(self) -> bool:
        """Verifie si le jeton TMDB est configure."""
        return bool(self.token)
