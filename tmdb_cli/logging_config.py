"""
Configuration du logging de la CLI tmdb via loguru.

Le package est muet tant que configure_logging() n'a pas ete appele
(logger.disable("tmdb_cli") dans tmdb_cli/__init__.py). La CLI l'appelle
au demarrage avec le niveau choisi par -v/-vv/-q:
- Sortie console : lisible, coloree, avec le contexte de requete (url, params)
- Sortie fichier : JSON avec rotation, limitee aux traces du package tmdb_cli

Le client TMDB trace chaque requete en DEBUG (URL et parametres, jamais le jeton).
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

PACKAGE = "tmdb_cli"

# Niveaux de log console selon -v / -vv
VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}


def resolve_log_level(verbose: int = 0, quiet: bool = False, default: str = "WARNING") -> str:
    """Traduit les options -v/-q en niveau loguru; -q l'emporte sur -v."""
    if quiet:
        return "ERROR"
    if verbose:
        return VERBOSITY_LEVELS.get(verbose, "DEBUG")
    return default


def _console_format(record: dict) -> str:
    fmt = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan> | "
        "<level>{message}</level>"
    )
    # Contexte lie a l'appel (url, params, host...), affiche seulement s'il existe
    if record["extra"]:
        fmt += " <dim>{extra}</dim>"
    return fmt + "\n{exception}"


def configure_logging(
    log_level: str = "WARNING",
    log_file: Path = Path("logs/tmdb.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    host: Optional[str] = None,
) -> None:
    """Configure le logging de la CLI et active les traces du package.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin du fichier de log JSON
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
        host : Hote TMDB cible, trace au demarrage
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=_console_format, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # requetes API en DEBUG
        format="{message}",
        filter=PACKAGE,
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.enable(PACKAGE)
    logger.debug("Logging configure", log_file=str(log_file), level=log_level, host=host)
