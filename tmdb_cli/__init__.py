"""
tmdb-cli - Client type pour l'API The Movie Database (TMDB).

Ce package fournit des handlers films et series qui construisent les
requetes authentifiees, paginent les listes via des curseurs et decodent
les reponses JSON en enregistrements types.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (enregistrements TMDB)
- adapters/ : Couche infrastructure (client API, CLI)
"""

from loguru import logger

from tmdb_cli.adapters.api import (
    APIStatusError,
    BlockingClient,
    Client,
    ConfigurationError,
    Cursor,
    DecodeError,
    TMDBError,
    TransportError,
)

__version__ = "0.1.0"

# Bibliotheque silencieuse par defaut: la CLI reactive ses logs dans configure_logging()
logger.disable("tmdb_cli")

__all__ = [
    "APIStatusError",
    "BlockingClient",
    "Client",
    "ConfigurationError",
    "Cursor",
    "DecodeError",
    "TMDBError",
    "TransportError",
    "__version__",
]
