"""
Point d'entree du client TMDB.

Le Client construit un unique Core (hote, jeton, client HTTP partage) et
l'injecte dans les handlers films et series.

Usage:
    async with Client.from_env() as tmdb:
        cursor = await tmdb.movies.search("13 Hours").year(2016).exec()
        details = await tmdb.tv.details(39373)
"""

from typing import Optional

import httpx
from loguru import logger

from tmdb_cli.adapters.api.core import DEFAULT_HOST, DEFAULT_TIMEOUT, Core
from tmdb_cli.adapters.api.errors import ConfigurationError
from tmdb_cli.adapters.api.movies import Movies
from tmdb_cli.adapters.api.tv import Tv
from tmdb_cli.config import Settings


def require_token(settings: Settings) -> str:
    """
    Renvoie le jeton configure.

    Raises:
        ConfigurationError: Si TMDB_TOKEN n'est pas defini
    """
    if not settings.token:
        raise ConfigurationError(
            "TMDB_TOKEN is not set (environment variable or .env file)"
        )
    return settings.token


class Client:
    """
    Client TMDB composite exposant les handlers ``movies`` et ``tv``.

    Attributes:
        movies: Handler des routes films
        tv: Handler des routes series
    """

    def __init__(
        self,
        token: str,
        host: str = DEFAULT_HOST,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client avec un jeton explicite.

        Args:
            token: Cle API TMDB v3
            host: URL de base de l'API (defaut: https://api.themoviedb.org)
            timeout: Delai maximum par requete en secondes
            http_client: Client httpx a partager (optionnel)

        Raises:
            ConfigurationError: Si le jeton est vide
        """
        if not token:
            raise ConfigurationError("A TMDB token is required to build a client")

        self._core = Core(host, token, timeout=timeout, http_client=http_client)
        self.movies = Movies(self._core)
        self.tv = Tv(self._core)
        logger.debug("Client TMDB initialise", host=self._core.host)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Client":
        """
        Construit un client depuis la configuration applicative.

        Raises:
            ConfigurationError: Si TMDB_TOKEN n'est pas defini
        """
        return cls(require_token(settings), host=settings.host, timeout=settings.timeout)

    @classmethod
    def from_env(cls) -> "Client":
        """Construit un client avec le jeton lu dans la variable d'environnement TMDB_TOKEN."""
        return cls.from_settings(Settings())

    @property
    def core(self) -> Core:
        """Contexte de transport partage par les handlers."""
        return self._core

    async def close(self) -> None:
        """
        Ferme le client HTTP partage.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        await self._core.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
