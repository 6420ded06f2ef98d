"""
Client API TMDB (The Movie Database).

Infrastructure:
- Client: point d'entree exposant les handlers movies et tv
- BlockingClient: meme API sans await, sur une boucle asyncio privee
- Core: contexte de transport partage (hote, jeton, client httpx)
- Cursor: pagination generique sur les endpoints de liste
- Movies / Tv: handlers de ressources, MovieSearch / ShowSearch: recherches chainees
- TMDBError et derivees: erreurs de transport, de statut HTTP et de decodage
"""

from tmdb_cli.adapters.api.blocking import BlockingClient, BlockingCursor, BlockingSearch
from tmdb_cli.adapters.api.client import Client
from tmdb_cli.adapters.api.core import DEFAULT_HOST, DEFAULT_TIMEOUT, Core
from tmdb_cli.adapters.api.cursors import Cursor, CursorPage
from tmdb_cli.adapters.api.errors import (
    APIStatusError,
    ConfigurationError,
    DecodeError,
    TMDBError,
    TransportError,
)
from tmdb_cli.adapters.api.movies import Movies, MovieSearch
from tmdb_cli.adapters.api.tv import ShowSearch, Tv

__all__ = [
    "APIStatusError",
    "BlockingClient",
    "BlockingCursor",
    "BlockingSearch",
    "Client",
    "ConfigurationError",
    "Core",
    "Cursor",
    "CursorPage",
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "DecodeError",
    "MovieSearch",
    "Movies",
    "ShowSearch",
    "TMDBError",
    "TransportError",
    "Tv",
]
