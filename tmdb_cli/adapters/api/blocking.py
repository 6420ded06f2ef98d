"""
Facade bloquante du client TMDB.

Chaque BlockingClient possede sa propre boucle asyncio et y execute toutes
les coroutines du Client async. Le pool httpx reste ainsi attache a une
seule boucle pendant toute la vie du client, ce que ne garantit pas un
asyncio.run() par appel.

Ne pas utiliser depuis une boucle deja en cours: employer Client directement.

Usage:
    with BlockingClient.from_env() as tmdb:
        cursor = tmdb.movies.search("13 Hours").year(2016).exec()
        for page in cursor.pages():
            print([movie.title for movie in page.results])
"""

import asyncio
from typing import Any, Coroutine, Generic, Iterable, Iterator, Optional, TypeVar, Union

import httpx
from loguru import logger

from tmdb_cli.adapters.api.client import Client, require_token
from tmdb_cli.adapters.api.core import DEFAULT_HOST, DEFAULT_TIMEOUT, Core
from tmdb_cli.adapters.api.cursors import Cursor
from tmdb_cli.adapters.api.movies import Movies, MovieSearch
from tmdb_cli.adapters.api.tv import ShowSearch, Tv
from tmdb_cli.config import Settings
from tmdb_cli.core.entities import Credits, Review

T = TypeVar("T")


class _LoopRunner:
    """Boucle asyncio privee sur laquelle tournent toutes les requetes d'un client."""

    def __init__(self) -> None:
        self._loop = asyncio.new_event_loop()

    @property
    def is_closed(self) -> bool:
        return self._loop.is_closed()

    def run(self, coro: Coroutine[Any, Any, T]) -> T:
        if self._loop.is_closed():
            coro.close()
            raise RuntimeError("BlockingClient is closed")
        return self._loop.run_until_complete(coro)

    def close(self) -> None:
        if not self._loop.is_closed():
            self._loop.run_until_complete(self._loop.shutdown_asyncgens())
            self._loop.close()


class BlockingCursor(Generic[T]):
    """
    Version bloquante d'un Cursor.

    Les attributs d'etat sont lus sur le Cursor sous-jacent; exec(),
    next_page() et pages() attendent la fin de la requete.
    """

    def __init__(self, cursor: Cursor, runner: _LoopRunner) -> None:
        self._cursor = cursor
        self._runner = runner

    @property
    def cursor(self) -> Cursor:
        """Cursor async sous-jacent."""
        return self._cursor

    @property
    def url(self) -> str:
        return self._cursor.url

    @property
    def page(self) -> int:
        return self._cursor.page

    @property
    def query_params(self) -> list[tuple[str, str]]:
        return self._cursor.query_params

    @property
    def results(self) -> list[T]:
        return self._cursor.results

    @property
    def total_pages(self) -> int:
        return self._cursor.total_pages

    @property
    def total_results(self) -> int:
        return self._cursor.total_results

    @property
    def fetched(self) -> bool:
        return self._cursor.fetched

    @property
    def has_next_page(self) -> bool:
        return self._cursor.has_next_page

    def set_page(self, page: int) -> "BlockingCursor[T]":
        self._cursor.set_page(page)
        return self

    def param(self, key: str, value: object) -> "BlockingCursor[T]":
        self._cursor.param(key, value)
        return self

    def params(self, params: Iterable[tuple[str, object]]) -> "BlockingCursor[T]":
        self._cursor.params(params)
        return self

    def exec(self) -> "BlockingCursor[T]":
        """Recupere la page courante (voir Cursor.exec)."""
        self._runner.run(self._cursor.exec())
        return self

    def next_page(self) -> "BlockingCursor[T]":
        """Avance sur la prochaine page non encore lue (voir Cursor.next_page)."""
        self._runner.run(self._cursor.next_page())
        return self

    def pages(self) -> Iterator["BlockingCursor[T]"]:
        """Parcourt sequentiellement les pages restantes."""
        if not self.fetched:
            yield self.next_page()
        while self.has_next_page:
            yield self.next_page()

    def __iter__(self) -> Iterator[T]:
        return iter(self._cursor.results)

    def __repr__(self) -> str:
        return f"Blocking{self._cursor!r}"


class BlockingSearch:
    """
    Version bloquante d'une MovieSearch ou ShowSearch.

    Les setters du builder sous-jacent restent chainables et renvoient
    cette facade; exec() renvoie un BlockingCursor.
    """

    def __init__(self, search: Union[MovieSearch, ShowSearch], runner: _LoopRunner) -> None:
        self._search = search
        self._runner = runner

    @property
    def query(self) -> str:
        return self._search.query

    def build_params(self) -> list[tuple[str, str]]:
        return self._search.build_params()

    def exec(self) -> BlockingCursor:
        """Execute la recherche sur la page selectionnee."""
        return BlockingCursor(self._runner.run(self._search.exec()), self._runner)

    def __getattr__(self, name: str):
        setter = getattr(self._search, name)

        def chained(*args, **kwargs) -> "BlockingSearch":
            setter(*args, **kwargs)
            return self

        return chained


class BlockingHandler:
    """Version bloquante d'un handler Movies ou Tv."""

    def __init__(self, handler: Union[Movies, Tv], runner: _LoopRunner) -> None:
        self._handler = handler
        self._runner = runner

    def details(self, media_id: int):
        """Recupere les details d'un media par son ID TMDB."""
        return self._runner.run(self._handler.details(media_id))

    def credits(self, media_id: int) -> Credits:
        """Recupere la distribution et l'equipe technique d'un media."""
        return self._runner.run(self._handler.credits(media_id))

    def reviews(self, media_id: int) -> BlockingCursor[Review]:
        return BlockingCursor(self._handler.reviews(media_id), self._runner)

    def recommendations(self, media_id: int) -> BlockingCursor:
        return BlockingCursor(self._handler.recommendations(media_id), self._runner)

    def similar(self, media_id: int) -> BlockingCursor:
        return BlockingCursor(self._handler.similar(media_id), self._runner)

    def popular(self) -> BlockingCursor:
        return BlockingCursor(self._handler.popular(), self._runner)

    def search(self, query: str) -> BlockingSearch:
        """Prepare une recherche par titre ou nom, positionnee sur la page 1."""
        return BlockingSearch(self._handler.search(query), self._runner)


class BlockingClient:
    """
    Client TMDB bloquant, meme API que Client sans await.

    Attributes:
        movies: Handler bloquant des routes films
        tv: Handler bloquant des routes series
    """

    def __init__(
        self,
        token: str,
        host: str = DEFAULT_HOST,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client et sa boucle privee.

        Raises:
            ConfigurationError: Si le jeton est vide
        """
        self._client = Client(token, host=host, timeout=timeout, http_client=http_client)
        self._runner = _LoopRunner()
        self.movies = BlockingHandler(self._client.movies, self._runner)
        self.tv = BlockingHandler(self._client.tv, self._runner)
        logger.debug("Client TMDB bloquant initialise", host=self._client.core.host)

    @classmethod
    def from_settings(cls, settings: Settings) -> "BlockingClient":
        """Construit un client depuis la configuration (voir Client.from_settings)."""
        return cls(require_token(settings), host=settings.host, timeout=settings.timeout)

    @classmethod
    def from_env(cls) -> "BlockingClient":
        """Construit un client avec le jeton lu dans TMDB_TOKEN."""
        return cls.from_settings(Settings())

    @property
    def core(self) -> Core:
        """Contexte de transport partage par les handlers."""
        return self._client.core

    @property
    def is_closed(self) -> bool:
        return self._runner.is_closed

    def close(self) -> None:
        """Ferme le client HTTP puis la boucle privee. Peut etre appele plusieurs fois."""
        if self._runner.is_closed:
            return
        try:
            self._runner.run(self._client.close())
        finally:
            self._runner.close()

    def __enter__(self) -> "BlockingClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
