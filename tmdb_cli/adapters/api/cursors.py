"""
Curseur de pagination generique pour les listes TMDB.

Les endpoints de liste (recherche, populaires, similaires, recommandations,
critiques) renvoient une enveloppe:

    {"page": 1, "results": [...], "total_pages": 42, "total_results": 833}

Un Cursor est ancre sur une URL et avance d'une page a la fois. Chaque
avance envoie exactement une requete et remplace integralement les
resultats; en cas d'echec l'exception remonte et le curseur reste tel
qu'il etait (y compris son numero de page).

Usage:
    cursor = client.movies.popular().param("region", "US")
    await cursor.next_page()  # page 1
    await cursor.next_page()  # page 2
    for movie in cursor.results:
        print(movie.title)
"""

from typing import TYPE_CHECKING, AsyncIterator, Generic, Iterable, Iterator, TypeVar

from pydantic import BaseModel, Field

from tmdb_cli.adapters.api.core import decode
from tmdb_cli.adapters.api.helpers import QueryParams, query_value

if TYPE_CHECKING:
    from tmdb_cli.adapters.api.core import Core

T = TypeVar("T", bound=BaseModel)


class CursorPage(BaseModel, Generic[T]):
    """Enveloppe d'une page de resultats TMDB."""

    page: int
    results: list[T] = Field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0


def _check_page(page: int) -> int:
    if page < 1:
        raise ValueError(f"TMDB pages start at 1, got {page}")
    return page


class Cursor(Generic[T]):
    """
    Curseur sur les resultats pagines d'un endpoint TMDB.

    Le curseur n'est pas sur pour des modifications concurrentes: chaque
    parcours concurrent doit utiliser son propre Cursor.

    Attributes:
        page: Numero de la page courante (commence a 1)
        query_params: Parametres ajoutes a chaque requete, dans l'ordre d'ajout
        results: Resultats de la derniere page recuperee avec succes
        total_pages: Nombre total de pages (0 avant la premiere requete)
        total_results: Nombre total de resultats (0 avant la premiere requete)
        fetched: True des qu'une page a ete recuperee avec succes
    """

    def __init__(self, url: str, core: "Core", item_type: type[T], page: int = 1) -> None:
        """
        Initialise un curseur non encore charge.

        Args:
            url: URL de l'endpoint de liste
            core: Contexte de transport partage
            item_type: Modele pydantic des elements de ``results``
            page: Page initiale (defaut: 1)
        """
        self._url = url
        self._core = core
        self._page_model = CursorPage[item_type]
        self.item_type = item_type
        self.page = _check_page(page)
        self.query_params: QueryParams = []
        self.results: list[T] = []
        self.total_pages = 0
        self.total_results = 0
        self.fetched = False

    @property
    def url(self) -> str:
        """URL de l'endpoint, fixe pour toute la vie du curseur."""
        return self._url

    @property
    def token(self) -> str:
        """Jeton d'authentification envoye avec chaque requete."""
        return self._core.token

    @property
    def has_next_page(self) -> bool:
        """Indique si l'API annonce une page apres la page courante."""
        return self.page < self.total_pages

    def set_page(self, page: int) -> "Cursor[T]":
        """
        Change la page a recuperer, sans requete.

        Aucune borne haute n'est verifiee: l'API reste juge d'une page
        hors limites.

        Raises:
            ValueError: Si page < 1
        """
        self.page = _check_page(page)
        return self

    def param(self, key: str, value: object) -> "Cursor[T]":
        """Ajoute un parametre de requete (les cles existantes ne sont jamais ecrasees)."""
        self.query_params.append((key, query_value(value)))
        return self

    def params(self, params: Iterable[tuple[str, object]]) -> "Cursor[T]":
        """Ajoute plusieurs parametres de requete, dans l'ordre fourni."""
        for key, value in params:
            self.param(key, value)
        return self

    async def _fetch(self, page: int) -> CursorPage[T]:
        query = [("page", str(page)), *self.query_params]
        response = await self._core.get(self._url, query)
        return decode(response, self._page_model, self._url)

    def _apply(self, envelope: CursorPage[T]) -> None:
        self.results = envelope.results
        self.total_pages = envelope.total_pages
        self.total_results = envelope.total_results
        self.fetched = True

    async def exec(self) -> "Cursor[T]":
        """
        Recupere la page courante et remplace les resultats.

        Returns:
            Le curseur mis a jour

        Raises:
            TransportError, APIStatusError, DecodeError: l'etat est inchange
        """
        envelope = await self._fetch(self.page)
        self._apply(envelope)
        return self

    async def next_page(self) -> "Cursor[T]":
        """
        Avance sur la prochaine page non encore lue.

        Sur un curseur jamais charge, c'est la page courante (la page 1
        pour un curseur neuf); ensuite c'est page + 1. Le numero de page
        n'est mis a jour qu'apres une reponse valide, un nouvel appel
        apres un echec redemande donc la meme page.

        Returns:
            Le curseur mis a jour

        Raises:
            TransportError, APIStatusError, DecodeError: l'etat est inchange
        """
        target = self.page + 1 if self.fetched else self.page
        envelope = await self._fetch(target)
        self.page = target
        self._apply(envelope)
        return self

    async def pages(self) -> AsyncIterator["Cursor[T]"]:
        """
        Parcourt sequentiellement les pages restantes.

        Produit le curseur apres chaque page recuperee, jusqu'a la derniere
        page annoncee par l'API. Une page deja chargee n'est pas reproduite.
        """
        if not self.fetched:
            yield await self.next_page()
        while self.has_next_page:
            yield await self.next_page()

    def __iter__(self) -> Iterator[T]:
        return iter(self.results)

    def __repr__(self) -> str:
        return (
            f"Cursor({self.item_type.__name__}, url={self._url!r}, page={self.page}, "
            f"total_pages={self.total_pages}, total_results={self.total_results})"
        )
