"""
Handler TMDB pour les routes series (``/3/tv``, ``/3/search/tv``).

Usage:
    cursor = await client.tv.search("Red vs. Blue").year(2003).exec()
    details = await client.tv.details(cursor.results[0].id)
"""

from typing import Optional

from tmdb_cli.adapters.api.cursors import Cursor
from tmdb_cli.adapters.api.handlers import ResourceHandler
from tmdb_cli.adapters.api.helpers import QueryParams, opt_param, query_value
from tmdb_cli.core.entities import Show, ShowDetails


class ShowSearch:
    """
    Recherche de series a construire par chainage.

    Les setters ne font aucune requete; seul exec() interroge l'API.
    """

    def __init__(self, url: str, handler: "Tv", query: str) -> None:
        self._url = url
        self._handler = handler
        self._query = query
        self._page = 1
        self._language: Optional[str] = None
        self._year: Optional[int] = None
        self._adult = False

    @property
    def query(self) -> str:
        """Texte recherche."""
        return self._query

    def page(self, page: int) -> "ShowSearch":
        """Change la page a recuperer lors de l'execution."""
        if page < 1:
            raise ValueError(f"TMDB pages start at 1, got {page}")
        self._page = page
        return self

    def year(self, year: int) -> "ShowSearch":
        """Filtre les series dont le premier episode a ete diffuse l'annee donnee."""
        self._year = year
        return self

    def language(self, language: str) -> "ShowSearch":
        """Choisit la langue des resultats (ex: "en-US")."""
        self._language = language
        return self

    def adult(self) -> "ShowSearch":
        """Autorise les series pour adultes dans les resultats."""
        self._adult = True
        return self

    def build_params(self) -> QueryParams:
        """
        Assemble les parametres de la recherche.

        Returns:
            query et include_adult, puis language et first_air_date_year
            s'ils sont definis (omis sinon)
        """
        params: QueryParams = [
            ("query", self._query),
            ("include_adult", query_value(self._adult)),
        ]
        opt_param(params, "language", self._language)
        opt_param(params, "first_air_date_year", self._year)
        return params

    async def exec(self) -> Cursor[Show]:
        """Execute la recherche et renvoie le curseur charge avec la page demandee."""
        cursor = self._handler._cursor(self._url, Show, page=self._page)
        return await cursor.params(self.build_params()).next_page()


class Tv(ResourceHandler[ShowDetails, Show]):
    """Handler des routes series de TMDB."""

    RESOURCE = "tv"
    DETAILS_MODEL = ShowDetails
    ITEM_MODEL = Show

    def search(self, query: str) -> ShowSearch:
        """Prepare une recherche de series par nom, positionnee sur la page 1."""
        return ShowSearch(self._core.url("3/search/tv"), self, query)
