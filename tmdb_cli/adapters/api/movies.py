"""
Handler TMDB pour les routes films (``/3/movie``, ``/3/search/movie``).

Usage:
    cursor = await client.movies.search("13 Hours").year(2016).exec()
    details = await client.movies.details(cursor.results[0].id)
    credits = await client.movies.credits(details.id)
"""

from typing import Optional

from tmdb_cli.adapters.api.cursors import Cursor
from tmdb_cli.adapters.api.handlers import ResourceHandler
from tmdb_cli.adapters.api.helpers import QueryParams, opt_param, query_value
from tmdb_cli.core.entities import Movie, MovieDetails


class MovieSearch:
    """
    Recherche de films a construire par chainage.

    Les setters ne font aucune requete; seul exec() interroge l'API.
    L'ordre des parametres envoyes est fixe, l'ordre d'appel des setters
    n'a donc aucune incidence sur la requete.

    Example:
        cursor = await movies.search("Heat").year(1995).language("fr-FR").exec()
    """

    def __init__(self, url: str, handler: "Movies", query: str) -> None:
        self._url = url
        self._handler = handler
        self._query = query
        # TMDB numerote les pages a partir de 1
        self._page = 1
        self._region: Optional[str] = None
        self._year: Optional[int] = None
        self._primary_year: Optional[int] = None
        self._language: Optional[str] = None
        self._adult = False

    @property
    def query(self) -> str:
        """Texte recherche."""
        return self._query

    def page(self, page: int) -> "MovieSearch":
        """Change la page a recuperer lors de l'execution."""
        if page < 1:
            raise ValueError(f"TMDB pages start at 1, got {page}")
        self._page = page
        return self

    def region(self, region: str) -> "MovieSearch":
        """Filtre les films par region (code ISO 3166-1)."""
        self._region = region
        return self

    def year(self, year: int) -> "MovieSearch":
        """Filtre les films sortis l'annee donnee."""
        self._year = year
        return self

    def primary_year(self, primary_year: int) -> "MovieSearch":
        """Filtre les films dont la sortie principale a eu lieu l'annee donnee."""
        self._primary_year = primary_year
        return self

    def language(self, language: str) -> "MovieSearch":
        """Choisit la langue des resultats (ex: "fr-FR")."""
        self._language = language
        return self

    def adult(self) -> "MovieSearch":
        """Autorise les films pour adultes dans les resultats."""
        self._adult = True
        return self

    def build_params(self) -> QueryParams:
        """
        Assemble les parametres de la recherche.

        Returns:
            query et adult, puis region, year, primary_year et language
            s'ils sont definis (omis sinon)
        """
        params: QueryParams = [
            ("query", self._query),
            ("adult", query_value(self._adult)),
        ]
        opt_param(params, "region", self._region)
        opt_param(params, "year", self._year)
        opt_param(params, "primary_year", self._primary_year)
        opt_param(params, "language", self._language)
        return params

    async def exec(self) -> Cursor[Movie]:
        """
        Execute la recherche sur la page selectionnee.

        Returns:
            Curseur charge avec la page demandee
        """
        cursor = self._handler._cursor(self._url, Movie, page=self._page)
        return await cursor.params(self.build_params()).next_page()


class Movies(ResourceHandler[MovieDetails, Movie]):
    """
    Handler des routes films de TMDB.

    Example:
        movies = Movies(core)
        details = await movies.details(157336)
        reviews = await movies.reviews(157336).exec()
    """

    RESOURCE = "movie"
    DETAILS_MODEL = MovieDetails
    ITEM_MODEL = Movie

    def search(self, query: str) -> MovieSearch:
        """
        Prepare une recherche de films par titre.

        Args:
            query: Texte a rechercher

        Returns:
            MovieSearch positionnee sur la page 1
        """
        return MovieSearch(self._core.url("3/search/movie"), self, query)
