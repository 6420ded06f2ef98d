"""
Base commune des handlers de ressources TMDB (films, series).

Chaque endpoint suit l'une de deux formes:
- recuperation d'un objet unique (details, credits): une requete, un modele
- production d'un curseur (critiques, recommandations, similaires,
  populaires): aucune requete, le curseur est rendu non charge
"""

from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from tmdb_cli.adapters.api.core import Core
from tmdb_cli.adapters.api.cursors import Cursor
from tmdb_cli.core.entities import Credits, Review

DetailsT = TypeVar("DetailsT", bound=BaseModel)
ItemT = TypeVar("ItemT", bound=BaseModel)


class ResourceHandler(Generic[DetailsT, ItemT]):
    """
    Handler lie a une famille de ressources TMDB (``/3/{resource}``).

    Les sous-classes definissent le segment d'URL et les modeles cibles.

    Attributes:
        RESOURCE: Segment d'URL de la ressource ("movie", "tv")
        DETAILS_MODEL: Modele decode par details()
        ITEM_MODEL: Modele des elements des curseurs de liste
    """

    RESOURCE: ClassVar[str]
    DETAILS_MODEL: ClassVar[type[BaseModel]]
    ITEM_MODEL: ClassVar[type[BaseModel]]

    def __init__(self, core: Core) -> None:
        """
        Initialise le handler.

        Args:
            core: Contexte de transport partage avec les autres handlers
        """
        self._core = core

    @property
    def host(self) -> str:
        """URL de base de l'API."""
        return self._core.host

    @property
    def token(self) -> str:
        """Jeton d'authentification."""
        return self._core.token

    def _url(self, *segments: object) -> str:
        path = "/".join(str(segment) for segment in segments)
        return self._core.url(f"3/{self.RESOURCE}/{path}")

    def _cursor(self, url: str, item_type: type[ItemT], page: int = 1) -> Cursor[ItemT]:
        return Cursor(url, self._core, item_type, page=page)

    async def details(self, media_id: int) -> DetailsT:
        """
        Recupere les details d'un media par son ID TMDB.

        Raises:
            APIStatusError: 404 si l'ID est inconnu
        """
        return await self._core.get_json(self._url(media_id), self.DETAILS_MODEL)

    async def credits(self, media_id: int) -> Credits:
        """Recupere la distribution et l'equipe technique d'un media."""
        return await self._core.get_json(self._url(media_id, "credits"), Credits)

    def reviews(self, media_id: int) -> Cursor[Review]:
        """Construit un curseur sur les critiques d'un media."""
        return self._cursor(self._url(media_id, "reviews"), Review)

    def recommendations(self, media_id: int) -> Cursor[ItemT]:
        """Construit un curseur sur les medias recommandes a partir d'un media."""
        return self._cursor(self._url(media_id, "recommendations"), self.ITEM_MODEL)

    def similar(self, media_id: int) -> Cursor[ItemT]:
        """
        Construit un curseur sur les medias similaires a un media.

        Contrairement aux recommandations, la similarite repose sur les
        genres et mots-cles.
        """
        return self._cursor(self._url(media_id, "similar"), self.ITEM_MODEL)

    def popular(self) -> Cursor[ItemT]:
        """
        Construit un curseur sur les medias populaires (liste rafraichie chaque jour).

        Un filtre de region peut etre ajoute avec ``.param("region", "US")``.
        """
        return self._cursor(self._url("popular"), self.ITEM_MODEL)
