"""
TV show records.

``Show`` is the list-envelope shape; ``ShowDetails`` and its sub-records
come from ``/3/tv/{id}``.
"""

from typing import Optional

from pydantic import Field

from tmdb_cli.core.entities.base import OptionalDate, TMDBRecord
from tmdb_cli.core.entities.genre import Genre
from tmdb_cli.core.entities.language import Language
from tmdb_cli.core.entities.production import ProductionCompany, ProductionCountry


class Show(TMDBRecord):
    """
    A TV show as listed in search and list results.

    Attributes:
        id: TMDB show ID
        name: Localized name
        original_name: Name in the original language
        original_language: ISO 639-1 code of the original language
        overview: Synopsis
        first_air_date: Date the first episode aired, None when unknown
        origin_country: ISO 3166-1 codes of the countries the show comes from
        genre_ids: IDs of the genres of this show
        poster_path: Path to the poster on the TMDB image CDN
        backdrop_path: Path to the backdrop on the TMDB image CDN
        adult: Whether this is an adult show
        popularity: TMDB popularity score
        vote_average: Average rating (0-10)
        vote_count: Number of votes
    """

    id: int
    name: str
    original_name: Optional[str] = None
    original_language: Optional[str] = None
    overview: str = ""
    first_air_date: OptionalDate = None
    origin_country: list[str] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    adult: bool = False
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0

    @property
    def year(self) -> Optional[int]:
        """Year of the first air date, or None when unknown."""
        return self.first_air_date.year if self.first_air_date else None


class TvCreator(TMDBRecord):
    """A person credited as creator of a TV show."""

    id: int
    credit_id: str
    name: str
    gender: Optional[int] = None
    profile_path: Optional[str] = None


class Episode(TMDBRecord):
    """An episode of a TV show (last or next episode to air)."""

    id: int
    name: str
    overview: str = ""
    air_date: OptionalDate = None
    episode_number: int
    season_number: int
    production_code: str = ""
    runtime: Optional[int] = None
    still_path: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0


class Network(TMDBRecord):
    """A TV network broadcasting a show."""

    id: int
    name: str
    logo_path: Optional[str] = None
    origin_country: str = ""


class Season(TMDBRecord):
    """A season summary as listed on the show details."""

    id: int
    name: str
    overview: str = ""
    air_date: OptionalDate = None
    episode_count: int = 0
    season_number: int
    poster_path: Optional[str] = None
    vote_average: float = 0.0


class ShowDetails(TMDBRecord):
    """
    Full details on a TV show.

    ``show_type`` maps the ``type`` key of the payload (Scripted,
    Documentary, Reality...). ``next_episode_to_air`` is None once a show
    has ended.
    """

    id: int
    name: str
    original_name: str
    original_language: str
    overview: str = ""
    tagline: str = ""
    status: str = ""
    show_type: str = Field(default="", alias="type")
    homepage: str = ""
    in_production: bool = False
    adult: bool = False
    first_air_date: OptionalDate = None
    last_air_date: OptionalDate = None
    last_episode_to_air: Optional[Episode] = None
    next_episode_to_air: Optional[Episode] = None
    number_of_episodes: int = 0
    number_of_seasons: int = 0
    episode_run_time: list[int] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    origin_country: list[str] = Field(default_factory=list)
    created_by: list[TvCreator] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    networks: list[Network] = Field(default_factory=list)
    seasons: list[Season] = Field(default_factory=list)
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    spoken_languages: list[Language] = Field(default_factory=list)
    backdrop_path: Optional[str] = None
    poster_path: Optional[str] = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0

    @property
    def year(self) -> Optional[int]:
        """Year of the first air date, or None when unknown."""
        return self.first_air_date.year if self.first_air_date else None
