"""
Movie records.

``Movie`` is the shape TMDB returns inside list envelopes (search,
popular, similar, recommendations). ``MovieDetails`` is the full record
returned by ``/3/movie/{id}``.
"""

from typing import Optional

from pydantic import Field

from tmdb_cli.core.entities.base import OptionalDate, TMDBRecord
from tmdb_cli.core.entities.genre import Genre
from tmdb_cli.core.entities.language import Language
from tmdb_cli.core.entities.production import ProductionCompany, ProductionCountry


class Movie(TMDBRecord):
    """
    A movie as listed in search and list results.

    Attributes:
        id: TMDB movie ID
        title: Localized title
        original_title: Title in the original language
        original_language: ISO 639-1 code of the original language
        overview: Plot summary
        release_date: Release date, None when unknown
        genre_ids: IDs of the genres of this movie
        poster_path: Path to the poster on the TMDB image CDN
        backdrop_path: Path to the backdrop on the TMDB image CDN
        adult: Whether this is an adult movie
        video: Whether this is another kind of video rather than a movie
        popularity: TMDB popularity score
        vote_average: Average rating (0-10)
        vote_count: Number of votes
    """

    id: int
    title: str
    original_title: Optional[str] = None
    original_language: Optional[str] = None
    overview: str = ""
    release_date: OptionalDate = None
    genre_ids: list[int] = Field(default_factory=list)
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    adult: bool = False
    video: bool = False
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0

    @property
    def year(self) -> Optional[int]:
        """Release year, or None when the release date is unknown."""
        return self.release_date.year if self.release_date else None


class Collection(TMDBRecord):
    """A collection (franchise) a movie belongs to."""

    id: int
    name: str
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None


class MovieDetails(TMDBRecord):
    """
    Full details on a movie.

    ``runtime`` is in minutes. ``budget`` and ``revenue`` are in US dollars,
    0 when TMDB does not know them.
    """

    id: int
    title: str
    original_title: str
    original_language: str
    overview: Optional[str] = None
    tagline: Optional[str] = None
    status: str = ""
    release_date: OptionalDate = None
    runtime: Optional[int] = None
    budget: int = 0
    revenue: int = 0
    adult: bool = False
    video: bool = False
    homepage: Optional[str] = None
    imdb_id: Optional[str] = None
    backdrop_path: Optional[str] = None
    poster_path: Optional[str] = None
    belongs_to_collection: Optional[Collection] = None
    genres: list[Genre] = Field(default_factory=list)
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    spoken_languages: list[Language] = Field(default_factory=list)
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0

    @property
    def year(self) -> Optional[int]:
        """Release year, or None when the release date is unknown."""
        return self.release_date.year if self.release_date else None
