"""
Typed records decoded from TMDB payloads.

Records are pydantic models: unknown keys are ignored, optional fields
default to None (or an empty list) when TMDB omits them.

Exports:
- Movie, MovieDetails, Collection: movie list items and full details
- Show, ShowDetails, TvCreator, Episode, Network, Season: TV shows
- Credits, Cast, Crew: cast and crew of a movie or show
- Review, ReviewAuthor: user reviews
- Genre, Language, ProductionCompany, ProductionCountry: shared records
"""

from tmdb_cli.core.entities.genre import Genre
from tmdb_cli.core.entities.language import Language
from tmdb_cli.core.entities.movies import Collection, Movie, MovieDetails
from tmdb_cli.core.entities.people import Cast, Credits, Crew
from tmdb_cli.core.entities.production import ProductionCompany, ProductionCountry
from tmdb_cli.core.entities.reviews import Review, ReviewAuthor
from tmdb_cli.core.entities.tv import Episode, Network, Season, Show, ShowDetails, TvCreator

__all__ = [
    "Cast",
    "Collection",
    "Credits",
    "Crew",
    "Episode",
    "Genre",
    "Language",
    "Movie",
    "MovieDetails",
    "Network",
    "ProductionCompany",
    "ProductionCountry",
    "Review",
    "ReviewAuthor",
    "Season",
    "Show",
    "ShowDetails",
    "TvCreator",
]
