"""Production company and country records."""

from typing import Optional

from tmdb_cli.core.entities.base import TMDBRecord


class ProductionCompany(TMDBRecord):
    """
    A production company for a movie or TV show.

    Attributes:
        id: TMDB company ID
        name: Company name
        logo_path: Path to the company logo on the TMDB image CDN
        origin_country: ISO 3166-1 code of the company country (may be empty)
    """

    id: int
    name: str
    logo_path: Optional[str] = None
    origin_country: str = ""


class ProductionCountry(TMDBRecord):
    """A country where production of a movie or TV show took place."""

    iso_3166_1: str
    name: str
