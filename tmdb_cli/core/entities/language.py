"""Spoken language record."""

from typing import Optional

from tmdb_cli.core.entities.base import TMDBRecord


class Language(TMDBRecord):
    """
    A language spoken in a movie or TV show.

    Attributes:
        iso_639_1: ISO 639-1 code of the language
        name: Native name of the language (may be empty)
        english_name: English name of the language, when provided
    """

    iso_639_1: str
    name: str = ""
    english_name: Optional[str] = None
