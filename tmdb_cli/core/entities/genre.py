"""Genre record."""

from tmdb_cli.core.entities.base import TMDBRecord


class Genre(TMDBRecord):
    """
    A genre for media.

    Attributes:
        id: TMDB genre ID
        name: Display name of the genre
    """

    id: int
    name: str
