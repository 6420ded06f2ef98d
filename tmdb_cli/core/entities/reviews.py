"""Review records."""

from datetime import datetime
from typing import Optional

from tmdb_cli.core.entities.base import TMDBRecord


class ReviewAuthor(TMDBRecord):
    """
    Details about the author of a review.

    Attributes:
        name: Display name (often empty)
        username: TMDB username
        avatar_path: Path to the avatar image
        rating: Rating the author gave, on a 0-10 scale
    """

    name: str = ""
    username: str
    avatar_path: Optional[str] = None
    rating: Optional[float] = None


class Review(TMDBRecord):
    """
    A review for a movie or TV show.

    Attributes:
        id: TMDB review ID
        author: Author display name
        author_details: Details about the author
        content: Review body
        url: Link to the review on themoviedb.org
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: Optional[str] = None
    author: str
    author_details: ReviewAuthor
    content: str
    url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
