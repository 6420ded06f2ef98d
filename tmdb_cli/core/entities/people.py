"""Cast and crew records."""

from typing import Optional

from pydantic import Field

from tmdb_cli.core.entities.base import TMDBRecord


class Cast(TMDBRecord):
    """
    An actor or actress credited on a movie or TV show.

    ``gender`` follows TMDB: 0 not set, 1 female, 2 male, 3 non-binary.
    ``cast_id`` is a legacy field that TV credits do not send.
    """

    adult: bool = False
    gender: Optional[int] = None
    id: int
    known_for_department: Optional[str] = None
    name: str
    original_name: Optional[str] = None
    popularity: float = 0.0
    profile_path: Optional[str] = None
    cast_id: Optional[int] = None
    character: str = ""
    credit_id: str
    order: int = 0


class Crew(TMDBRecord):
    """A crew member credited on a movie or TV show."""

    adult: bool = False
    gender: Optional[int] = None
    id: int
    known_for_department: Optional[str] = None
    name: str
    original_name: Optional[str] = None
    popularity: float = 0.0
    profile_path: Optional[str] = None
    credit_id: str
    department: str
    job: str


class Credits(TMDBRecord):
    """
    The cast and crew for a movie or TV show.

    Attributes:
        id: ID of the movie or show these credits belong to
        cast: Cast members, in billing order
        crew: Crew members
    """

    id: int
    cast: list[Cast] = Field(default_factory=list)
    crew: list[Crew] = Field(default_factory=list)

    def directors(self) -> list[Crew]:
        """Return the crew members whose job is Director."""
        return [member for member in self.crew if member.job == "Director"]
