"""
Shared building blocks for TMDB records.

TMDB omits fields freely and sends empty strings where a date is unknown,
so every record ignores unknown keys and dates go through ``OptionalDate``.
"""

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _blank_to_none(value: Any) -> Any:
    """Map the empty string TMDB uses for unknown dates to None."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalDate = Annotated[Optional[date], BeforeValidator(_blank_to_none)]


class TMDBRecord(BaseModel):
    """Base class for every record decoded from a TMDB payload."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
