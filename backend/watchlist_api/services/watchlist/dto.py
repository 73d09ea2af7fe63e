"""
DTOs for WatchlistService.

Data Transfer Objects (DTOs) isolate the service layer from ORM models,
ensuring clear input/output contracts and type safety.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class EntryCreateIn:
    """
    Input DTO for adding a movie.

    :param movie_name: Title to track.
    :type movie_name: str
    :param watched: Initial watched flag.
    :type watched: bool
    """

    movie_name: str
    watched: bool = False


@dataclass(frozen=True, slots=True)
class EntryUpdateIn:
    """
    Partial update; ``None`` means "leave unchanged".

    :param movie_name: New title.
    :type movie_name: str | None
    :param watched: New watched flag.
    :type watched: bool | None
    """

    movie_name: str | None = None
    watched: bool | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields that were provided."""
        return {
            k: v
            for k, v in {"movie_name": self.movie_name, "watched": self.watched}.items()
            if v is not None
        }


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class EntryOut:
    """
    Watchlist entry as returned to its owner.

    :param id: Entry identifier.
    :param user_id: Owner identifier.
    :param movie_name: Title.
    :param watched: Watched flag.
    """

    id: str
    user_id: str
    movie_name: str
    watched: bool
