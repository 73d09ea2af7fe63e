"""Watchlist repository: every read and write is scoped by owner."""

from __future__ import annotations

from typing import cast

from sqlalchemy import delete, select

from watchlist_api.models.watchlist import WatchlistEntry
from watchlist_api.repositories.base import BaseRepository


class WatchlistRepository(BaseRepository[WatchlistEntry]):
    """Persistence-only repository for :class:`WatchlistEntry`.

    Reads and deletes go through the owner-scoped helpers (``*_for_user``).
    """

    model = WatchlistEntry

    def _sortable_fields(self):
        return {
            "created_at": WatchlistEntry.created_at,
            "movie_name": WatchlistEntry.movie_name,
        }

    def _filterable_fields(self):
        return {
            "user_id": WatchlistEntry.user_id,
            "movie_name": WatchlistEntry.movie_name,
            "watched": WatchlistEntry.watched,
        }

    def _updatable_fields(self):
        """Owner and id are never reassigned."""
        return {"movie_name", "watched"}

    # ---------------------------- Owner-scoped ----------------------------

    def list_for_user(self, user_id: str) -> list[WatchlistEntry]:
        """Return the entries owned by ``user_id``, oldest first.

        :param user_id: Owner identifier.
        :type user_id: str
        :rtype: list[WatchlistEntry]
        """
        return self.list(filters={"user_id": user_id}, sort=["created_at"])

    def get_for_user(self, entry_id: str, user_id: str) -> WatchlistEntry | None:
        """Fetch one entry only if ``user_id`` owns it.

        :param entry_id: Entry identifier from the URL.
        :param user_id: Authenticated owner.
        :returns: The entry, or ``None`` when missing or owned by someone else.
        :rtype: WatchlistEntry | None
        """
        stmt = select(WatchlistEntry).where(
            WatchlistEntry.id == entry_id,
            WatchlistEntry.user_id == user_id,
        )
        return cast(WatchlistEntry | None, self.session.execute(stmt).scalars().first())

    def delete_for_user(self, entry_id: str, user_id: str) -> int:
        """Delete the entry if ``user_id`` owns it.

        :returns: Number of rows removed (``0`` or ``1``).
        :rtype: int
        """
        stmt = delete(WatchlistEntry).where(
            WatchlistEntry.id == entry_id,
            WatchlistEntry.user_id == user_id,
        )
        result = self.session.execute(stmt, execution_options={"synchronize_session": False})
        return int(result.rowcount or 0)

    # ---------------------------- Duplicates ----------------------------

    def movie_exists(self, movie_name: str, *, user_id: str | None = None) -> bool:
        """Return ``True`` when ``movie_name`` is already tracked.

        :param movie_name: Title to look for (exact match after trimming).
        :param user_id: Restrict the check to one owner; ``None`` checks all users.
        :rtype: bool
        """
        filters: dict[str, str] = {"movie_name": movie_name.strip()}
        if user_id is not None:
            filters["user_id"] = user_id
        return self.exists(**filters)
