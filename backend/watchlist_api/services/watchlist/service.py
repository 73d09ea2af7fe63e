"""
WatchlistService
================

Owner-scoped CRUD over watchlist entries. The acting user always comes from
the :class:`Principal` produced by the bearer-token gate; entries owned by
somebody else behave exactly like entries that do not exist.
"""

from __future__ import annotations

import logging

from watchlist_api.models.watchlist import WatchlistEntry
from watchlist_api.services._shared.base import BaseService, UnitOfWorkFactory
from watchlist_api.services._shared.dto import Principal
from watchlist_api.services._shared.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
)
from watchlist_api.services.watchlist.dto import EntryCreateIn, EntryOut, EntryUpdateIn

log = logging.getLogger(__name__)

ENTITY = "Watchlist entry"


def _to_out(entry: WatchlistEntry) -> EntryOut:
    return EntryOut(
        id=entry.id,
        user_id=entry.user_id,
        movie_name=entry.movie_name,
        watched=bool(entry.watched),
    )


class WatchlistService(BaseService):
    """
    Application service for the caller's watchlist.

    Responsibilities
    ----------------
    - Reject duplicate titles (per owner, or across all users when
      ``duplicate_scope == "global"``).
    - Stamp new entries with the caller's id.
    - Filter every list/update/delete by the caller's id.
    """

    def __init__(
        self,
        *,
        duplicate_scope: str = "user",
        uow_factory: UnitOfWorkFactory | None = None,
        ro_uow_factory: UnitOfWorkFactory | None = None,
    ) -> None:
        super().__init__(uow_factory=uow_factory, ro_uow_factory=ro_uow_factory)
        if duplicate_scope not in ("user", "global"):
            raise ValueError(f"Unknown duplicate scope: {duplicate_scope!r}")
        self.duplicate_scope = duplicate_scope

    def _is_duplicate(self, repo, principal: Principal, movie_name: str) -> bool:
        owner = principal.user_id if self.duplicate_scope == "user" else None
        return repo.movie_exists(movie_name, user_id=owner)

    # --------------------------------------------------------------------- #
    # Commands
    # --------------------------------------------------------------------- #

    def add(self, principal: Principal, dto: EntryCreateIn) -> EntryOut:
        """
        Add a movie to the caller's watchlist.

        :param principal: Authenticated caller.
        :param dto: Title and initial watched flag.
        :returns: The stored entry.
        :rtype: EntryOut
        :raises ConflictError: When the title is already tracked.
        """
        with self.rw_uow() as uow:
            repo = uow.watchlist
            if self._is_duplicate(repo, principal, dto.movie_name):
                raise ConflictError(ENTITY, "movie already exists in watchlist")

            entry = repo.add(
                WatchlistEntry(
                    user_id=principal.user_id,
                    movie_name=dto.movie_name,
                    watched=dto.watched,
                )
            )
            out = _to_out(entry)

        log.info("watchlist.added", extra={"user_id": principal.user_id})
        return out

    def update(self, principal: Principal, entry_id: str, dto: EntryUpdateIn) -> EntryOut:
        """
        Merge the provided fields into one of the caller's entries.

        Renaming does not run the duplicate check; uniqueness is only
        enforced when adding.

        :param principal: Authenticated caller.
        :param entry_id: Entry identifier from the URL.
        :param dto: Fields to change.
        :returns: The updated entry.
        :raises InvalidInputError: When no field was provided.
        :raises NotFoundError: When the caller owns no such entry.
        """
        changes = dto.changes()
        if not changes:
            raise InvalidInputError("No updatable fields provided")

        with self.rw_uow() as uow:
            repo = uow.watchlist
            entry = repo.get_for_user(entry_id, principal.user_id)
            if entry is None:
                raise NotFoundError(ENTITY, entry_id)
            repo.update(entry, **changes)
            out = _to_out(entry)

        return out

    def delete(self, principal: Principal, entry_id: str) -> None:
        """
        Remove one of the caller's entries.

        :raises NotFoundError: When nothing owned by the caller was removed.
        """
        with self.rw_uow() as uow:
            removed = uow.watchlist.delete_for_user(entry_id, principal.user_id)
            if removed == 0:
                raise NotFoundError(ENTITY, entry_id)

        log.info("watchlist.deleted", extra={"user_id": principal.user_id})

    # --------------------------------------------------------------------- #
    # Queries
    # --------------------------------------------------------------------- #

    def list(self, principal: Principal) -> list[EntryOut]:
        """Return the caller's entries, oldest first."""
        with self.ro_uow() as uow:
            return [_to_out(e) for e in uow.watchlist.list_for_user(principal.user_id)]
