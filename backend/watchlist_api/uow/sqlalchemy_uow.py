"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

from contextlib import suppress

from sqlalchemy import event
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import Session, scoped_session

from watchlist_api.core.extensions import db
from watchlist_api.repositories import UserRepository, WatchlistRepository
from watchlist_api.uow.base import UnitOfWork


class SQLAlchemyRepositoryContainer:
    """Provide repository instances that share a SQLAlchemy session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session=self.session)
        self.watchlist = WatchlistRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    SQLAlchemy-backed UoW using the Flask-scoped session.

    The same session is shared across all repositories for a consistent transaction.
    """

    def __init__(self, session: Session | None = None) -> None:
        super().__init__(session=session if session is not None else db.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # No-op: the session is lazily started on the first statement.
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Read-only Unit of Work backed by the Flask-scoped SQLAlchemy session.

    This UoW:
    - Blocks ORM flushes carrying new/dirty/deleted objects.
    - Always rolls back on exit, so nothing it touched is persisted.
    - Disallows ``commit()``.

    Notes
    -----
    The guard is attached to the concrete :class:`~sqlalchemy.orm.Session`
    behind the scoped proxy; listening on the proxy would affect every
    session produced by the same factory.
    """

    def __init__(self, session: Session | None = None) -> None:
        super().__init__(session=session if session is not None else db.session)
        self._guarded: Session | None = None

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        target = self.session
        if isinstance(target, scoped_session):
            target = target()
        event.listen(target, "before_flush", self._block_writes)
        self._guarded = target
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            if self._guarded is not None:
                with suppress(InvalidRequestError):
                    event.remove(self._guarded, "before_flush", self._block_writes)
                self._guarded = None

    def _block_writes(self, session, flush_context, instances) -> None:
        if session.new or session.dirty or session.deleted:
            raise RuntimeError(
                "Read-only UnitOfWork: ORM flush blocked (new/dirty/deleted objects present)."
            )

    def commit(self) -> None:
        """
        Disallow commit in read-only Unit of Work.

        :raises RuntimeError: always, to prevent accidental writes.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        """Rollback the current transaction if active."""
        self.session.rollback()
