"""Watchlist entry model: one movie tracked by one user."""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Index, String, false
from sqlalchemy.orm import Mapped, mapped_column, validates

from watchlist_api.core.extensions import db

from .base import DOCUMENT_ID_LENGTH, DocumentIdMixin, ReprMixin, TimestampMixin


class WatchlistEntry(DocumentIdMixin, ReprMixin, TimestampMixin, db.Model):
    """
    A movie on a user's watchlist.

    Fields
    ------
    id : str
        Opaque identifier, stored in the ``_id`` column.
    user_id : str
        Owner; always the authenticated user who created the entry.
    movie_name : str
        Title as entered (trimmed).
    watched : bool
        Whether the owner has seen the movie. Defaults to ``False``.
    """

    __tablename__ = "watchlist"

    user_id: Mapped[str] = mapped_column(
        String(DOCUMENT_ID_LENGTH),
        ForeignKey("users._id", ondelete="CASCADE"),
        nullable=False,
    )
    movie_name: Mapped[str] = mapped_column(String(255), nullable=False)
    watched: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    __table_args__ = (
        Index("ix_watchlist_user_id", "user_id"),
        Index("ix_watchlist_movie_name", "movie_name"),
    )

    @validates("movie_name")
    def _normalize_movie_name(self, key: str, value: str) -> str:
        """
        Trim the title and reject blanks.

        :raises ValueError: If the title is empty after trimming.
        """
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Movie name is required.")
        return value.strip()
