"""Reusable SQLAlchemy mixins shared by domain models (typed 2.0)."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

DOCUMENT_ID_LENGTH = 32


def new_document_id() -> str:
    """Return a fresh opaque identifier (32 lowercase hex characters)."""
    return uuid4().hex


def utcnow() -> datetime:
    """Timezone-aware "now"; keeps sub-second precision for ordering."""
    return datetime.now(UTC)


class TimestampMixin:
    """Provide ``created_at`` and ``updated_at`` timestamp columns.

    Attributes
    ----------
    created_at:
        Timezone-aware timestamp filled on insert.
    updated_at:
        Timezone-aware timestamp refreshed on update.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
    )


class DocumentIdMixin:
    """Expose an opaque string primary key stored in the ``_id`` column.

    The attribute is called ``id`` in Python while the column keeps the
    document-store name so the two tables stay shape-compatible with
    ``{"_id": ...}`` records.

    Attributes
    ----------
    id:
        Application-assigned identifier generated by :func:`new_document_id`.
    """

    id: Mapped[str] = mapped_column(
        "_id",
        String(DOCUMENT_ID_LENGTH),
        primary_key=True,
        default=new_document_id,
    )


class ReprMixin:
    """Provide a concise ``__repr__`` including the class name and id."""

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        key = getattr(self, "id", None)
        return f"<{cls} id={key}>"
