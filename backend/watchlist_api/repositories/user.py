"""User repository for persistence and credential checks."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from watchlist_api.models.user import User
from watchlist_api.repositories.base import BaseRepository


def normalize_email(email: str) -> str:
    """Lowercase and trim, matching the model's ``@validates`` hook."""
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    It NEVER handles tokens; only DB-level user lookups and password checks.
    """

    model = User

    def _sortable_fields(self):
        """Expose sortable fields for safe public sorting."""
        return {
            "email": User.email,
            "created_at": User.created_at,
        }

    def _filterable_fields(self):
        """Whitelist fields safe for equality filters."""
        return {
            "email": User.email,
        }

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive).

        :param email: Email address to normalise and search.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == normalize_email(email))
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when a user with the provided email exists.

        :param email: Email address to normalise and search.
        :type email: str
        :rtype: bool
        """
        stmt = select(User.id).where(User.email == normalize_email(email))
        return self.session.execute(stmt).first() is not None

    # ---------------------------- Password ops ----------------------------

    def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password.

        :param email: Email address to authenticate.
        :param password: Raw password to verify.
        :returns: Authenticated user or ``None`` when credentials fail.
        :rtype: User | None
        """
        user = self.get_by_email(email)
        if not user or not user.verify_password(password):
            return None
        return user
