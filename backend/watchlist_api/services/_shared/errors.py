"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and must not depend on Flask or
HTTP. They serve as stable contracts between repositories, domain models, and
application services.

The translation to HTTP responses (RFC 7807) is handled by
``watchlist_api/core/errors.py`` via ``translate_service_error()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The name of the database constraint to match (e.g., 'uq_users_email').

    Returns
    -------
    bool
        True if the IntegrityError matches the given constraint.

    Notes
    -----
    PostgreSQL names the constraint in the message; SQLite only names the
    columns (``UNIQUE constraint failed: users.email``), so the
    ``uq_<table>_<column>`` convention is unpacked as a fallback.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    name = constraint_name.lower()
    if name in message:
        return True
    if name.startswith("uq_"):
        table, _, column = name[3:].partition("_")
        return bool(column) and f"{table}.{column}" in message
    return False


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories or domain logic.
    - The API layer translates them to ``APIError`` subclasses.
    """


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class InvalidInputError(ServiceError):
    """Raised when input passes schema checks but cannot be acted upon."""


class AuthenticationError(ServiceError):
    """Raised when credentials do not identify a user."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "Watchlist entry").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str
    """

    entity: str
    key: str

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"
