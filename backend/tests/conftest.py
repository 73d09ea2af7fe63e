"""Pytest fixtures for the watchlist API.

Every test gets its own application bound to a fresh in-memory SQLite
database, so rows never leak between cases and services can commit freely.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any, Callable

import pytest
from flask import Flask

from watchlist_api import create_app
from watchlist_api.core.config import TestingConfig
from watchlist_api.core.extensions import db as _db
from watchlist_api.models import User
from watchlist_api.services import Principal

from tests.factories.user import UserFactory
from tests.helpers.auth import bearer, issue_token

DEFAULT_PASSWORD = "Passw0rd!"


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create a Flask application configured for testing.

    Yields
    ------
    flask.Flask
        Application with :class:`TestingConfig` applied and an application
        context pushed for the duration of the test.
    """
    application = create_app(TestingConfig)
    application.logger.setLevel("WARNING")
    with application.app_context():
        yield application
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def session(app: Flask) -> Any:
    """Return the Flask-SQLAlchemy scoped session used by the app code."""
    return _db.session


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to the app session ------------------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the application session."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield
    SQLAlchemySession.set(None)


@pytest.fixture()
def user(session: Any) -> User:
    """Persist and return a user whose password is :data:`DEFAULT_PASSWORD`."""
    return UserFactory(password=DEFAULT_PASSWORD)


@pytest.fixture()
def other_user(session: Any) -> User:
    """A second account, used to check owner isolation."""
    return UserFactory(password=DEFAULT_PASSWORD)


@pytest.fixture()
def principal(user: User) -> Principal:
    return Principal(user_id=user.id)


@pytest.fixture()
def auth_header(app: Flask, user: User) -> dict[str, str]:
    """Authorization header for requests made as ``user``."""
    return bearer(issue_token(user.id))


@pytest.fixture()
def services(app: Flask):
    """Service registry built by the application factory."""
    from watchlist_api.api.deps import get_services

    return get_services()


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
