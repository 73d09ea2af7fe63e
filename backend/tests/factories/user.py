"""Factory Boy definition for :class:`watchlist_api.models.user.User`."""

from __future__ import annotations

import factory
from werkzeug.security import generate_password_hash

from watchlist_api.models.base import new_document_id
from watchlist_api.models.user import User

from tests.factories import BaseFactory


class UserFactory(BaseFactory):
    """
    Build persisted :class:`watchlist_api.models.user.User` instances.

    Pass ``password=...`` to choose the plain-text password; only its hash
    reaches the model.
    """

    class Meta:
        model = User

    class Params:
        password = "Passw0rd!"

    id = factory.LazyFunction(new_document_id)
    name = factory.Faker("name")
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    password_hash = factory.LazyAttribute(lambda o: generate_password_hash(o.password))
