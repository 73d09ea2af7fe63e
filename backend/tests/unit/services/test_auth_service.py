"""Unit tests for :mod:`watchlist_api.services.auth.service`."""

from __future__ import annotations

from datetime import timedelta
from types import SimpleNamespace

import pytest

from watchlist_api.models import User
from watchlist_api.services import AuthService, LoginIn, SignupIn
from watchlist_api.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    InvalidInputError,
)
from watchlist_api.services._shared.ports import StubTokenProvider

from tests.factories.user import UserFactory


@pytest.fixture()
def tokens() -> StubTokenProvider:
    return StubTokenProvider()


@pytest.fixture()
def service(session, tokens) -> AuthService:
    return AuthService(token_provider=tokens, token_ttl=timedelta(hours=24))


class TestSignup:
    def test_creates_user_with_hashed_password(self, service, session):
        """Given a fresh email, signup stores a hash and returns public fields."""
        out = service.signup(SignupIn(name="Ada", email="Ada@Example.com", password="s3cret!"))

        assert out.name == "Ada"
        assert out.email == "ada@example.com"
        assert not hasattr(out, "password")

        stored = session.get(User, out.id)
        assert stored is not None
        assert stored.password_hash != "s3cret!"
        assert stored.verify_password("s3cret!")

    def test_duplicate_email_conflicts(self, service):
        """Given an existing account, a second signup with the same email fails."""
        UserFactory(email="taken@example.com")
        with pytest.raises(ConflictError):
            service.signup(SignupIn(name="B", email="TAKEN@example.com", password="pw"))

    def test_ids_are_distinct(self, service):
        a = service.signup(SignupIn(name="A", email="a@example.com", password="pw"))
        b = service.signup(SignupIn(name="B", email="b@example.com", password="pw"))
        assert a.id != b.id

    @pytest.mark.parametrize(
        "name,email",
        [("Ann", "ann@localhost"), ("   ", "ann@example.com")],
    )
    def test_model_rejection_is_invalid_input(self, service, session, name, email):
        """Given input the model refuses, signup reports bad input and stores nothing."""
        with pytest.raises(InvalidInputError):
            service.signup(SignupIn(name=name, email=email, password="pw"))
        assert session.query(User).count() == 0

    def test_repr_masks_password(self):
        dto = SignupIn(name="A", email="a@example.com", password="hunter2")
        assert "hunter2" not in repr(dto)


class TestLogin:
    def test_returns_verifiable_token(self, service, tokens, user):
        """Given correct credentials, the token verifies to the user's id."""
        out = service.login(LoginIn(email=user.email, password="Passw0rd!"))

        assert out.token_type == "Bearer"
        assert out.expires_in == 24 * 3600
        assert tokens.verify(out.token) == user.id

    def test_email_lookup_is_case_insensitive(self, service, user):
        out = service.login(LoginIn(email=user.email.upper(), password="Passw0rd!"))
        assert out.token

    @pytest.mark.parametrize(
        "email,password",
        [("nobody@example.com", "Passw0rd!"), (None, "wrong-password")],
    )
    def test_bad_credentials_share_one_error(self, service, user, email, password):
        """Given an unknown email or a wrong password, the error is identical."""
        with pytest.raises(AuthenticationError) as info:
            service.login(LoginIn(email=email or user.email, password=password))
        assert str(info.value) == "Invalid email or password"

    def test_uses_injected_unit_of_work(self, tokens):
        """Given a stand-in read-only UoW, login never touches the database."""

        class FakeUsers:
            def authenticate(self, email, password):
                return SimpleNamespace(id="u-42") if password == "ok" else None

        class FakeUoW:
            users = FakeUsers()

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return None

        svc = AuthService(token_provider=tokens, ro_uow_factory=FakeUoW)
        out = svc.login(LoginIn(email="x@example.com", password="ok"))
        assert tokens.verify(out.token) == "u-42"
        with pytest.raises(AuthenticationError):
            svc.login(LoginIn(email="x@example.com", password="nope"))
