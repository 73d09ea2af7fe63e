"""Unit tests for the Flask-JWT-Extended token adapter."""

from __future__ import annotations

from datetime import timedelta

import pytest

from watchlist_api.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from watchlist_api.services._shared.ports import InvalidTokenError

from tests.helpers.auth import expired_token, forge_token

OTHER_SECRET = "another-signing-secret-nobody-shares-42"


@pytest.fixture()
def provider(app) -> JWTTokenProvider:
    return JWTTokenProvider()


class TestIssueAndVerify:
    def test_round_trip_returns_subject(self, provider):
        """Given a freshly issued token, verify yields the same subject."""
        token = provider.issue("a1b2c3")
        assert provider.verify(token) == "a1b2c3"

    def test_issue_rejects_empty_subject(self, provider):
        with pytest.raises(ValueError):
            provider.issue("")

    def test_lifetime_defaults_to_configured_value(self, provider, app):
        """Given the default config, the token expires 24h after issue."""
        claims = provider.decode(provider.issue("u-1"))
        assert claims["exp"] - claims["iat"] == int(
            app.config["JWT_ACCESS_TOKEN_EXPIRES"].total_seconds()
        )
        assert claims["exp"] - claims["iat"] == 24 * 3600

    def test_custom_expires_delta(self, app):
        provider = JWTTokenProvider(expires_delta=timedelta(minutes=5))
        claims = provider.decode(provider.issue("u-1"))
        assert claims["exp"] - claims["iat"] == 300


class TestExpiry:
    def test_valid_until_just_before_expiry(self, provider, freeze_time):
        """Given a token issued at T, it still verifies at T+24h-1s."""
        with freeze_time("2026-01-01 12:00:00"):
            token = provider.issue("u-1")
        with freeze_time("2026-01-02 11:59:59"):
            assert provider.verify(token) == "u-1"

    def test_rejected_after_expiry(self, provider, freeze_time):
        """Given a token issued at T, verification fails at T+25h."""
        with freeze_time("2026-01-01 12:00:00"):
            token = provider.issue("u-1")
        with freeze_time("2026-01-02 13:00:00"):
            with pytest.raises(InvalidTokenError, match="expired"):
                provider.verify(token)

    def test_already_expired_token(self, provider):
        with pytest.raises(InvalidTokenError, match="expired"):
            provider.verify(expired_token("u-1"))


class TestRejections:
    def test_wrong_secret(self, provider):
        token = forge_token({"sub": "u-1"}, key=OTHER_SECRET)
        with pytest.raises(InvalidTokenError, match="signature"):
            provider.verify(token)

    def test_wrong_algorithm(self, provider, app):
        """Given a token signed with HS512 and the right key, it is refused."""
        token = forge_token({"sub": "u-1"}, algorithm="HS512")
        with pytest.raises(InvalidTokenError, match="algorithm"):
            provider.verify(token)

    def test_malformed_token(self, provider):
        with pytest.raises(InvalidTokenError, match="invalid token"):
            provider.verify("abc")

    def test_missing_subject_claim(self, provider):
        token = forge_token({"role": "admin"})
        with pytest.raises(InvalidTokenError):
            provider.verify(token)

    def test_non_string_subject_claim(self, provider):
        token = forge_token({"sub": 123})
        with pytest.raises(InvalidTokenError):
            provider.verify(token)
