"""Unit tests for bearer-token extraction and verification."""

from __future__ import annotations

import pytest

from watchlist_api.api.auth_gate import authenticate, extract_bearer_token
from watchlist_api.core.errors import MissingOrMalformedHeader, Unauthorized
from watchlist_api.services import Principal
from watchlist_api.services._shared.ports import StubTokenProvider


class TestExtractBearerToken:
    def test_returns_token(self):
        assert extract_bearer_token({"Authorization": "Bearer abc.def"}) == "abc.def"

    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": ""},
            {"Authorization": "Basic dXNlcjpwYXNz"},
            {"Authorization": "bearer abc"},
            {"Authorization": "Bearer "},
            {"Authorization": "Bearer    "},
            {"Authorization": "abc.def"},
        ],
    )
    def test_missing_or_malformed(self, headers):
        with pytest.raises(MissingOrMalformedHeader) as info:
            extract_bearer_token(headers)
        assert info.value.status_code == 401
        assert info.value.message == "Missing or invalid token"


class TestAuthenticate:
    def test_valid_token_yields_principal(self):
        tokens = StubTokenProvider()
        token = tokens.issue("owner-1")
        principal = authenticate({"Authorization": f"Bearer {token}"}, tokens)
        assert principal == Principal(user_id="owner-1")

    def test_invalid_token_reports_reason(self):
        """Given a token the provider never issued, the 401 names the reason."""
        with pytest.raises(Unauthorized) as info:
            authenticate({"Authorization": "Bearer forged"}, StubTokenProvider())
        assert info.value.status_code == 401
        assert info.value.message == "Unauthorized: token is malformed"
        assert info.value.headers["WWW-Authenticate"].startswith("Bearer")

    def test_missing_header_short_circuits_before_verify(self):
        class ExplodingProvider(StubTokenProvider):
            def verify(self, token):
                raise AssertionError("verify must not be called")

        with pytest.raises(MissingOrMalformedHeader):
            authenticate({}, ExplodingProvider())
