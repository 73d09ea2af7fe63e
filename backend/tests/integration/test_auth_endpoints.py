"""Integration tests for ``/signup`` and ``/login``."""

from __future__ import annotations

import json

import pytest

from watchlist_api.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from watchlist_api.models import User

from tests.helpers.auth import bearer


def _signup(client, **overrides):
    payload = {"name": "Ada", "email": "ada@example.com", "password": "s3cret!"}
    payload.update(overrides)
    return client.post("/signup", json=payload)


class TestSignup:
    def test_returns_public_fields_only(self, client, session):
        resp = _signup(client)

        assert resp.status_code == 200
        body = resp.get_json()
        assert set(body) == {"id", "name", "email"}
        assert body["email"] == "ada@example.com"

        stored = session.get(User, body["id"])
        assert stored.password_hash != "s3cret!"

    def test_duplicate_email_is_conflict(self, client):
        assert _signup(client).status_code == 200
        resp = _signup(client, email="ADA@example.com", name="Other")
        assert resp.status_code == 409
        assert resp.get_json()["code"] == "conflict"

    def test_missing_fields_are_400(self, client):
        resp = client.post("/signup", json={"email": "x@example.com"})
        assert resp.status_code == 400
        errors = resp.get_json()["details"]["errors"]
        assert "name" in errors
        assert "password" in errors

    def test_malformed_json_is_400(self, client):
        resp = client.post("/signup", data="{not json", content_type="application/json")
        assert resp.status_code == 400

    def test_invalid_email_is_400(self, client):
        assert _signup(client, email="not-an-email").status_code == 400

    @pytest.mark.parametrize("email", ["ann@localhost", "ann@intranet"])
    def test_dotless_domain_is_400(self, client, session, email):
        """Given an address without a dotted domain, signup refuses it cleanly."""
        resp = _signup(client, name="Ann", email=email, password="pw")

        assert resp.status_code == 400
        assert resp.get_json()["code"] == "validation_error"
        assert "email" in resp.get_json()["details"]["errors"]
        assert session.query(User).count() == 0

    def test_body_keeps_field_order(self, client):
        resp = _signup(client)
        assert list(json.loads(resp.get_data(as_text=True))) == ["id", "name", "email"]


class TestLogin:
    def test_issues_bearer_token(self, client, user):
        resp = client.post("/login", json={"email": user.email, "password": "Passw0rd!"})

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["tokenType"] == "Bearer"
        assert body["expiresIn"] == 24 * 3600
        assert body["token"]
        assert JWTTokenProvider().verify(body["token"]) == user.id

    def test_token_opens_protected_routes(self, client, user):
        token = client.post(
            "/login", json={"email": user.email, "password": "Passw0rd!"}
        ).get_json()["token"]

        resp = client.get("/watchlist", headers=bearer(token))
        assert resp.status_code == 200

    def test_wrong_password_and_unknown_email_look_alike(self, client, user):
        wrong = client.post("/login", json={"email": user.email, "password": "nope"})
        unknown = client.post("/login", json={"email": "ghost@example.com", "password": "nope"})

        assert wrong.status_code == unknown.status_code == 401
        assert wrong.get_json()["detail"] == unknown.get_json()["detail"]

    def test_signup_then_login(self, client):
        _signup(client, email="flow@example.com", password="flow-pass")
        resp = client.post("/login", json={"email": "flow@example.com", "password": "flow-pass"})
        assert resp.status_code == 200
