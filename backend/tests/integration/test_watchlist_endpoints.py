"""Integration tests for the owner-scoped ``/watchlist`` resource."""

from __future__ import annotations

import pytest

from watchlist_api.models import WatchlistEntry

from tests.factories.watchlist import WatchlistEntryFactory
from tests.helpers.auth import bearer, expired_token, forge_token, issue_token


@pytest.fixture()
def other_header(app, other_user) -> dict[str, str]:
    return bearer(issue_token(other_user.id))


class TestAuthGate:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/watchlist"),
            ("post", "/watchlist"),
            ("patch", "/watchlist/abc"),
            ("delete", "/watchlist/abc"),
        ],
    )
    def test_missing_header_is_401(self, client, method, path):
        resp = getattr(client, method)(path, json={"movieName": "Heat"})
        assert resp.status_code == 401
        assert resp.get_json()["detail"] == "Missing or invalid token"
        assert resp.headers["WWW-Authenticate"].startswith("Bearer")

    @pytest.mark.parametrize("value", ["Token abc", "Bearer ", "abc"])
    def test_malformed_header_is_401(self, client, value):
        resp = client.get("/watchlist", headers={"Authorization": value})
        assert resp.status_code == 401

    def test_expired_token_is_401(self, client, user):
        resp = client.get("/watchlist", headers=bearer(expired_token(user.id)))
        assert resp.status_code == 401
        assert "expired" in resp.get_json()["detail"]

    def test_foreign_signature_is_401(self, client, user):
        token = forge_token({"sub": user.id}, key="not-the-server-secret-but-long-enough")
        resp = client.get("/watchlist", headers=bearer(token))
        assert resp.status_code == 401
        assert resp.get_json()["detail"].startswith("Unauthorized: ")

    def test_rejected_before_reaching_the_service(self, client, services, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("service must not run")

        monkeypatch.setattr(services.watchlist, "list", fail)
        assert client.get("/watchlist").status_code == 401


class TestAdd:
    def test_creates_entry_for_caller(self, client, auth_header, user):
        resp = client.post("/watchlist", json={"movieName": "Heat"}, headers=auth_header)

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["userId"] == user.id
        assert body["movieName"] == "Heat"
        assert body["watched"] is False
        assert body["id"]

    def test_user_id_in_body_is_ignored(self, client, auth_header, user, other_user):
        resp = client.post(
            "/watchlist",
            json={"movieName": "Heat", "userId": other_user.id, "watched": True},
            headers=auth_header,
        )
        assert resp.status_code == 200
        assert resp.get_json()["userId"] == user.id
        assert resp.get_json()["watched"] is True

    def test_duplicate_is_409(self, client, auth_header):
        client.post("/watchlist", json={"movieName": "Heat"}, headers=auth_header)
        resp = client.post("/watchlist", json={"movieName": "Heat"}, headers=auth_header)
        assert resp.status_code == 409

    @pytest.mark.parametrize("payload", [{}, {"movieName": ""}, {"movieName": "   "}])
    def test_missing_title_is_400(self, client, auth_header, payload):
        resp = client.post("/watchlist", json=payload, headers=auth_header)
        assert resp.status_code == 400
        assert "movieName" in resp.get_json()["details"]["errors"]


class TestList:
    def test_isolation_between_users(self, client, auth_header, other_header):
        """Given A and B each add a movie, each list shows only their own."""
        client.post("/watchlist", json={"movieName": "Alien"}, headers=auth_header)
        client.post("/watchlist", json={"movieName": "Brazil"}, headers=other_header)

        mine = client.get("/watchlist", headers=auth_header).get_json()
        theirs = client.get("/watchlist", headers=other_header).get_json()

        assert mine["message"] == "Watchlists fetched successfully"
        assert [e["movieName"] for e in mine["watchlists"]] == ["Alien"]
        assert [e["movieName"] for e in theirs["watchlists"]] == ["Brazil"]

    def test_empty(self, client, auth_header):
        body = client.get("/watchlist", headers=auth_header).get_json()
        assert body["watchlists"] == []


class TestUpdate:
    def test_marks_watched(self, client, auth_header, user, session):
        entry = WatchlistEntryFactory(owner=user, movie_name="Heat")

        resp = client.patch(f"/watchlist/{entry.id}", json={"watched": True}, headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json() == {"message": "Watchlist updated successfully"}
        session.expire_all()
        stored = session.get(WatchlistEntry, entry.id)
        assert stored.watched is True
        assert stored.movie_name == "Heat"

    def test_empty_patch_is_400(self, client, auth_header, user):
        entry = WatchlistEntryFactory(owner=user)
        resp = client.patch(f"/watchlist/{entry.id}", json={"userId": "x"}, headers=auth_header)
        assert resp.status_code == 400

    def test_foreign_entry_is_404_and_unchanged(self, client, auth_header, other_user, session):
        entry = WatchlistEntryFactory(owner=other_user, movie_name="Brazil")

        resp = client.patch(
            f"/watchlist/{entry.id}", json={"movieName": "Stolen"}, headers=auth_header
        )

        assert resp.status_code == 404
        session.expire_all()
        assert session.get(WatchlistEntry, entry.id).movie_name == "Brazil"

    def test_missing_entry_is_404(self, client, auth_header):
        resp = client.patch("/watchlist/does-not-exist", json={"watched": True}, headers=auth_header)
        assert resp.status_code == 404


class TestDelete:
    def test_removes_exactly_one(self, client, auth_header, user, session):
        keep = WatchlistEntryFactory(owner=user)
        drop = WatchlistEntryFactory(owner=user)

        resp = client.delete(f"/watchlist/{drop.id}", headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json() == {"message": "Watchlist deleted successfully"}
        remaining = client.get("/watchlist", headers=auth_header).get_json()["watchlists"]
        assert [e["id"] for e in remaining] == [keep.id]

    def test_foreign_entry_is_404_and_kept(self, client, auth_header, other_header, other_user):
        theirs = WatchlistEntryFactory(owner=other_user)

        assert client.delete(f"/watchlist/{theirs.id}", headers=auth_header).status_code == 404
        remaining = client.get("/watchlist", headers=other_header).get_json()["watchlists"]
        assert [e["id"] for e in remaining] == [theirs.id]

    def test_missing_entry_is_404(self, client, auth_header):
        assert client.delete("/watchlist/does-not-exist", headers=auth_header).status_code == 404
