"""Integration test for the unauthenticated health probe."""

from __future__ import annotations


def test_health_reports_database(client, app):
    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["db"] == "ok"
    assert body["version"] == app.config["APP_VERSION"]
