"""API blueprint package aggregating the HTTP endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries; empty mounts them at the root.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs where
        ``relative_prefix`` is appended to ``base_prefix``.

    Notes
    -----
    Empty relative prefixes are supported, allowing a blueprint to mount at the
    base itself while others extend it with additional path segments.
    """

    for bp, rel_prefix in entries:
        full_prefix = "/".join(
            segment for segment in [base_prefix.strip("/"), rel_prefix.strip("/")] if segment
        )
        app.register_blueprint(bp, url_prefix="/" + full_prefix)


def init_app(app: Flask) -> None:
    """Register the public routes on the Flask app."""

    from watchlist_api.api.routes import REGISTRY

    register_blueprint_group(
        app, base_prefix=app.config.get("API_BASE_PREFIX", ""), entries=REGISTRY
    )


__all__ = ["init_app", "register_blueprint_group"]
