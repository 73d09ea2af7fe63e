"""Engine tuning and start-up checks for the shared SQLAlchemy database.

The :data:`watchlist_api.core.extensions.db` instance reads
``SQLALCHEMY_ENGINE_OPTIONS`` when it is bound to the app, so
:func:`configure_engine_options` must run before ``extensions.init_app``.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from watchlist_api.core.extensions import db

log = logging.getLogger(__name__)


def build_engine_options(
    database_uri: str, *, connect_timeout: int, operation_timeout: int
) -> dict[str, Any]:
    """Translate the generic timeouts into driver-specific engine options.

    :param database_uri: SQLAlchemy URL of the target database.
    :param connect_timeout: Seconds allowed to open a connection.
    :param operation_timeout: Seconds allowed for one statement.
    :returns: Keyword arguments for :func:`sqlalchemy.create_engine`.
    :rtype: dict[str, Any]
    """
    backend = make_url(database_uri).get_backend_name()

    if backend == "sqlite":
        # Single-file locking is the only thing that can block here.
        return {"connect_args": {"timeout": operation_timeout}}

    options: dict[str, Any] = {"pool_pre_ping": True, "pool_timeout": operation_timeout}
    if backend == "postgresql":
        options["connect_args"] = {
            "connect_timeout": connect_timeout,
            "options": f"-c statement_timeout={operation_timeout * 1000}",
        }
    elif backend in ("mysql", "mariadb"):
        options["connect_args"] = {
            "connect_timeout": connect_timeout,
            "read_timeout": operation_timeout,
            "write_timeout": operation_timeout,
        }
    return options


def configure_engine_options(app: Flask) -> None:
    """Populate ``SQLALCHEMY_ENGINE_OPTIONS`` unless the config already sets it."""
    if app.config.get("SQLALCHEMY_ENGINE_OPTIONS"):
        return
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = build_engine_options(
        app.config["SQLALCHEMY_DATABASE_URI"],
        connect_timeout=int(app.config.get("DB_CONNECT_TIMEOUT", 20)),
        operation_timeout=int(app.config.get("DB_OPERATION_TIMEOUT", 10)),
    )


def ping_database() -> None:
    """Run ``SELECT 1`` against the configured database.

    :raises RuntimeError: When the database cannot be reached.
    """
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise RuntimeError("Failed to connect to the database") from exc
    finally:
        db.session.remove()


def init_app(app: Flask) -> None:
    """Probe the database and optionally create the schema at start-up.

    Parameters
    ----------
    app: flask.Flask
        Application whose extensions are already initialized.

    Notes
    -----
    A failed probe aborts start-up; the service never runs without a
    reachable store.
    """
    with app.app_context():
        ping_database()
        if app.config.get("AUTO_CREATE_SCHEMA"):
            db.create_all()
            log.info("database.schema_ready")
