"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from watchlist_api.api.deps import json_response, timing
from watchlist_api.core.extensions import db

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and database health information."""

    db_status = "ok"
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        current_app.logger.exception("healthcheck.db_error")
        db.session.rollback()
        db_status = "fail"
    version = current_app.config.get("APP_VERSION", "dev")
    return json_response({"status": "ok", "db": db_status, "version": version})
