"""Flask CLI commands managing the database schema."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from watchlist_api.core.extensions import db

LOGGER = logging.getLogger(__name__)


def _ensure_non_production() -> None:
    """Abort destructive commands when running in production."""
    if str(current_app.config.get("APP_ENV", "")).lower() == "production":
        raise click.UsageError("'flask schema drop' is restricted to non-production environments.")


@click.group("schema")
def schema_cli() -> None:
    """Create or drop the ``users`` and ``watchlist`` tables."""


@schema_cli.command("create")
@with_appcontext
def create_command() -> None:
    """Create any missing tables (existing ones are left untouched)."""
    try:
        db.create_all()
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Schema creation failed: {exc}") from exc
    LOGGER.info("schema.created")
    click.echo("Schema ready: " + ", ".join(sorted(db.metadata.tables)))


@schema_cli.command("drop")
@click.option("--yes", is_flag=True, help="Skip the destructive confirmation prompt.")
@with_appcontext
def drop_command(yes: bool) -> None:
    """Drop every table owned by the application."""
    _ensure_non_production()
    if not yes:
        click.confirm("This will delete all users and watchlist entries. Continue?", abort=True)
    try:
        db.drop_all()
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Schema drop failed: {exc}") from exc
    LOGGER.warning("schema.dropped")
    click.echo("Schema dropped.")
