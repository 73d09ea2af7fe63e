"""Watchlist Marshmallow schemas (camelCase on the wire)."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from .common import not_blank


class EntryCreateSchema(Schema):
    """Input payload for ``POST /watchlist``; ``userId`` is never read from it."""

    class Meta:
        unknown = EXCLUDE

    movie_name = fields.String(
        required=True,
        data_key="movieName",
        validate=[validate.Length(max=255), not_blank],
    )
    watched = fields.Boolean(load_default=False)


class EntryUpdateSchema(Schema):
    """Partial update; keys other than ``movieName``/``watched`` are dropped."""

    class Meta:
        unknown = EXCLUDE

    movie_name = fields.String(
        data_key="movieName",
        validate=[validate.Length(max=255), not_blank],
    )
    watched = fields.Boolean()


class EntrySchema(Schema):
    """Watchlist entry as returned to its owner."""

    id = fields.String(required=True)
    user_id = fields.String(required=True, data_key="userId")
    movie_name = fields.String(required=True, data_key="movieName")
    watched = fields.Boolean(required=True)
