"""Watchlist endpoints; every route sits behind the bearer-token gate."""

from __future__ import annotations

from flask import Blueprint

from watchlist_api.api.auth_gate import require_auth
from watchlist_api.api.deps import get_services, json_body, json_response, timing
from watchlist_api.schemas import EntryCreateSchema, EntrySchema, EntryUpdateSchema
from watchlist_api.services import EntryCreateIn, EntryUpdateIn, Principal

bp = Blueprint("watchlist", __name__)

create_schema = EntryCreateSchema()
update_schema = EntryUpdateSchema()
entry_schema = EntrySchema()


@bp.post("")
@require_auth
@timing
def add_entry(*, principal: Principal):
    """Add a movie to the caller's watchlist."""

    data = create_schema.load(json_body())
    entry = get_services().watchlist.add(principal, EntryCreateIn(**data))
    return json_response(entry_schema.dump(entry))


@bp.get("")
@require_auth
@timing
def list_entries(*, principal: Principal):
    """List the caller's entries."""

    entries = get_services().watchlist.list(principal)
    return json_response(
        {
            "message": "Watchlists fetched successfully",
            "watchlists": entry_schema.dump(entries, many=True),
        }
    )


@bp.patch("/<string:entry_id>")
@require_auth
@timing
def update_entry(entry_id: str, *, principal: Principal):
    """Merge ``movieName``/``watched`` into one of the caller's entries."""

    data = update_schema.load(json_body())
    get_services().watchlist.update(principal, entry_id, EntryUpdateIn(**data))
    return json_response({"message": "Watchlist updated successfully"})


@bp.delete("/<string:entry_id>")
@require_auth
@timing
def delete_entry(entry_id: str, *, principal: Principal):
    """Remove one of the caller's entries."""

    get_services().watchlist.delete(principal, entry_id)
    return json_response({"message": "Watchlist deleted successfully"})
