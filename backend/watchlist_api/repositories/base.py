"""Generic repository base and query utilities for SQLAlchemy 2.x.

This module centralizes persistence-only concerns shared by all repositories:
- Safe sorting with a whitelist mapping (prevents SQL injection).
- Deterministic ordering (adds primary-key tiebreaker).
- Safe update helpers with per-repository updatable-field whitelists.
- No business logic, no commit/rollback; Services own transactions.

Design decisions
----------------
* Repositories MUST remain thin and persistence-focused:
  - They never implement use cases or domain policies.
  - They never call commit/rollback; Services define the Unit of Work.
* Sorting is opt-in per aggregate via ``_sortable_fields`` mapping.
* Updates MUST NOT allow mass-assignment: each repo exposes an explicit
  ``_updatable_fields`` whitelist.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, and_, literal, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from watchlist_api.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


# ----------------------------- Sorting utilities -----------------------------


def parse_sort_tokens(raw: Iterable[str]) -> list[tuple[str, bool]]:
    """Parse public sort tokens into ``(field, is_desc)`` tuples.

    :param raw: Public tokens like ``["-created_at", "movie_name"]``.
    :type raw: Iterable[str]
    :returns: List of ``(field_name, is_desc)`` tokens.
    :rtype: list[tuple[str, bool]]
    """
    parsed: list[tuple[str, bool]] = []
    for token in raw:
        is_desc = token.startswith("-")
        field = token[1:] if is_desc else token
        field = field.strip()
        if field:
            parsed.append((field, is_desc))
    return parsed


def _apply_sorting(
    stmt: Select[Any],
    sortable_fields: Mapping[str, InstrumentedAttribute[Any]],
    tokens: Iterable[str],
    *,
    pk_attr: InstrumentedAttribute[Any] | None,
) -> Select[Any]:
    """Apply safe ``ORDER BY`` clauses based on a whitelist mapping.

    Unknown sort tokens are ignored silently. The model's primary key is always
    appended as a final ascending tiebreaker to stabilize ordering.

    :param stmt: Base selectable.
    :param sortable_fields: Public field → SQLAlchemy attribute mapping.
    :param tokens: Public sort tokens (e.g., ``["-created_at"]``).
    :param pk_attr: Primary-key attribute used as a tiebreaker.
    :returns: Modified select with ``ORDER BY`` clauses.
    :rtype: :class:`sqlalchemy.sql.Select`
    """
    orders: list[Any] = []
    for field, is_desc in parse_sort_tokens(tokens):
        col = sortable_fields.get(field)
        if isinstance(col, InstrumentedAttribute):
            orders.append(col.desc() if is_desc else col.asc())

    if orders:
        stmt = stmt.order_by(*orders)

    if pk_attr is not None:
        stmt = stmt.order_by(pk_attr.asc())

    return stmt


# ------------------------------ Base repository ------------------------------


class BaseRepository(Generic[E]):
    """Generic, persistence-only repository for a single aggregate.

    Subclasses MUST define:

    * ``model``: the SQLAlchemy mapped class.

    Subclasses MAY override:

    * ``_sortable_fields`` to expose safe sort keys.
    * ``_filterable_fields`` to enable filter whitelisting (recommended).
    * ``_updatable_fields`` to whitelist keys allowed for updates.

    This class NEVER opens, commits or rolls back transactions.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """Initialise the repository with an optional SQLAlchemy session.

        When no explicit session is provided the repository falls back to the
        Flask-scoped session exposed by ``watchlist_api.core.extensions``.

        :param session: Session shared across the Unit of Work scope.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Return the injected session, or the Flask-scoped one."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Extensibility ----------------------------

    def _pk_attr(self) -> InstrumentedAttribute[Any] | None:
        """Return the model's primary-key attribute (``model.id``) if available."""
        return getattr(self.model, "id", None)

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist mapping of public sort keys to model attributes."""
        return {}

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist of equality-filterable fields; other keys are rejected."""
        return {}

    def _updatable_fields(self) -> set[str]:
        """Whitelist of public keys that can be assigned on update."""
        return set()

    # ------------------------------ Internals --------------------------------

    def _apply_equality_filters(
        self,
        stmt: Select[Any],
        filters: Mapping[str, Any] | None,
    ) -> Select[Any]:
        """Apply whitelisted equality filters to ``stmt``.

        :param stmt: Input select to filter.
        :param filters: Field=value mapping (equality only).
        :returns: Filtered select.
        :rtype: :class:`sqlalchemy.sql.Select`
        """
        if not filters:
            return stmt

        allowed = self._filterable_fields()
        unknown = [k for k in filters if k not in allowed]
        if unknown:
            # Dropping a filter would widen the result set
            raise ValueError(f"Unknown or non-filterable fields: {unknown}")
        clauses = [allowed[k] == v for k, v in filters.items()]
        return stmt.where(and_(*clauses))

    def _sanitize_update_fields(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Return ``fields`` unchanged once every key is known to be updatable.

        :param fields: Raw update mapping (public keys).
        :returns: The same keys and values as a plain dict.
        :raises ValueError: If any key is not whitelisted.
        """
        allowed = self._updatable_fields()
        if not allowed:
            # Fail-closed by default to avoid accidental mass-assignment
            if fields:
                raise ValueError("No updatable fields configured for this repository.")
            return {}

        unknown = [k for k in fields if k not in allowed]
        if unknown:
            raise ValueError(f"Unknown or non-updatable fields: {unknown}")

        return dict(fields)

    # --------------------------------- CRUD ----------------------------------

    def add(self, instance: E) -> E:
        """Stage a new entity for persistence and flush to surface constraint errors.

        :param instance: New entity instance.
        :returns: The same instance after ``flush()``.
        """
        self.session.add(instance)
        self.flush()
        return instance

    def exists(self, **filters: Any) -> bool:
        """Check existence for whitelisted equality filters.

        :param filters: Field=value pairs (equality only).
        :returns: ``True`` when at least one row matches, else ``False``.
        """
        stmt: Select[Any] = select(literal(1)).select_from(self.model)
        stmt = self._apply_equality_filters(stmt, filters)
        return self.session.execute(stmt.limit(1)).first() is not None

    def flush(self) -> None:
        """Flush pending changes to the database without committing."""
        self.session.flush()

    # ----------------------------- Safe updates -------------------------------

    def update(self, instance: E, **fields: Any) -> E:
        """Assign whitelisted keys to ``instance`` and flush.

        The assignment uses ``setattr`` to trigger SQLAlchemy ``@validates``
        decorators defined on the mapped class.

        :param instance: Entity to mutate.
        :param fields: Public field names and their new values.
        :returns: The mutated instance.
        :raises ValueError: If unknown keys are present.
        """
        for k, v in self._sanitize_update_fields(fields).items():
            setattr(instance, k, v)
        self.flush()
        return instance

    # ------------------------------- Listing ---------------------------------

    def list(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        sort: Iterable[str] | None = None,
    ) -> list[E]:
        """List entities with optional filtering and sorting.

        :param filters: Equality filters (public keys).
        :param sort: Public sort tokens (e.g., ``["-created_at"]``).
        :returns: List of entities.
        """
        stmt: Select[Any] = select(self.model)
        stmt = self._apply_equality_filters(stmt, filters)
        stmt = _apply_sorting(stmt, self._sortable_fields(), sort or [], pk_attr=self._pk_attr())
        return cast(list[E], list(self.session.execute(stmt).scalars().all()))
