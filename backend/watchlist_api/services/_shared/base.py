# watchlist_api/services/_shared/base.py
from __future__ import annotations

from collections.abc import Callable

from watchlist_api.uow.base import UnitOfWork
from watchlist_api.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)

UnitOfWorkFactory = Callable[[], UnitOfWork]


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Keep services thin, orchestration-only, no web/ORM leakage.

    Notes
    -----
    - Services must never touch the global session; always use a Unit of Work.
    - Both factories are injected so tests can hand in a different store.
    """

    def __init__(
        self,
        *,
        uow_factory: UnitOfWorkFactory | None = None,
        ro_uow_factory: UnitOfWorkFactory | None = None,
    ) -> None:
        """
        Initialize the base service.

        :param uow_factory: Builds read-write units of work.
        :type uow_factory: Callable[[], UnitOfWork] | None
        :param ro_uow_factory: Builds read-only units of work.
        :type ro_uow_factory: Callable[[], UnitOfWork] | None
        """
        self._uow_factory: UnitOfWorkFactory = uow_factory or SQLAlchemyUnitOfWork
        self._ro_uow_factory: UnitOfWorkFactory = ro_uow_factory or SQLAlchemyReadOnlyUnitOfWork

    def rw_uow(self) -> UnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: UnitOfWork
        """
        return self._uow_factory()

    def ro_uow(self) -> UnitOfWork:
        """
        Create a read-only Unit of Work.

        :returns: Read-only UoW instance.
        :rtype: UnitOfWork
        """
        return self._ro_uow_factory()
