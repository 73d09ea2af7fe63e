"""
watchlist_api.services._shared.ports
====================================

*Ports* (hexagonal interfaces) that keep the service layer independent from
the libraries that sign and verify bearer tokens.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the :class:`~.InvalidTokenError` it
    raises, and :class:`~.StubTokenProvider` for unit tests.

Concrete adapters live under ``watchlist_api.infra``.
"""

from __future__ import annotations

from .token_provider import InvalidTokenError, StubTokenProvider, TokenProvider

__all__ = [
    "InvalidTokenError",
    "StubTokenProvider",
    "TokenProvider",
]
