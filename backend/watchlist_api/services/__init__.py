"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`watchlist_api.services` without knowing internal
structure.

Re-exports
----------
- Base primitives (from ``watchlist_api.services._shared``)
    * :class:`BaseService`
    * :class:`Principal`

- Auth service (from ``watchlist_api.services.auth``)
    * :class:`AuthService`
    * DTOs: :class:`SignupIn`, :class:`LoginIn`, :class:`UserPublicOut`,
      :class:`TokenOut`

- Watchlist service (from ``watchlist_api.services.watchlist``)
    * :class:`WatchlistService`
    * DTOs: :class:`EntryCreateIn`, :class:`EntryUpdateIn`, :class:`EntryOut`

- Wiring
    * :class:`ServiceRegistry` and :func:`build_services`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ._shared.base import BaseService
from ._shared.dto import Principal
from ._shared.ports import TokenProvider
from .auth.dto import LoginIn, SignupIn, TokenOut, UserPublicOut
from .auth.service import AuthService
from .watchlist.dto import EntryCreateIn, EntryOut, EntryUpdateIn
from .watchlist.service import WatchlistService

if TYPE_CHECKING:
    from flask import Flask

EXTENSION_KEY = "watchlist_services"


@dataclass(frozen=True, slots=True)
class ServiceRegistry:
    """
    Services built once at start-up and shared by every request.

    :param tokens: Bearer-token provider used by the auth gate.
    :param auth: Signup/login service.
    :param watchlist: Watchlist CRUD service.
    """

    tokens: TokenProvider
    auth: AuthService
    watchlist: WatchlistService


def build_services(config: Any, token_provider: TokenProvider) -> ServiceRegistry:
    """
    Construct the service graph from the loaded configuration.

    :param config: Flask config mapping.
    :param token_provider: Adapter issuing and verifying tokens.
    :rtype: ServiceRegistry
    """
    return ServiceRegistry(
        tokens=token_provider,
        auth=AuthService(
            token_provider=token_provider,
            token_ttl=config["JWT_ACCESS_TOKEN_EXPIRES"],
        ),
        watchlist=WatchlistService(duplicate_scope=config["WATCHLIST_DUPLICATE_SCOPE"]),
    )


def init_app(app: Flask, token_provider: TokenProvider | None = None) -> ServiceRegistry:
    """
    Build the registry and store it under ``app.extensions``.

    :param app: Application whose config drives the wiring.
    :param token_provider: Override for tests; defaults to the JWT adapter.
    """
    if token_provider is None:
        from watchlist_api.infra.jwt.flask_jwt_token_provider import JWTTokenProvider

        token_provider = JWTTokenProvider()
    registry = build_services(app.config, token_provider)
    app.extensions[EXTENSION_KEY] = registry
    return registry


__all__ = [
    # Base
    "BaseService",
    "Principal",
    # Auth
    "AuthService",
    "SignupIn",
    "LoginIn",
    "UserPublicOut",
    "TokenOut",
    # Watchlist
    "WatchlistService",
    "EntryCreateIn",
    "EntryUpdateIn",
    "EntryOut",
    # Wiring
    "EXTENSION_KEY",
    "ServiceRegistry",
    "build_services",
    "init_app",
]
