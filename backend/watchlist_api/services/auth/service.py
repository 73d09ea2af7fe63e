"""
AuthService
===========

Account lifecycle for the watchlist API:
- Signup (unique email, hashed password)
- Login (credential check, bearer token issuance)
"""

from __future__ import annotations

import logging
from datetime import timedelta

from sqlalchemy.exc import IntegrityError

from watchlist_api.services._shared.base import BaseService, UnitOfWorkFactory
from watchlist_api.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    InvalidInputError,
    violates,
)
from watchlist_api.services._shared.ports.token_provider import TokenProvider
from watchlist_api.services.auth.dto import LoginIn, SignupIn, TokenOut, UserPublicOut

log = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Application service for signup and login.

    Tokens are produced through the injected :class:`TokenProvider`; this
    service never touches signing keys or token formats itself.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        token_ttl: timedelta = timedelta(hours=24),
        uow_factory: UnitOfWorkFactory | None = None,
        ro_uow_factory: UnitOfWorkFactory | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param token_provider: Adapter issuing bearer tokens.
        :param token_ttl: Lifetime the provider applies; reported to clients.
        """
        super().__init__(uow_factory=uow_factory, ro_uow_factory=ro_uow_factory)
        self.tokens = token_provider
        self.token_ttl = token_ttl

    # --------------------------------------------------------------------- #
    # Signup
    # --------------------------------------------------------------------- #

    def signup(self, dto: SignupIn) -> UserPublicOut:
        """
        Register a new user.

        :param dto: Signup input DTO.
        :type dto: SignupIn
        :returns: Public-safe user DTO.
        :rtype: UserPublicOut
        :raises ConflictError: When the email is already registered.
        :raises InvalidInputError: When the model rejects name, email or password.
        """
        with self.rw_uow() as uow:
            repo = uow.users

            if repo.exists_by_email(dto.email):
                raise ConflictError("User", "email already in use")

            try:
                user = repo.model(name=dto.name, email=dto.email)
                user.password = dto.password  # model hashes via setter
                repo.add(user)
            except IntegrityError as exc:
                # Lost the check-then-insert race to a concurrent signup
                if violates(exc, "uq_users_email"):
                    raise ConflictError("User", "email already in use") from exc
                raise
            except ValueError as exc:
                # Model validators reject what the schema let through
                raise InvalidInputError(str(exc)) from exc

            out = UserPublicOut(id=user.id, name=user.name, email=user.email)

        log.info("auth.signup", extra={"user_id": out.id})
        return out

    # --------------------------------------------------------------------- #
    # Login
    # --------------------------------------------------------------------- #

    def login(self, dto: LoginIn) -> TokenOut:
        """
        Authenticate credentials and issue a bearer token.

        Unknown email and wrong password produce the same error.

        :param dto: Login input.
        :returns: Token and its lifetime.
        :raises AuthenticationError: If credentials are invalid.
        """
        with self.ro_uow() as uow:
            user = uow.users.authenticate(dto.email, dto.password)
            if user is None:
                raise AuthenticationError()
            user_id = user.id

        token = self.tokens.issue(user_id)
        log.info("auth.login", extra={"user_id": user_id})
        return TokenOut(token=token, expires_in=int(self.token_ttl.total_seconds()))
