"""Bearer-token gate placed in front of every protected view.

Per request the gate moves through ``unauthenticated → token extracted →
verified → forwarded``; any failure short-circuits with a 401 before the view
(and therefore the database) is reached.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from flask import request

from watchlist_api.api.deps import get_services
from watchlist_api.core.errors import MissingOrMalformedHeader, Unauthorized
from watchlist_api.services._shared.dto import Principal
from watchlist_api.services._shared.ports import InvalidTokenError, TokenProvider

F = TypeVar("F", bound=Callable[..., Any])

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "

log = logging.getLogger(__name__)


def extract_bearer_token(headers: Mapping[str, str]) -> str:
    """Return the raw token from an ``Authorization: Bearer <token>`` header.

    :param headers: Request headers.
    :returns: The token string.
    :raises MissingOrMalformedHeader: When the header is absent, does not use
        the ``Bearer`` scheme, or carries an empty token.
    """
    header = headers.get(AUTHORIZATION_HEADER)
    if not header or not header.startswith(BEARER_PREFIX):
        raise MissingOrMalformedHeader()
    token = header[len(BEARER_PREFIX) :].strip()
    if not token:
        raise MissingOrMalformedHeader()
    return token


def authenticate(headers: Mapping[str, str], tokens: TokenProvider) -> Principal:
    """Verify the bearer token carried by ``headers``.

    :param headers: Request headers.
    :param tokens: Provider used to check signature, algorithm and expiry.
    :returns: The authenticated caller.
    :raises MissingOrMalformedHeader: See :func:`extract_bearer_token`.
    :raises Unauthorized: When the token fails verification; the detail
        carries the reason.
    """
    token = extract_bearer_token(headers)
    try:
        subject = tokens.verify(token)
    except InvalidTokenError as exc:
        log.warning("auth.token_rejected: %s", exc)
        raise Unauthorized(f"Unauthorized: {exc}") from exc
    return Principal(user_id=subject)


def require_auth(func: F) -> F:
    """Run the gate, then call the view with ``principal=<Principal>``."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        principal = authenticate(request.headers, get_services().tokens)
        return func(*args, principal=principal, **kwargs)

    return wrapper  # type: ignore[return-value]
