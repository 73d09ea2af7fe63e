from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be trusted; the message is the reason."""


class TokenProvider(Protocol):
    """Port for issuing and verifying signed bearer tokens."""

    def issue(self, subject: str) -> str: ...

    def verify(self, token: str) -> str: ...


class StubTokenProvider(TokenProvider):
    """Deterministic token provider used in unit tests.

    Tokens look like ``stub.<subject>.<seq>`` and expire ``ttl`` after the
    moment they were issued, measured against ``datetime.now``.
    """

    def __init__(self, ttl: timedelta = timedelta(hours=24)) -> None:
        self.ttl = ttl
        self._seq = 0
        self._issued: dict[str, tuple[str, datetime]] = {}

    def issue(self, subject: str) -> str:
        if not isinstance(subject, str) or not subject:
            raise ValueError("Token subject must be a non-empty string.")
        self._seq += 1
        token = f"stub.{subject}.{self._seq}"
        self._issued[token] = (subject, datetime.now(tz=UTC) + self.ttl)
        return token

    def verify(self, token: str) -> str:
        try:
            subject, expires_at = self._issued[token]
        except KeyError:
            raise InvalidTokenError("token is malformed") from None
        if datetime.now(tz=UTC) >= expires_at:
            raise InvalidTokenError("token has expired")
        return subject
