# watchlist_api/infra/jwt/flask_jwt_token_provider.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, cast

from jwt.exceptions import (
    ExpiredSignatureError,
    InvalidAlgorithmError,
    InvalidSignatureError,
    PyJWTError,
)

from watchlist_api.services._shared.ports import InvalidTokenError, TokenProvider


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Adapter for Flask-JWT-Extended.

    Signing key, algorithm and the accepted algorithms come from the app
    config (``JWT_SECRET_KEY``, ``JWT_ALGORITHM``), so a token advertising a
    different ``alg`` header is rejected by PyJWT before its claims are read.

    .. note::
       Requires an active Flask app context with proper JWT settings.
    """

    expires_delta: timedelta | None = None

    def issue(self, subject: str) -> str:
        from flask_jwt_extended import create_access_token

        if not isinstance(subject, str) or not subject:
            raise ValueError("Token subject must be a non-empty string.")
        # None falls back to JWT_ACCESS_TOKEN_EXPIRES
        return cast(str, create_access_token(identity=subject, expires_delta=self.expires_delta))

    def decode(self, token: str) -> dict[str, Any]:
        """Return verified claims, translating library failures to ``InvalidTokenError``."""
        from flask_jwt_extended import decode_token
        from flask_jwt_extended.exceptions import JWTExtendedException

        try:
            return cast(dict[str, Any], decode_token(token))
        except ExpiredSignatureError as exc:
            raise InvalidTokenError("token has expired") from exc
        except InvalidAlgorithmError as exc:
            raise InvalidTokenError("unexpected signing algorithm") from exc
        except InvalidSignatureError as exc:
            raise InvalidTokenError("signature verification failed") from exc
        except (PyJWTError, JWTExtendedException) as exc:
            raise InvalidTokenError(f"invalid token: {exc}") from exc

    def verify(self, token: str) -> str:
        subject = self.decode(token).get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError("subject claim is missing or not a string")
        return subject
