# watchlist_api/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class SignupIn:
    """
    Input DTO for signup.

    :param name: Display name.
    :type name: str
    :param email: Login email (normalized by the model).
    :type email: str
    :param password: Raw password, hashed before it reaches the database.
    :type password: str
    """

    name: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"SignupIn(name={self.name!r}, email={self.email!r}, password='***')"


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str

    def __repr__(self) -> str:
        return f"LoginIn(email={self.email!r}, password='***')"


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """
    Public-safe user representation (never carries the password or hash).

    :param id: User identifier.
    :type id: str
    :param name: Display name.
    :type name: str
    :param email: Normalized email.
    :type email: str
    """

    id: str
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class TokenOut:
    """
    Output DTO for a successful login.

    :param token: Signed bearer token.
    :type token: str
    :param expires_in: Token lifetime in seconds.
    :type expires_in: int
    :param token_type: Authorization scheme to use with the token.
    :type token_type: str
    """

    token: str
    expires_in: int
    token_type: str = "Bearer"
