"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, SignupSchema, TokenResponseSchema, UserSchema
from .watchlist import EntryCreateSchema, EntrySchema, EntryUpdateSchema

__all__ = [
    "LoginSchema",
    "SignupSchema",
    "TokenResponseSchema",
    "UserSchema",
    "EntryCreateSchema",
    "EntrySchema",
    "EntryUpdateSchema",
]
