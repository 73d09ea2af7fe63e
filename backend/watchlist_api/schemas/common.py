"""Shared Marshmallow helpers."""

from __future__ import annotations

from marshmallow import ValidationError


def not_blank(value: str) -> None:
    """Reject strings that are empty once surrounding whitespace is removed."""
    if not value.strip():
        raise ValidationError("Must not be blank.")


def dotted_domain(value: str) -> None:
    """Require a dot in the domain part; ``fields.Email`` lets ``user@localhost`` through."""
    domain = value.rpartition("@")[2]
    if "." not in domain:
        raise ValidationError("Email domain must contain a dot.")
