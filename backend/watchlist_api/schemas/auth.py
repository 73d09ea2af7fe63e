"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from .common import dotted_domain, not_blank


class SignupSchema(Schema):
    """Input payload for account creation."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=[validate.Length(max=100), not_blank])
    email = fields.Email(
        required=True, validate=[validate.Length(max=254), dotted_domain]
    )
    password = fields.String(
        required=True, load_only=True, validate=validate.Length(min=1, max=128)
    )


class LoginSchema(Schema):
    """Input payload for authenticating a user."""

    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(
        required=True, load_only=True, validate=validate.Length(min=1, max=128)
    )


class UserSchema(Schema):
    """Public user representation returned by signup."""

    id = fields.String(required=True)
    name = fields.String(required=True)
    email = fields.Email(required=True)


class TokenResponseSchema(Schema):
    """Response payload containing a bearer token."""

    token = fields.String(required=True)
    token_type = fields.String(data_key="tokenType")
    expires_in = fields.Integer(data_key="expiresIn")
