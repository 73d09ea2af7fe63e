"""Signup and login endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint

from watchlist_api.api.deps import get_services, json_body, json_response, timing
from watchlist_api.schemas import LoginSchema, SignupSchema, TokenResponseSchema, UserSchema
from watchlist_api.services import LoginIn, SignupIn

bp = Blueprint("auth", __name__)

signup_schema = SignupSchema()
login_schema = LoginSchema()
user_schema = UserSchema()
token_schema = TokenResponseSchema()


@bp.post("/signup")
@timing
def signup():
    """Create an account and return its public fields."""

    data = signup_schema.load(json_body())
    user = get_services().auth.signup(SignupIn(**data))
    return json_response(user_schema.dump(user))


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue a bearer token."""

    data = login_schema.load(json_body())
    token = get_services().auth.login(LoginIn(**data))
    return json_response(token_schema.dump(token))
