"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

PLACEHOLDER_SECRET: Final[str] = "CHANGE_ME_JWT"
DUPLICATE_SCOPES: Final[frozenset[str]] = frozenset({"user", "global"})

# Load .env when present (no-op otherwise)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {val!r}") from exc


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    APP_ENV: str
        Name of the active environment.
    API_BASE_PREFIX: str
        Root path for registering API blueprints. Empty by default so the
        resources live at ``/signup``, ``/login`` and ``/watchlist``.
    SECRET_KEY: str
        Flask secret used for session signing.
    JWT_SECRET_KEY: str
        Symmetric key used by ``flask-jwt-extended`` to sign bearer tokens.
    JWT_ALGORITHM: str
        Signing algorithm; tokens advertising anything else are rejected.
    JWT_ACCESS_TOKEN_EXPIRES: datetime.timedelta
        Lifetime of an issued token (24 hours).
    SQLALCHEMY_DATABASE_URI: str
        Database connection string consumed by SQLAlchemy.
    DB_CONNECT_TIMEOUT: int
        Seconds allowed to establish a database connection.
    DB_OPERATION_TIMEOUT: int
        Seconds allowed for a single database operation.
    AUTO_CREATE_SCHEMA: bool
        Create missing tables during application start-up.
    WATCHLIST_DUPLICATE_SCOPE: str
        ``"user"`` rejects a movie already on the caller's list; ``"global"``
        rejects a movie already on anybody's list.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    USE_PROXYFIX: bool
        Trust one hop of ``X-Forwarded-*`` headers.
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    APP_ENV = "development"
    APP_VERSION = os.getenv("APP_VERSION", "dev")
    API_BASE_PREFIX = os.getenv("API_BASE_PREFIX", "")

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", PLACEHOLDER_SECRET)
    JWT_ALGORITHM = "HS256"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)
    JWT_TOKEN_LOCATION = ["headers"]

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./watchlist.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    DB_CONNECT_TIMEOUT = env_int("DB_CONNECT_TIMEOUT", 20)
    DB_OPERATION_TIMEOUT = env_int("DB_OPERATION_TIMEOUT", 10)
    AUTO_CREATE_SCHEMA = env_bool("AUTO_CREATE_SCHEMA", False)

    # Watchlist rules
    WATCHLIST_DUPLICATE_SCOPE = os.getenv("WATCHLIST_DUPLICATE_SCOPE", "user").strip().lower()

    # Flask
    PROPAGATE_EXCEPTIONS = False

    # Logging & proxy
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    USE_PROXYFIX = env_bool("USE_PROXYFIX", False)

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default and creates the schema on start-up so a
    fresh checkout runs without a separate setup step.
    """

    APP_ENV = "development"
    DEBUG = env_bool("FLASK_DEBUG", True)
    AUTO_CREATE_SCHEMA = env_bool("AUTO_CREATE_SCHEMA", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    - Propagates exceptions so pytest can surface tracebacks directly.
    """

    APP_ENV = "testing"
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    JWT_SECRET_KEY = "testing-only-signing-secret-0123456789abcdef"
    AUTO_CREATE_SCHEMA = True
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    ``DATABASE_URL`` and a real ``JWT_SECRET_KEY`` are mandatory; see
    :func:`validate_config`.
    """

    APP_ENV = "production"
    DEBUG = False
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "")
    PROPAGATE_EXCEPTIONS = False
    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def validate_config(config: Mapping[str, Any]) -> None:
    """Refuse to start with settings that would produce an unusable service.

    Parameters
    ----------
    config: Mapping[str, Any]
        The loaded Flask configuration.

    Raises
    ------
    RuntimeError
        When the signing secret is missing or empty, when production runs
        with the placeholder secret, when no database URL is configured, or
        when the duplicate scope is unknown.
    """
    secret = config.get("JWT_SECRET_KEY")
    if not isinstance(secret, str) or not secret.strip():
        raise RuntimeError("JWT_SECRET_KEY must be set to a non-empty value.")
    if config.get("APP_ENV") == "production" and secret == PLACEHOLDER_SECRET:
        raise RuntimeError("JWT_SECRET_KEY still holds the placeholder value.")

    if not config.get("SQLALCHEMY_DATABASE_URI"):
        raise RuntimeError("DATABASE_URL must be set.")

    scope = config.get("WATCHLIST_DUPLICATE_SCOPE")
    if scope not in DUPLICATE_SCOPES:
        raise RuntimeError(
            f"WATCHLIST_DUPLICATE_SCOPE must be one of {sorted(DUPLICATE_SCOPES)}, got {scope!r}"
        )
