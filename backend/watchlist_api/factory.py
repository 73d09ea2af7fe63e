"""Application factory wiring Flask extensions, services and blueprints."""

from __future__ import annotations

from flask import Flask

from watchlist_api.core.config import BaseConfig, get_config, validate_config
from watchlist_api.core.logger import configure_logging, init_app as init_logging
from watchlist_api.services._shared.ports import TokenProvider


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    token_provider: TokenProvider | None = None,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    Parameters
    ----------
    config:
        Config object or import path; defaults to the class selected by
        ``APP_ENV``.
    token_provider:
        Replaces the JWT adapter, mainly for tests.

    Raises
    ------
    RuntimeError
        When the configuration is unusable or the database cannot be reached.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    validate_config(app.config)
    # Keep schema field order in response bodies
    app.json.sort_keys = False
    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from watchlist_api.core import proxy

    proxy.init_app(app)

    from watchlist_api.core import database, extensions

    database.configure_engine_options(app)
    extensions.init_app(app)
    database.init_app(app)

    init_logging(app)

    from watchlist_api import services

    services.init_app(app, token_provider=token_provider)

    from watchlist_api.api import init_app as init_api

    init_api(app)

    from watchlist_api.core import errors

    errors.init_app(app)

    from watchlist_api import cli as app_cli

    app_cli.init_app(app)

    app.logger.info("app.started: env=%s", app.config.get("APP_ENV"))
    return app
