"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, jsonify, request

from watchlist_api.services import EXTENSION_KEY, ServiceRegistry

F = TypeVar("F", bound=Callable[..., Any])


def get_services() -> ServiceRegistry:
    """Return the service registry built by the application factory."""

    try:
        return cast(ServiceRegistry, current_app.extensions[EXTENSION_KEY])
    except KeyError as exc:
        raise RuntimeError("Services are not initialized. Use create_app().") from exc


def json_body() -> Any:
    """Return the parsed JSON body, or ``{}`` when absent or malformed.

    Schemas then report the missing fields as a 400.
    """

    payload = request.get_json(silent=True)
    return {} if payload is None else payload


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
