"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import hmac
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from usersearch.core.errors import Unauthorized
from usersearch.schemas import SearchQuerySchema
from usersearch.services._shared.dto import SearchIn

F = TypeVar("F", bound=Callable[..., Any])

ACCESS_TOKEN_HEADER = "AccessToken"


def parse_search_query() -> SearchIn:
    """Parse search parameters from ``request.args`` using Marshmallow."""

    schema = SearchQuerySchema(default_limit=current_app.config.get("SEARCH_DEFAULT_LIMIT", 25))
    return schema.load(request.args)


def require_access_token(func: F) -> F:
    """Ensure the request carries the configured ``AccessToken`` header."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        expected = current_app.config.get("SEARCH_ACCESS_TOKEN", "")
        provided = request.headers.get(ACCESS_TOKEN_HEADER, "")
        if not expected or not hmac.compare_digest(provided.encode(), expected.encode()):
            raise Unauthorized()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def empty_response(*, status: int = 200) -> Response:
    """Return a response without a body."""

    return Response(b"", status=status)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
