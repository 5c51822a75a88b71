"""Client for the user search API."""

from __future__ import annotations

from usersearch.services._shared.dto import OrderBy, User

from .dto import SearchRequest, SearchResponse
from .errors import (
    AccessTokenError,
    BadRequestError,
    ErrorKind,
    RequestValidationError,
    SearchClientError,
    ServerFatalError,
    TransportError,
    UnknownSearchError,
)
from .search_client import MAX_LIMIT, SearchClient

__all__ = [
    "MAX_LIMIT",
    "AccessTokenError",
    "BadRequestError",
    "ErrorKind",
    "OrderBy",
    "RequestValidationError",
    "SearchClient",
    "SearchClientError",
    "SearchRequest",
    "SearchResponse",
    "ServerFatalError",
    "TransportError",
    "UnknownSearchError",
    "User",
]
