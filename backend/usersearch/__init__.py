"""User search API: Flask reference server and HTTP client.

Provide convenient access to :func:`usersearch.factory.create_app` and
:class:`usersearch.client.SearchClient` at package level.
"""

from __future__ import annotations

from .client import SearchClient, SearchRequest, SearchResponse
from .factory import create_app

__all__ = ["SearchClient", "SearchRequest", "SearchResponse", "create_app"]
