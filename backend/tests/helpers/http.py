"""HTTP helper utilities for tests."""

from __future__ import annotations

from urllib.parse import urlencode

TEST_TOKEN = "FindUsers-Test-Token"
SEARCH_PATH = "/api/v1/search"


def access_headers(token: str | None = TEST_TOKEN) -> dict[str, str]:
    """Return request headers carrying the search access token.

    Parameters
    ----------
    token:
        Token to send; ``None`` omits the header entirely.

    Returns
    -------
    dict[str, str]
        HTTP headers dictionary.
    """

    headers = {"Accept": "application/json"}
    if token is not None:
        headers["AccessToken"] = token
    return headers


def build_url(path: str, **query: str | int | float | None) -> str:
    """Build a URL with encoded query parameters.

    Parameters
    ----------
    path:
        Base path of the endpoint.
    **query:
        Query parameters to append; ``None`` values are skipped.

    Returns
    -------
    str
        Final URL string including encoded query string.
    """

    qs = urlencode({k: v for k, v in query.items() if v is not None})
    return f"{path}?{qs}" if qs else path
