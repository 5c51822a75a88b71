"""
Errors raised by :class:`usersearch.client.SearchClient`.

Every failure of ``find_users`` is a single :class:`SearchClientError` whose
``kind`` tells the category and whose text is stable enough to assert on.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed search call."""

    VALIDATION = "validation"
    TRANSPORT = "transport"
    ACCESS_TOKEN = "access_token"
    BAD_REQUEST = "bad_request"
    SERVER_FATAL = "server_fatal"
    UNKNOWN = "unknown"


class SearchClientError(Exception):
    """Base class for all client-side search failures."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RequestValidationError(SearchClientError):
    """Request rejected locally, before any network call."""

    kind = ErrorKind.VALIDATION


class TransportError(SearchClientError):
    """The HTTP round trip failed: refused, unresolved or timed out."""

    kind = ErrorKind.TRANSPORT


class AccessTokenError(SearchClientError):
    """The server refused the access token."""

    kind = ErrorKind.ACCESS_TOKEN

    def __init__(self, message: str = "Bad AccessToken") -> None:
        super().__init__(message)


class BadRequestError(SearchClientError):
    """
    The server rejected the parameters with a structured error.

    :param message: Client-facing description.
    :param reason: ``Error`` value reported by the server.
    """

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


class ServerFatalError(SearchClientError):
    """The server failed to answer the search."""

    kind = ErrorKind.SERVER_FATAL

    def __init__(self, message: str = "SearchServer fatal error") -> None:
        super().__init__(message)


class UnknownSearchError(SearchClientError):
    """Unexpected status or undecodable body."""

    kind = ErrorKind.UNKNOWN
