"""Centralized error handling for the search API.

Errors are rendered in the wire format search clients understand: a JSON
``{"Error": ...}`` object for classified bad requests and short plain-text
bodies (possibly empty) for everything else.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from flask import Flask, Response, jsonify, make_response, request
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from usersearch.core.logger import ensure_request_id

log = logging.getLogger(__name__)


class SearchAPIError(Exception):
    """
    Represent an error response of the search API.

    Parameters
    ----------
    message : str
        Plain-text body sent when ``error`` is not set. May be empty.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    error : str | None, optional
        When given, the response is the JSON object ``{"Error": error}``.

    Attributes
    ----------
    message : str
        Plain-text body.
    status_code : int
        HTTP status code returned to the client.
    error : str | None
        Structured error value, if any.
    """

    def __init__(
        self,
        message: str = "",
        status_code: int = 400,
        error: str | None = None,
    ) -> None:
        super().__init__(message or error or HTTPStatus(int(status_code)).phrase)
        self.message = message
        self.status_code = int(status_code)
        self.error = error

    def to_response(self) -> Response:
        """
        Serialize the error into a Flask response.

        :returns: JSON response for structured errors, plain text otherwise.
        :rtype: flask.Response
        """
        if self.error is not None:
            response = jsonify({"Error": self.error})
        else:
            response = _plain_response(self.message)
        response.status_code = self.status_code
        return response


# Domain conveniences
class Unauthorized(SearchAPIError):
    """401 when the access token is missing or wrong."""

    def __init__(self, message: str = "Incorrect access token") -> None:
        super().__init__(message, status_code=HTTPStatus.UNAUTHORIZED)


class BadRequest(SearchAPIError):
    """400 with an optional structured ``Error`` value."""

    def __init__(self, error: str | None = None, message: str = "") -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, error=error)


class ServerFatal(SearchAPIError):
    """500 for unrecoverable request failures."""

    def __init__(self, message: str = "Server error") -> None:
        super().__init__(message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


def _plain_response(body: str) -> Response:
    """Return a ``text/plain`` response, newline-terminated when non-empty."""
    response = make_response(f"{body}\n" if body else "")
    response.mimetype = "text/plain"
    return response


def init_app(app: Flask) -> None:
    """
    Attach error handlers to the Flask app.

    Notes
    -----
    - 4xx are logged as warnings; 5xx as errors with ``exc_info``.
    - Query validation failures become a bodiless ``400``.
    """

    @app.errorhandler(SearchAPIError)
    def handle_api_error(err: SearchAPIError):
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "SearchAPIError: status=%s error=%s msg=%s request_id=%s",
            err.status_code,
            err.error,
            err.message,
            ensure_request_id(),
        )
        return err.to_response()

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        log.warning(
            "ValidationError: fields=%s request_id=%s",
            sorted(err.normalized_messages()),
            ensure_request_id(),
        )
        return BadRequest().to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        message = HTTPStatus(status).phrase
        if status == HTTPStatus.NOT_FOUND and request:
            message = f"Route '{request.path}' not found"
        level = log.error if status >= 500 else log.warning
        level("HTTPException: status=%s detail=%s request_id=%s", status, message, ensure_request_id())
        response = _plain_response(message)
        response.status_code = status
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Never leak internal details
        log.error("Unhandled exception: request_id=%s", ensure_request_id(), exc_info=True)
        return ServerFatal().to_response()
