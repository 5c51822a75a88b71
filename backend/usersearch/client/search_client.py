"""HTTP client for the user search API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from http import HTTPStatus
from typing import Any
from urllib.parse import urlencode

import requests
from marshmallow import ValidationError

from usersearch.client.dto import SearchRequest, SearchResponse
from usersearch.client.errors import (
    AccessTokenError,
    BadRequestError,
    RequestValidationError,
    ServerFatalError,
    TransportError,
    UnknownSearchError,
)
from usersearch.schemas import SearchErrorResponseSchema, UserSchema
from usersearch.services._shared.errors import ERROR_BAD_ORDER_FIELD

log = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "AccessToken"
MAX_LIMIT = 25
DEFAULT_TIMEOUT = 1.0

_users_schema = UserSchema(many=True)
_error_schema = SearchErrorResponseSchema()


class SearchClient:
    """
    Client for ``GET /search``.

    The client holds no per-call state and may be shared between threads
    unless a :class:`requests.Session` is injected.

    :param url: Absolute URL of the search endpoint.
    :type url: str
    :param access_token: Value sent in the ``AccessToken`` header.
    :type access_token: str
    :param timeout: Seconds to wait for the server before giving up.
    :type timeout: float
    :param session: Optional session used instead of module-level requests.
    :type session: requests.Session | None
    """

    def __init__(
        self,
        url: str,
        access_token: str = "",
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.access_token = access_token
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_config(cls, config: Mapping[str, Any], url: str) -> "SearchClient":
        """Build a client using ``SEARCH_ACCESS_TOKEN`` and ``SEARCH_CLIENT_TIMEOUT``."""
        return cls(
            url,
            config.get("SEARCH_ACCESS_TOKEN", ""),
            timeout=float(config.get("SEARCH_CLIENT_TIMEOUT", DEFAULT_TIMEOUT)),
        )

    # ------------------------------------------------------------------ #

    def find_users(self, req: SearchRequest) -> SearchResponse:
        """
        Fetch one page of users.

        :param req: Search parameters.
        :type req: SearchRequest
        :returns: The page, with ``next_page`` set when more users match.
        :rtype: SearchResponse
        :raises SearchClientError: On any failure; nothing is retried.
        """
        req = self._validate(req)
        params = self._params(req)
        response = self._send(params)
        return self._handle(response, req, params)

    # ------------------------------------------------------------------ #

    @staticmethod
    def _validate(req: SearchRequest) -> SearchRequest:
        if req.limit <= 0:
            raise RequestValidationError("limit must be > 0")
        if req.offset < 0:
            raise RequestValidationError("offset must be > 0")
        if req.limit > MAX_LIMIT:
            req = replace(req, limit=MAX_LIMIT)
        return req

    @staticmethod
    def _params(req: SearchRequest) -> dict[str, str]:
        # One extra row tells whether a next page exists
        return {
            "query": req.query,
            "limit": str(req.limit + 1),
            "offset": str(req.offset),
            "order_field": req.order_field,
            "order_by": str(int(req.order_by)),
        }

    def _send(self, params: dict[str, str]) -> requests.Response:
        http = self.session or requests
        log.debug("search.request url=%s", self.url, extra={"params": params})
        try:
            return http.get(
                self.url,
                params=params,
                headers={ACCESS_TOKEN_HEADER: self.access_token},
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            log.warning("search.timeout url=%s timeout=%s", self.url, self.timeout)
            raise TransportError(f"timeout for {urlencode(params)}") from exc
        except requests.RequestException as exc:
            log.warning("search.transport_error url=%s error=%s", self.url, exc)
            raise TransportError(f"unknown error {exc}") from exc

    def _handle(
        self,
        response: requests.Response,
        req: SearchRequest,
        params: dict[str, str],
    ) -> SearchResponse:
        status = response.status_code
        log.debug("search.response status=%s", status, extra={"status": status})

        if status == HTTPStatus.UNAUTHORIZED:
            raise AccessTokenError()
        if status == HTTPStatus.INTERNAL_SERVER_ERROR:
            raise ServerFatalError()
        if status == HTTPStatus.BAD_REQUEST:
            raise self._bad_request(response, req)
        if status != HTTPStatus.OK:
            raise UnknownSearchError(f"unknown error: status {status} for {urlencode(params)}")

        try:
            users = _users_schema.load(response.json())
        except (ValueError, ValidationError) as exc:
            raise UnknownSearchError(f"cannot unpack result json: {exc}") from exc

        if len(users) > req.limit:
            return SearchResponse(users=users[: req.limit], next_page=True)
        return SearchResponse(users=users, next_page=False)

    @staticmethod
    def _bad_request(response: requests.Response, req: SearchRequest) -> Exception:
        try:
            reason = _error_schema.load(response.json())["error"]
        except (ValueError, ValidationError) as exc:
            return UnknownSearchError(f"cannot unpack error json: {exc}")
        if reason == ERROR_BAD_ORDER_FIELD:
            return BadRequestError(f"OrderFeld {req.order_field} invalid", reason)
        return BadRequestError(f"unknown bad request error: {reason}", reason)
