"""User search use case: filter, paginate and validate ordering."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from usersearch.services._shared.base import BaseService, ServiceContext
from usersearch.services._shared.dto import OrderBy, SearchIn, User
from usersearch.services._shared.errors import (
    ERROR_BAD_ORDER_FIELD,
    ERROR_UNKNOWN,
    InvalidOrderByError,
    InvalidOrderFieldError,
    NegativeOffsetError,
    OffsetOutOfRangeError,
)
from usersearch.services.dataset import load_users

log = logging.getLogger(__name__)

ORDER_FIELDS = frozenset({"id", "age", "name"})
# Known attribute that is explicitly not sortable
REJECTED_ORDER_FIELDS = frozenset({"about"})


def filter_users(users: Sequence[User], query: str) -> list[User]:
    """
    Keep users whose name or about contains ``query``, ignoring case.

    :param users: Candidate users.
    :type users: Sequence[User]
    :param query: Substring to look for; empty keeps everyone.
    :type query: str
    :returns: Matching users in their original order.
    :rtype: list[User]
    """
    needle = query.lower()
    if not needle:
        return list(users)
    return [u for u in users if needle in u.name.lower() or needle in u.about.lower()]


def paginate(users: Sequence[User], *, offset: int, limit: int) -> list[User]:
    """
    Return the ``[offset, offset + limit)`` window of ``users``.

    :raises OffsetOutOfRangeError: When a non-zero offset skips every user.
    """
    if offset > 0 and offset >= len(users):
        raise OffsetOutOfRangeError(offset=offset, available=len(users))
    return list(users[offset : offset + limit])


def validate_order(order_field: str, order_by: int) -> None:
    """
    Check the requested ordering.

    :raises InvalidOrderByError: If ``order_by`` is outside ``{-1, 0, 1}``.
    :raises InvalidOrderFieldError: If ``order_field`` is not sortable.
    """
    if order_by not in {o.value for o in OrderBy}:
        raise InvalidOrderByError(order_by=order_by)
    if order_field in REJECTED_ORDER_FIELDS:
        raise InvalidOrderFieldError(order_field=order_field, error=ERROR_BAD_ORDER_FIELD)
    if order_field not in ORDER_FIELDS:
        raise InvalidOrderFieldError(order_field=order_field, error=ERROR_UNKNOWN)


class SearchService(BaseService):
    """Answer user searches against the XML dataset."""

    def __init__(self, dataset_path: str | Path, *, ctx: ServiceContext | None = None) -> None:
        super().__init__(ctx=ctx)
        self.dataset_path = dataset_path

    def search(self, dto: SearchIn) -> list[User]:
        """
        Run the search pipeline for a single request.

        The dataset is reloaded on every call. Ordering is validated but the
        page keeps dataset order.

        :param dto: Search parameters.
        :type dto: SearchIn
        :returns: At most ``dto.limit`` users.
        :rtype: list[User]
        :raises ServiceError: On dataset, offset or ordering failures.
        """
        if dto.offset < 0:
            raise NegativeOffsetError(offset=dto.offset)
        users = load_users(self.dataset_path)
        matches = filter_users(users, dto.query)
        page = paginate(matches, offset=dto.offset, limit=dto.limit)
        validate_order(dto.order_field, dto.order_by)
        log.debug(
            "search.done query=%r request_id=%s",
            dto.query,
            self.ctx.request_id,
            extra={"matches": len(matches), "users": len(page)},
        )
        return page
