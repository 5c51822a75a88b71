# comments in English; reST docstrings strict
from __future__ import annotations

from dataclasses import dataclass, field

from usersearch.services._shared.dto import OrderBy, User


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """
    Parameters of a single ``find_users`` call.

    :param query: Substring matched against name and about, ignoring case.
    :type query: str
    :param limit: Page size; must be positive, values above 25 are clamped.
    :type limit: int
    :param offset: Number of matching users to skip; must not be negative.
    :type offset: int
    :param order_field: ``id``, ``age`` or ``name``; empty means ``id``.
    :type order_field: str
    :param order_by: Direction, see :class:`OrderBy`.
    :type order_by: int
    """

    query: str = ""
    limit: int = 0
    offset: int = 0
    order_field: str = ""
    order_by: int = OrderBy.AS_IS


@dataclass(frozen=True, slots=True)
class SearchResponse:
    """
    Page of users returned by ``find_users``.

    :param users: Users in server order, never more than the requested limit.
    :type users: list[User]
    :param next_page: Whether more matching users follow this page.
    :type next_page: bool
    """

    users: list[User] = field(default_factory=list)
    next_page: bool = False
