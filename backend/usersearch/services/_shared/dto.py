# comments in English; reST docstrings strict
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class OrderBy(IntEnum):
    """Sort direction requested through ``order_by``."""

    DESC = -1
    AS_IS = 0
    ASC = 1


@dataclass(frozen=True, slots=True)
class User:
    """
    Public projection of a dataset row.

    :param id: Row identifier.
    :type id: int
    :param name: ``first_name`` and ``last_name`` joined by a space.
    :type name: str
    :param age: Age in years.
    :type age: int
    :param about: Free-text biography.
    :type about: str
    :param gender: Gender as stored in the dataset.
    :type gender: str
    """

    id: int
    name: str
    age: int
    about: str
    gender: str


@dataclass(frozen=True, slots=True)
class SearchIn:
    """
    Input contract of a user search.

    :param query: Case-insensitive substring matched against name and about.
    :type query: str
    :param limit: Maximum number of users returned.
    :type limit: int
    :param offset: Number of matching users skipped.
    :type offset: int
    :param order_field: Attribute to order by (``id``, ``age`` or ``name``).
    :type order_field: str
    :param order_by: Direction, see :class:`OrderBy`.
    :type order_by: int
    """

    query: str = ""
    limit: int = 25
    offset: int = 0
    order_field: str = "id"
    order_by: int = OrderBy.AS_IS
