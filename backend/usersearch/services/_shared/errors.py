"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between the dataset
loader and the search service.

The translation to HTTP responses is handled by ``usersearch/core/errors.py``
via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# Wire values of ``SearchErrorResponse.Error`` understood by clients.
ERROR_BAD_ORDER_FIELD = "ErrorBadOrderField"
ERROR_UNKNOWN = "Unknown error"


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The BaseService translates them to :class:`SearchAPIError`.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class DatasetError(ServiceError):
    """
    Raised when the user dataset cannot be read or decoded.

    :param path: Location of the dataset file.
    :type path: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    path: str
    detail: str

    def __str__(self) -> str:
        return f"Cannot load dataset {self.path}: {self.detail}"


@dataclass(slots=True)
class NegativeOffsetError(ServiceError):
    """
    Raised when ``offset`` is below zero.

    The API answers without a body for this case.
    """

    offset: int

    def __str__(self) -> str:
        return f"Negative offset: {self.offset}"


@dataclass(slots=True)
class OffsetOutOfRangeError(ServiceError):
    """
    Raised when the requested offset skips past every matching user.

    :param offset: Requested offset.
    :type offset: int
    :param available: Number of users matching the query.
    :type available: int
    """

    offset: int
    available: int

    def __str__(self) -> str:
        return f"Offset {self.offset} out of range for {self.available} users"


@dataclass(slots=True)
class InvalidOrderByError(ServiceError):
    """
    Raised when ``order_by`` is not one of ``-1``, ``0`` or ``1``.

    The API answers without a structured body for this case.
    """

    order_by: int

    def __str__(self) -> str:
        return f"Invalid order_by: {self.order_by}"


@dataclass(slots=True)
class InvalidOrderFieldError(ServiceError):
    """
    Raised when ``order_field`` is not a sortable user attribute.

    :param order_field: Requested field name.
    :type order_field: str
    :param error: Value reported as ``SearchErrorResponse.Error``.
    :type error: str
    """

    order_field: str
    error: str = ERROR_UNKNOWN

    def __str__(self) -> str:
        return f"Invalid order_field {self.order_field!r}: {self.error}"
