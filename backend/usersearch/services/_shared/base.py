# usersearch/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass

from usersearch.core import errors as api_errors
from usersearch.services._shared.errors import (
    DatasetError,
    InvalidOrderByError,
    InvalidOrderFieldError,
    NegativeOffsetError,
    OffsetOutOfRangeError,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param request_id: Correlation id for logging/tracing.
    """

    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Centralize error translation.
    * Keep services thin, with no web leakage besides the translation hook.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (tracing).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, (OffsetOutOfRangeError, DatasetError)):
            # → 500 Server error
            return api_errors.ServerFatal()

        if isinstance(exc, InvalidOrderFieldError):
            # → 400 {"Error": ...}
            return api_errors.BadRequest(error=exc.error)

        if isinstance(exc, (InvalidOrderByError, NegativeOffsetError)):
            # → 400 without body
            return api_errors.BadRequest()

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
