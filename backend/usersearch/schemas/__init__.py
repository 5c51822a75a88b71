"""Convenience exports for application schemas."""

from __future__ import annotations

from .search import LenientInteger, SearchErrorResponseSchema, SearchQuerySchema, UserSchema

__all__ = [
    "LenientInteger",
    "SearchErrorResponseSchema",
    "SearchQuerySchema",
    "UserSchema",
]
