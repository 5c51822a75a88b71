"""Application services for the user search API."""

from __future__ import annotations

from .dataset import load_users
from .search_service import SearchService

__all__ = ["SearchService", "load_users"]
