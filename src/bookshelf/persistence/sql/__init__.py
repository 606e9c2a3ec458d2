"""SQL persistence implementation."""

from .pool import ConnectionPool
from .repositories import SQLBookRepository
from .schema import ensure_schema

__all__ = ["ConnectionPool", "SQLBookRepository", "ensure_schema"]
