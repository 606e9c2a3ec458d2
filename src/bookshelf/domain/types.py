"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType
from uuid import UUID

BookId = NewType("BookId", UUID)

__all__ = ["BookId"]
