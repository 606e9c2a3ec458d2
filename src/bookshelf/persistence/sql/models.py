"""SQLAlchemy table model and row shape for stored books."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _now() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):  # type: ignore[misc]
    pass


class BookRecord(Base):
    __tablename__ = "books"

    book_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String(1024), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now
    )


@dataclass(frozen=True, slots=True)
class BookRow:
    """Columns selected for a book, as returned by a single query."""

    book_id: UUID
    title: str
    author: str
    isbn: str
    description: str


BOOK_ROW_COLUMNS = (
    BookRecord.book_id,
    BookRecord.title,
    BookRecord.author,
    BookRecord.isbn,
    BookRecord.description,
)


__all__ = ["BOOK_ROW_COLUMNS", "Base", "BookRecord", "BookRow"]
