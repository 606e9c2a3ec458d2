"""Typer CLI wiring bookshelf services."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar
from uuid import UUID

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from bookshelf.container import ServiceContainer
from bookshelf.domain import BookId, CreateBook
from bookshelf.persistence import SpecificOperationError
from bookshelf.persistence.sql import ensure_schema

from .deps import get_container

app = typer.Typer(help="Bookshelf command-line interface")
console = Console()

T = TypeVar("T")


@app.callback()
def _configure() -> None:
    container = get_container()
    logging.basicConfig(
        level=container.settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_book_id(value: str) -> BookId:
    try:
        return BookId(UUID(value))
    except ValueError as exc:
        raise typer.BadParameter("book-id must be a valid UUID") from exc


def _run(container: ServiceContainer, work: Callable[[], Awaitable[T]]) -> T:
    async def _main() -> T:
        try:
            await ensure_schema(container.pool)
            return await work()
        finally:
            await container.pool.dispose()

    try:
        return asyncio.run(_main())
    except (SpecificOperationError, SQLAlchemyError, OSError, TimeoutError) as exc:
        console.print(f"[red]Storage error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo(f"Pool size:\t{settings.pool_size} (+{settings.pool_max_overflow})")


@app.command("init-db")
def init_db() -> None:
    """Create the books table if it does not exist."""

    container = get_container()

    async def _noop() -> None:
        return None

    _run(container, _noop)
    typer.echo(f"Schema ready at {container.pool.url}")


@app.command("add-book")
def add_book(
    title: str,
    author: str = typer.Option(..., help="Book author"),
    isbn: str = typer.Option(..., help="ISBN as printed on the book"),
    description: str = typer.Option(..., help="Free-form description, may be empty"),
) -> None:
    """Register a new book."""

    container = get_container()
    try:
        command = CreateBook(title=title, author=author, isbn=isbn, description=description)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _run(container, lambda: container.book_repository.create(command))
    typer.echo(f"Created book {title!r}")


@app.command("list-books")
def list_books() -> None:
    """List stored books, newest first."""

    container = get_container()
    books = _run(container, container.book_repository.find_all)
    if not books:
        typer.echo("No books found")
        return

    table = Table(title="Books")
    table.add_column("ID", no_wrap=True)
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("ISBN")
    for book in books:
        table.add_row(str(book.id), book.title, book.author, book.isbn)
    console.print(table)


@app.command("show-book")
def show_book(book_id: str) -> None:
    """Display a single book."""

    target_id = _parse_book_id(book_id)
    container = get_container()
    book = _run(container, lambda: container.book_repository.find_by_id(target_id))
    if book is None:
        typer.echo(f"Book {book_id} not found")
        raise typer.Exit(code=1)
    typer.echo("ID:\t" + str(book.id))
    typer.echo("Title:\t" + book.title)
    typer.echo("Author:\t" + book.author)
    typer.echo("ISBN:\t" + book.isbn)
    typer.echo("Description:\t" + book.description)


__all__ = ["app"]
