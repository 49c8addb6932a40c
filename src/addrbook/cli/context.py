"""Per-invocation CLI state: resolved config and the backing book file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.markup import escape

from addrbook.book import (
    AddressBook,
    AddressBookError,
    LoadError,
    LoadErrorKind,
    LoadReport,
)
from addrbook.cli.console import error, warning
from addrbook.config import AddressBookConfig, create_address_book

logger = logging.getLogger(__name__)


@dataclass
class CLIState:
    config: AddressBookConfig
    config_path: Path | None = None

    @property
    def book_path(self) -> Path:
        return self.config.book_path.expanduser()


def get_state(ctx: typer.Context) -> CLIState:
    state = ctx.find_object(CLIState)
    if state is None:
        raise RuntimeError("CLI state not initialized")
    return state


def fail(exc: Exception) -> typer.Exit:
    """Report an error and return the exit to raise."""
    error(escape(str(exc)))
    return typer.Exit(1)


def read_book(state: CLIState) -> tuple[AddressBook, LoadReport]:
    """Load the configured book; a missing file yields an empty book."""
    book = create_address_book(state.config)
    try:
        return book, book.load(state.book_path)
    except LoadError as e:
        if e.kind == LoadErrorKind.NOT_FOUND:
            logger.debug("address_book_missing", extra={"file.path": str(e.path)})
            return book, LoadReport()
        raise fail(e) from None


def open_book(state: CLIState, *, writable: bool = False) -> AddressBook:
    """Load the configured book, reporting entries that did not fit.

    A book that will be saved back must load completely, otherwise the
    entries that did not fit would be lost from the file.
    """
    book, report = read_book(state)

    if report.dropped:
        names = ", ".join(escape(f"{e.sur_name}, {e.first_name}") for e in report.dropped)
        message = (
            f"Address book holds more than {book.capacity} entries; "
            f"not loaded: {names}"
        )
        if writable:
            error(message)
            raise typer.Exit(1)
        warning(message)
    return book


def save_book(state: CLIState, book: AddressBook) -> None:
    try:
        book.save(state.book_path)
    except AddressBookError as e:
        raise fail(e) from None
