"""Address book entry commands."""

from typing import Annotated

import typer
from rich.markup import escape

from addrbook.book import CapacityExceededError, Entry, Gender
from addrbook.book.types import contact_type
from addrbook.cli.console import (
    confirm_or_cancel,
    console,
    create_table,
    dim,
    error,
    success,
    warning,
)
from addrbook.cli.context import fail, get_state, open_book, read_book, save_book


def _name(entry: Entry) -> str:
    return escape(f"{entry.sur_name}, {entry.first_name}")


def register(app: typer.Typer) -> None:
    """Register the entry commands."""

    @app.command("list")
    def list_cmd(ctx: typer.Context) -> None:
        """List all entries, ordered by surname then first name."""
        state = get_state(ctx)
        book = open_book(state)

        if not len(book):
            dim(f"No entries in {state.book_path}")
            return

        table = create_table(
            f"Address Book ({len(book)}/{book.capacity})",
            [
                ("Surname", "cyan"),
                ("First name", "cyan"),
                ("Gender", "dim"),
                ("Type", "dim"),
                ("Contact", "green"),
            ],
        )
        for entry in book.list():
            table.add_row(
                escape(entry.sur_name),
                escape(entry.first_name),
                entry.gender.value,
                contact_type(entry.contact) or "-",
                escape(str(entry.contact)) if entry.contact is not None else "-",
            )
        console.print(table)

    @app.command("add")
    def add_cmd(
        ctx: typer.Context,
        first_name: Annotated[str, typer.Argument(help="First name")],
        sur_name: Annotated[str, typer.Argument(help="Surname")],
        gender: Annotated[
            Gender,
            typer.Option("--gender", "-g", case_sensitive=False, help="Gender code"),
        ] = Gender.FEMALE,
        phone: Annotated[
            int | None, typer.Option("--phone", "-p", help="Phone number")
        ] = None,
        email: Annotated[
            str | None, typer.Option("--email", "-e", help="E-mail address")
        ] = None,
    ) -> None:
        """Add a new entry."""
        if phone is not None and email is not None:
            error("Use either --phone or --email, not both")
            raise typer.Exit(1)

        entry = Entry(first_name=first_name, sur_name=sur_name, gender=gender)
        if phone is not None:
            entry = entry.with_phone(phone)
        elif email is not None:
            entry = entry.with_email(email)

        state = get_state(ctx)
        book = open_book(state, writable=True)
        try:
            added = book.add(entry)
        except CapacityExceededError as e:
            raise fail(e) from None

        if not added:
            warning(f"Entry already exists: {_name(entry)}")
            return

        save_book(state, book)
        success(f"Added {_name(entry)}")

    @app.command("find")
    def find_cmd(
        ctx: typer.Context,
        sur_name: Annotated[str, typer.Argument(help="Surname")],
        first_name: Annotated[str, typer.Argument(help="First name")],
    ) -> None:
        """Show a single entry."""
        book = open_book(get_state(ctx))
        entry = book.find(sur_name, first_name)
        if entry is None:
            error(f"No entry for {escape(sur_name)}, {escape(first_name)}")
            raise typer.Exit(1)
        console.print(escape(str(entry)))

    @app.command("delete")
    def delete_cmd(
        ctx: typer.Context,
        sur_name: Annotated[str, typer.Argument(help="Surname")],
        first_name: Annotated[str, typer.Argument(help="First name")],
    ) -> None:
        """Delete a single entry."""
        state = get_state(ctx)
        book = open_book(state, writable=True)
        entry = Entry(first_name=first_name, sur_name=sur_name)
        if not book.delete(entry):
            error(f"No entry for {_name(entry)}")
            raise typer.Exit(1)

        save_book(state, book)
        success(f"Deleted {_name(entry)}")

    @app.command("erase")
    def erase_cmd(
        ctx: typer.Context,
        force: Annotated[
            bool, typer.Option("--force", "-f", help="Skip confirmation")
        ] = False,
    ) -> None:
        """Remove all entries."""
        state = get_state(ctx)
        book, report = read_book(state)
        # Entries beyond capacity are still in the file and go with the rest
        total = len(book) + len(report.dropped)
        if not confirm_or_cancel(f"Erase all {total} entries?", force):
            return

        book.erase()
        save_book(state, book)
        success(f"Erased {total} entries")
