"""Configuration commands."""

from typing import Annotated

import click
import typer
from rich.markup import escape

from addrbook.cli.console import console, create_table, dim
from addrbook.cli.context import get_state


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        ctx: typer.Context,
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, paths"),
        ] = None,
    ) -> None:
        """Show the effective configuration."""
        if action is None:
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        from addrbook.config.paths import get_all_paths

        state = get_state(ctx)

        if action == "show":
            if state.config_path is None:
                dim("No config file found, using defaults")
            else:
                console.print(f"[bold]Config file: {escape(str(state.config_path))}[/bold]")

            table = create_table(
                "Configuration", [("Setting", "cyan"), ("Value", "green")]
            )
            table.add_row("Address book", escape(str(state.book_path)))
            table.add_row("Capacity", str(state.config.capacity))
            table.add_row("Log level", state.config.logging.level)
            table.add_row("Log to file", "yes" if state.config.logging.log_to_file else "no")
            table.add_row(
                "Redact contacts",
                "yes" if state.config.logging.redact_contacts else "no",
            )
            console.print(table)

        elif action == "paths":
            table = create_table("Paths", [("Name", "cyan"), ("Path", "green")])
            for name, path in get_all_paths().items():
                table.add_row(name, escape(str(path)))
            console.print(table)

        else:
            console.print(f"[red]Unknown action: {escape(action)}[/red]")
            console.print("Valid actions: show, paths")
            raise typer.Exit(1)
