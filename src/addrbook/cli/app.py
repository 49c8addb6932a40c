"""Main CLI application."""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from addrbook.cli.commands import config, entries
from addrbook.cli.console import error
from addrbook.cli.context import CLIState

app = typer.Typer(
    name="addrbook",
    help="addrbook - a small personal address book",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    book: Annotated[
        Path | None,
        typer.Option(
            "--book",
            "-b",
            help="Address book file (default: $ADDRBOOK_HOME/contacts.xml)",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Manage the address book."""
    from addrbook.config import ConfigError, find_config_path, load_config
    from addrbook.logging import configure_logging, configure_redaction

    try:
        resolved_path = find_config_path(config_path)
        settings = load_config(resolved_path)
    except (FileNotFoundError, ConfigError) as e:
        error(str(e))
        raise typer.Exit(1) from None
    except ValidationError as e:
        error("Configuration validation failed:")
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            error(f"  {loc}: {err['msg']}")
        raise typer.Exit(1) from None

    if book is not None:
        settings.book_path = book

    configure_redaction(enabled=settings.logging.redact_contacts)
    configure_logging(
        level="DEBUG" if verbose else settings.logging.level,
        use_rich=True,
        log_to_file=settings.logging.log_to_file,
    )

    ctx.obj = CLIState(config=settings, config_path=resolved_path)


entries.register(app)
config.register(app)


if __name__ == "__main__":
    app()
