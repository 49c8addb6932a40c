"""CLI command modules."""

from addrbook.cli.commands import config, entries

__all__ = [
    "config",
    "entries",
]
