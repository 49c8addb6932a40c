"""Centralized path management for addrbook.

All state (config, address book file, logs) is stored under a single base
directory. The base directory can be overridden with the ADDRBOOK_HOME
environment variable.

Default locations:
- Linux/macOS: ~/.addrbook
- Windows: %USERPROFILE%\\.addrbook
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "ADDRBOOK_HOME"

# File name of the address book document
BOOK_FILE_NAME = "contacts.xml"


@lru_cache(maxsize=1)
def get_addrbook_home() -> Path:
    """Get the base directory for all addrbook data.

    Resolution order:
    1. ADDRBOOK_HOME environment variable (if set)
    2. Platform default (~/.addrbook)

    Returns:
        Path to the addrbook home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".addrbook"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_addrbook_home() / "config.toml"


def get_book_path() -> Path:
    """Get the default address book document path."""
    return get_addrbook_home() / BOOK_FILE_NAME


def get_logs_path() -> Path:
    """Get the default logs directory path."""
    return get_addrbook_home() / "logs"


def get_all_paths() -> dict[str, Path]:
    """Get all standard paths for debugging/display."""
    return {
        "home": get_addrbook_home(),
        "config": get_config_path(),
        "book": get_book_path(),
        "logs": get_logs_path(),
    }
