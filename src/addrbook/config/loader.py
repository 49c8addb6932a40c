"""Configuration loading from TOML files and environment variables."""

import os
import tomllib
from pathlib import Path
from typing import Any

from addrbook.book.store import AddressBook
from addrbook.config.models import AddressBookConfig, ConfigError
from addrbook.config.paths import get_config_path

# Environment variables that override config file values
ENV_OVERRIDES = {
    "ADDRBOOK_BOOK_PATH": "book_path",
    "ADDRBOOK_CAPACITY": "capacity",
}


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("config.toml"),  # Current directory
        get_config_path(),  # ~/.addrbook/config.toml (or ADDRBOOK_HOME)
    ]


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Override top-level settings from environment variables."""
    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            config[key] = value
    return config


def find_config_path(path: Path | None = None) -> Path | None:
    """Resolve the config file to use, or None if there is none.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
    """
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return config_path

    for default_path in _get_default_config_paths():
        expanded = default_path.expanduser()
        if expanded.exists():
            return expanded
    return None


def load_config(path: Path | None = None) -> AddressBookConfig:
    """Load configuration from TOML file.

    Args:
        path: Explicit path to config file. If None, searches default
            locations and falls back to defaults when none exists.

    Returns:
        Validated AddressBookConfig instance.

    Raises:
        FileNotFoundError: If an explicit config file is missing.
        ConfigError: If the config file is not valid TOML.
        pydantic.ValidationError: If config values are invalid.
    """
    config_path = find_config_path(path)

    raw_config: dict[str, Any] = {}
    if config_path is not None:
        try:
            with config_path.open("rb") as f:
                raw_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    raw_config = _apply_env_overrides(raw_config)
    return AddressBookConfig.model_validate(raw_config)


def get_default_config() -> AddressBookConfig:
    """Get a default configuration for development/testing."""
    return AddressBookConfig()


def create_address_book(config: AddressBookConfig) -> AddressBook:
    """Create an empty address book sized by the configuration."""
    return AddressBook(capacity=config.capacity)
