"""Configuration module."""

from addrbook.config.loader import (
    create_address_book,
    find_config_path,
    get_default_config,
    load_config,
)
from addrbook.config.models import AddressBookConfig, ConfigError, LoggingConfig
from addrbook.config.paths import (
    get_addrbook_home,
    get_book_path,
    get_config_path,
    get_logs_path,
)

__all__ = [
    "AddressBookConfig",
    "ConfigError",
    "LoggingConfig",
    "create_address_book",
    "find_config_path",
    "get_addrbook_home",
    "get_book_path",
    "get_config_path",
    "get_default_config",
    "get_logs_path",
    "load_config",
]
