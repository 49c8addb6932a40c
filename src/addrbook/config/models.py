"""Configuration models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from addrbook.book.store import SIZE_LIMIT
from addrbook.config.paths import get_book_path


class LoggingConfig(BaseModel):
    """Configuration for log output.

    Contact details (e-mail addresses, phone numbers) are masked in log
    files unless redaction is turned off.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_to_file: bool = False
    redact_contacts: bool = True


class ConfigError(Exception):
    """Configuration error."""

    pass


class AddressBookConfig(BaseModel):
    """Root configuration model."""

    book_path: Path = Field(default_factory=get_book_path)
    capacity: int = Field(default=SIZE_LIMIT, ge=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
