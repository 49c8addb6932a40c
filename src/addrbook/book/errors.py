"""Address book error types."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class AddressBookError(Exception):
    """Base error for the address book."""


class CapacityExceededError(AddressBookError):
    """Raised when adding to a book that is already full."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Limit is {capacity}")
        self.capacity = capacity


class LoadErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    MALFORMED_ROOT = "malformed_root"
    PARSE_FAILURE = "parse_failure"
    IO_FAILURE = "io_failure"


class SaveErrorKind(StrEnum):
    IO_FAILURE = "io_failure"
    SERIALIZATION_FAILURE = "serialization_failure"


class LoadError(AddressBookError):
    """Raised when a book document cannot be read or parsed."""

    def __init__(
        self, kind: LoadErrorKind, message: str, path: Path | None = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path


class SaveError(AddressBookError):
    """Raised when a book cannot be serialized or written."""

    def __init__(
        self, kind: SaveErrorKind, message: str, path: Path | None = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path
