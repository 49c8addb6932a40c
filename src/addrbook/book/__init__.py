"""Address book subsystem.

Public API:
- AddressBook: Bounded, ordered store of entries with XML load/save
- LoadReport: Outcome of merging a document into a book

Types:
- Entry, Gender, PhoneNumber, EmailAddress, Contact

Errors:
- AddressBookError, CapacityExceededError, LoadError, SaveError
"""

from addrbook.book.errors import (
    AddressBookError,
    CapacityExceededError,
    LoadError,
    LoadErrorKind,
    SaveError,
    SaveErrorKind,
)
from addrbook.book.store import SIZE_LIMIT, AddressBook, LoadReport
from addrbook.book.types import Contact, EmailAddress, Entry, Gender, PhoneNumber

__all__ = [
    "SIZE_LIMIT",
    "AddressBook",
    "AddressBookError",
    "CapacityExceededError",
    "Contact",
    "EmailAddress",
    "Entry",
    "Gender",
    "LoadError",
    "LoadErrorKind",
    "LoadReport",
    "PhoneNumber",
    "SaveError",
    "SaveErrorKind",
]
