"""Address book entry types.

An entry is identified by its ``(sur_name, first_name)`` key. Gender and
contact information are payload only: two entries with the same key are the
same entry, whatever else they carry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

logger = logging.getLogger(__name__)


class Gender(StrEnum):
    """Gender, valued by its persisted single-letter code."""

    MALE = "M"
    FEMALE = "F"

    @classmethod
    def from_code(cls, code: str) -> Gender:
        """Map a persisted code to a gender.

        ``M`` (any case) is male; every other value, including an empty
        string, is female.
        """
        normalized = code.upper()
        if normalized == cls.MALE:
            return cls.MALE
        if normalized != cls.FEMALE:
            logger.warning("unrecognized_gender_code", extra={"gender.code": code})
        return cls.FEMALE


@dataclass(frozen=True)
class PhoneNumber:
    number: int

    def __str__(self) -> str:
        return str(self.number)


@dataclass(frozen=True)
class EmailAddress:
    address: str

    def __str__(self) -> str:
        return self.address


Contact = PhoneNumber | EmailAddress

PHONE = "phone"
EMAIL = "email"


def contact_type(contact: Contact | None) -> str | None:
    """Return the persisted type name of a contact, or None if unset."""
    if isinstance(contact, PhoneNumber):
        return PHONE
    if isinstance(contact, EmailAddress):
        return EMAIL
    return None


@dataclass(frozen=True, eq=False)
class Entry:
    """A single person in the address book."""

    first_name: str
    sur_name: str
    gender: Gender = Gender.FEMALE
    contact: Contact | None = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.sur_name, self.first_name)

    @property
    def is_male(self) -> bool:
        return self.gender == Gender.MALE

    def with_gender(self, gender: Gender) -> Entry:
        return replace(self, gender=gender)

    def with_phone(self, number: int) -> Entry:
        return replace(self, contact=PhoneNumber(number))

    def with_email(self, address: str) -> Entry:
        return replace(self, contact=EmailAddress(address))

    def without_contact(self) -> Entry:
        return replace(self, contact=None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: Entry) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key < other.key

    def __le__(self, other: Entry) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key <= other.key

    def __gt__(self, other: Entry) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key > other.key

    def __ge__(self, other: Entry) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key >= other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        summary = f"{self.sur_name}, {self.first_name} ({self.gender.value})"
        if self.contact is not None:
            summary += f": {self.contact}"
        return summary
