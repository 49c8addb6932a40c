"""XML document codec for address books.

Document shape::

    <AddressBook>
      <Entry FirstName="Ada" SurName="Lovelace" Gender="F">
        <Contact type="email">ada@example.com</Contact>
      </Entry>
    </AddressBook>

Element names, attribute names and the ``phone``/``email`` type values are
the compatibility contract with existing files; whitespace is not.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from addrbook.book.errors import LoadError, LoadErrorKind, SaveError, SaveErrorKind
from addrbook.book.types import EMAIL, PHONE, Entry, Gender, contact_type

logger = logging.getLogger(__name__)

ROOT_TAG = "AddressBook"
ENTRY_TAG = "Entry"
CONTACT_TAG = "Contact"

FIRST_NAME_ATTR = "FirstName"
SUR_NAME_ATTR = "SurName"
GENDER_ATTR = "Gender"
TYPE_ATTR = "type"

_PHONE_RE = re.compile(r"[+-]?\d+")

# XML 1.0 Char production
_XML_CHARS = "".join(
    [
        "\t\n\r",
        f"{chr(0x20)}-{chr(0xD7FF)}",
        f"{chr(0xE000)}-{chr(0xFFFD)}",
        f"{chr(0x10000)}-{chr(0x10FFFF)}",
    ]
)
_INVALID_CHAR_RE = re.compile(f"[^{_XML_CHARS}]")
# Line ends are normalized by XML parsers, so a carriage return never
# survives a round trip; attribute whitespace is normalized to spaces.
_TEXT_UNSAFE_RE = re.compile("\r")
_ATTR_UNSAFE_RE = re.compile("[\t\n\r]")


def _check_value(value: str, field: str, unsafe: re.Pattern[str]) -> None:
    match = _INVALID_CHAR_RE.search(value) or unsafe.search(value)
    if match is not None:
        raise SaveError(
            SaveErrorKind.SERIALIZATION_FAILURE,
            f"Cannot store {field} {value!r}: "
            f"character {match.group()!r} is not allowed",
        )


def encode(entries: Iterable[Entry]) -> bytes:
    """Serialize entries, in the given order, to an XML document.

    Raises:
        SaveError: If a value holds characters that would not read back
            unchanged.
    """
    root = ET.Element(ROOT_TAG)
    for entry in entries:
        _check_value(entry.first_name, "first name", _ATTR_UNSAFE_RE)
        _check_value(entry.sur_name, "surname", _ATTR_UNSAFE_RE)
        element = ET.SubElement(
            root,
            ENTRY_TAG,
            {
                FIRST_NAME_ATTR: entry.first_name,
                SUR_NAME_ATTR: entry.sur_name,
                GENDER_ATTR: entry.gender.value,
            },
        )
        kind = contact_type(entry.contact)
        if kind is None:
            continue
        text = str(entry.contact)
        _check_value(text, kind, _TEXT_UNSAFE_RE)
        contact = ET.SubElement(element, CONTACT_TAG, {TYPE_ATTR: kind})
        contact.text = text

    tree = ET.ElementTree(root)
    ET.indent(tree, space="  ")
    try:
        return ET.tostring(root, encoding="UTF-8", xml_declaration=True) + b"\n"
    except (TypeError, ValueError) as e:
        raise SaveError(
            SaveErrorKind.SERIALIZATION_FAILURE, f"Cannot serialize address book: {e}"
        ) from e


def decode(data: bytes | str) -> list[Entry]:
    """Parse an XML document into entries, in document order.

    Raises:
        LoadError: If the document is not well-formed, does not contain
            exactly one AddressBook element, or holds an unparseable phone
            number.
    """
    try:
        document = ET.fromstring(data)
    except ET.ParseError as e:
        raise LoadError(LoadErrorKind.PARSE_FAILURE, f"Malformed document: {e}") from e

    books = list(document.iter(ROOT_TAG))
    if len(books) != 1:
        raise LoadError(
            LoadErrorKind.MALFORMED_ROOT,
            f"No single {ROOT_TAG} element found (found {len(books)})",
        )

    return [_decode_entry(element) for element in books[0]]


def _decode_entry(element: ET.Element) -> Entry:
    entry = Entry(
        first_name=element.get(FIRST_NAME_ATTR, ""),
        sur_name=element.get(SUR_NAME_ATTR, ""),
        gender=Gender.from_code(element.get(GENDER_ATTR, "")),
    )

    contact = element.find(f".//{CONTACT_TAG}")
    if contact is None:
        return entry

    kind = contact.get(TYPE_ATTR, "").lower()
    text = "".join(contact.itertext())
    if kind == PHONE:
        return entry.with_phone(_parse_phone(text, entry))
    if kind == EMAIL:
        return entry.with_email(text)

    logger.debug("contact_type_ignored", extra={"contact.type": kind})
    return entry


def _parse_phone(text: str, entry: Entry) -> int:
    value = text.strip()
    if not _PHONE_RE.fullmatch(value):
        raise LoadError(
            LoadErrorKind.PARSE_FAILURE,
            f"Invalid phone number {text!r} for {entry.sur_name}, {entry.first_name}",
        )
    return int(value)
