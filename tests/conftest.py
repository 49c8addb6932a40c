"""Shared test fixtures and factories."""

from pathlib import Path

import pytest

from addrbook.book import AddressBook, Entry, Gender
from addrbook.config.paths import ENV_VAR, get_addrbook_home

# =============================================================================
# Entry Factories
# =============================================================================


def make_entry(
    first_name: str = "Jane",
    sur_name: str = "Doe",
    gender: Gender = Gender.FEMALE,
    phone: int | None = None,
    email: str | None = None,
) -> Entry:
    """Factory for creating entries."""
    entry = Entry(first_name=first_name, sur_name=sur_name, gender=gender)
    if phone is not None:
        entry = entry.with_phone(phone)
    elif email is not None:
        entry = entry.with_email(email)
    return entry


@pytest.fixture
def jane() -> Entry:
    return make_entry("Jane", "Doe", Gender.FEMALE, phone=12345)


@pytest.fixture
def john() -> Entry:
    return make_entry("John", "Doe", Gender.MALE, email="john@x.com")


@pytest.fixture
def ada() -> Entry:
    return make_entry("Ada", "Lovelace", Gender.FEMALE)


@pytest.fixture
def book() -> AddressBook:
    return AddressBook()


@pytest.fixture
def populated_book(jane: Entry, john: Entry, ada: Entry) -> AddressBook:
    book = AddressBook()
    for entry in (jane, john, ada):
        book.add(entry)
    return book


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def addrbook_home(monkeypatch, tmp_path: Path) -> Path:
    """Point ADDRBOOK_HOME at a temporary directory."""
    home = tmp_path / "home"
    monkeypatch.setenv(ENV_VAR, str(home))
    monkeypatch.delenv("ADDRBOOK_BOOK_PATH", raising=False)
    monkeypatch.delenv("ADDRBOOK_CAPACITY", raising=False)
    monkeypatch.chdir(tmp_path)
    get_addrbook_home.cache_clear()
    yield home
    get_addrbook_home.cache_clear()


@pytest.fixture
def book_file(tmp_path: Path) -> Path:
    return tmp_path / "contacts.xml"


# =============================================================================
# CLI Test Helpers
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1", "COLUMNS": "200"})
