"""Tests for address book entry types."""

import logging

import pytest

from addrbook.book.types import (
    EmailAddress,
    Entry,
    Gender,
    PhoneNumber,
    contact_type,
)
from tests.conftest import make_entry


class TestGender:
    """Tests for Gender code mapping."""

    @pytest.mark.parametrize("code", ["M", "m"])
    def test_male_codes(self, code):
        assert Gender.from_code(code) is Gender.MALE

    @pytest.mark.parametrize("code", ["F", "f"])
    def test_female_codes(self, code):
        assert Gender.from_code(code) is Gender.FEMALE

    @pytest.mark.parametrize("code", ["", "X", "male", "female"])
    def test_unrecognized_codes_map_to_female(self, code):
        assert Gender.from_code(code) is Gender.FEMALE

    def test_unrecognized_code_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="addrbook.book.types"):
            Gender.from_code("?")
        assert "unrecognized_gender_code" in caplog.text

    def test_known_code_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="addrbook.book.types"):
            Gender.from_code("f")
        assert caplog.records == []

    def test_values_are_persisted_codes(self):
        assert Gender.MALE.value == "M"
        assert Gender.FEMALE.value == "F"


class TestContact:
    """Tests for contact variants."""

    def test_phone_renders_digits(self):
        assert str(PhoneNumber(4930123)) == "4930123"

    def test_email_renders_literal(self):
        assert str(EmailAddress("a.b@example.com")) == "a.b@example.com"

    def test_contact_type(self):
        assert contact_type(PhoneNumber(1)) == "phone"
        assert contact_type(EmailAddress("x@y.z")) == "email"
        assert contact_type(None) is None


class TestEntry:
    """Tests for Entry identity and contact handling."""

    def test_key_is_surname_then_first_name(self):
        entry = Entry(first_name="Ada", sur_name="Lovelace")
        assert entry.key == ("Lovelace", "Ada")

    def test_empty_names_allowed(self):
        entry = Entry(first_name="", sur_name="")
        assert entry.key == ("", "")

    def test_equality_ignores_gender_and_contact(self):
        a = make_entry("Jane", "Doe", Gender.FEMALE, phone=1)
        b = make_entry("Jane", "Doe", Gender.MALE, email="jane@x.com")
        assert a == b
        assert hash(a) == hash(b)

    def test_different_names_not_equal(self):
        assert make_entry("Jane", "Doe") != make_entry("John", "Doe")

    def test_ordering_surname_primary(self):
        assert make_entry("Zed", "Adams") < make_entry("Amy", "Baker")

    def test_ordering_first_name_secondary(self):
        assert make_entry("Jane", "Doe") < make_entry("John", "Doe")

    def test_ordering_is_raw_text_comparison(self):
        # Uppercase sorts before lowercase
        assert make_entry("a", "Zulu") < make_entry("a", "alpha")

    def test_sorted(self):
        entries = [
            make_entry("John", "Doe"),
            make_entry("Ada", "Lovelace"),
            make_entry("Jane", "Doe"),
        ]
        assert [e.key for e in sorted(entries)] == [
            ("Doe", "Jane"),
            ("Doe", "John"),
            ("Lovelace", "Ada"),
        ]

    def test_setting_phone_replaces_email(self):
        entry = make_entry(email="jane@x.com").with_phone(555)
        assert entry.contact == PhoneNumber(555)

    def test_setting_email_replaces_phone(self):
        entry = make_entry(phone=555).with_email("jane@x.com")
        assert entry.contact == EmailAddress("jane@x.com")

    def test_without_contact(self):
        assert make_entry(phone=555).without_contact().contact is None

    def test_with_methods_return_new_entries(self):
        entry = make_entry()
        updated = entry.with_phone(1).with_gender(Gender.MALE)
        assert entry.contact is None
        assert entry.gender is Gender.FEMALE
        assert updated.is_male

    def test_entries_are_immutable(self):
        entry = make_entry()
        with pytest.raises(AttributeError):
            entry.first_name = "Other"  # type: ignore[misc]

    def test_str_with_contact(self):
        entry = make_entry("Jane", "Doe", phone=12345)
        assert str(entry) == "Doe, Jane (F): 12345"

    def test_str_without_contact(self):
        entry = make_entry("Ada", "Lovelace")
        assert str(entry) == "Lovelace, Ada (F)"
