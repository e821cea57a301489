"""
Tests for the core contact model objects.

These tests verify:
    - Basic record creation
    - Explicit optionality of the middle initial
    - Structural decomposition of Contact
    - Immutability and value equality
"""

import dataclasses
import typing

import pytest
from contactmodel.model import (
    Contact,
    PersonalName,
    EmailContactInfo,
    PostalAddress,
    PostalContactInfo,
)
from contactmodel.examples import build_example_contact


def field_names(cls):
    return [f.name for f in dataclasses.fields(cls)]


class TestPersonalName:
    """Test PersonalName objects."""

    def test_with_middle_initial(self):
        """Should store a present middle initial."""
        name = PersonalName(first_name="John", middle_initial="Q", last_name="Public")
        assert name.first_name == "John"
        assert name.middle_initial == "Q"
        assert name.last_name == "Public"

    def test_without_middle_initial(self):
        """Absence is None, not an empty string."""
        name = PersonalName(first_name="Jane", middle_initial=None, last_name="Doe")
        assert name.middle_initial is None
        assert name.middle_initial != ""

    def test_middle_initial_must_be_given_explicitly(self):
        """The optional field has no default; absence is a deliberate choice."""
        with pytest.raises(TypeError):
            PersonalName(first_name="Jane", last_name="Doe")

    def test_middle_initial_is_typed_optional(self):
        """The annotation itself declares optionality."""
        hints = {f.name: f.type for f in dataclasses.fields(PersonalName)}
        assert type(None) in typing.get_args(hints["middle_initial"])
        assert hints["first_name"] is str


class TestEmailContactInfo:
    """Test EmailContactInfo objects."""

    def test_create(self):
        info = EmailContactInfo(email_address="a@example.com", is_email_verified=True)
        assert info.email_address == "a@example.com"
        assert info.is_email_verified is True

    def test_no_automatic_reset(self):
        """The type itself never resets the flag; replacing the address keeps it."""
        info = EmailContactInfo(email_address="a@example.com", is_email_verified=True)
        changed = dataclasses.replace(info, email_address="b@example.com")
        assert changed.is_email_verified is True


class TestPostalTypes:
    """Test PostalAddress and PostalContactInfo."""

    def test_address_has_no_validity_flag(self):
        assert field_names(PostalAddress) == ["address1", "address2", "city", "state", "zip"]
        assert "is_address_valid" not in field_names(PostalAddress)

    def test_only_postal_contact_info_carries_validity(self):
        """is_address_valid appears on PostalContactInfo and nowhere else."""
        owners = [
            cls
            for cls in (Contact, PersonalName, EmailContactInfo, PostalAddress, PostalContactInfo)
            if "is_address_valid" in field_names(cls)
        ]
        assert owners == [PostalContactInfo]

    def test_blank_second_line_is_allowed(self):
        address = PostalAddress("1 Elm St", "", "Shelbyville", "IL", "62565")
        assert address.address2 == ""


class TestContact:
    """Test the Contact aggregate."""

    def test_composed_of_three_sub_aggregates(self):
        """Contact has exactly name, email and postal groups."""
        hints = {f.name: f.type for f in dataclasses.fields(Contact)}
        assert list(hints) == ["name", "email_contact_info", "postal_contact_info"]

    def test_sub_aggregate_types(self):
        contact = build_example_contact()
        assert isinstance(contact.name, PersonalName)
        assert isinstance(contact.email_contact_info, EmailContactInfo)
        assert isinstance(contact.postal_contact_info, PostalContactInfo)
        assert isinstance(contact.postal_contact_info.address, PostalAddress)

    def test_read_back_returns_original_values(self):
        """Every nested field reads back exactly as constructed."""
        name = PersonalName("Ada", "K", "Lovelace")
        email = EmailContactInfo("ada@example.com", True)
        address = PostalAddress("12 St James's Sq", "Flat 2", "London", "LDN", "SW1Y")
        postal = PostalContactInfo(address, True)

        contact = Contact(name=name, email_contact_info=email, postal_contact_info=postal)

        assert contact.name is name
        assert contact.email_contact_info is email
        assert contact.postal_contact_info is postal
        assert contact.name.middle_initial == "K"
        assert contact.postal_contact_info.address.address2 == "Flat 2"
        assert contact.postal_contact_info.address.zip == "SW1Y"
        assert contact.email_contact_info.is_email_verified is True

    def test_jane_doe_scenario(self):
        contact = build_example_contact()
        assert contact.name.first_name == "Jane"
        assert contact.name.middle_initial is None
        assert contact.name.last_name == "Doe"
        assert contact.email_contact_info.email_address == "jane@example.com"
        assert contact.email_contact_info.is_email_verified is False
        assert contact.postal_contact_info.address.city == "Springfield"
        assert contact.postal_contact_info.address.address2 == ""
        assert contact.postal_contact_info.is_address_valid is False

    def test_immutable(self):
        contact = build_example_contact()
        with pytest.raises(dataclasses.FrozenInstanceError):
            contact.name = PersonalName("X", None, "Y")
        with pytest.raises(dataclasses.FrozenInstanceError):
            contact.name.first_name = "X"

    def test_value_equality(self):
        """Contacts have no identity; equal fields mean equal contacts."""
        assert build_example_contact() == build_example_contact()
        assert hash(build_example_contact()) == hash(build_example_contact())
