"""
Flat contact records and conversion to/from the decomposed model.

FlatContact is the single-record layout the decomposed Contact replaces:
eleven fields side by side, with a blank string standing in for a missing
middle initial. It is kept because flat rows are what CSV files and
spreadsheets hand us.
"""

from dataclasses import dataclass

from contactmodel.model import (
    Contact,
    PersonalName,
    EmailContactInfo,
    PostalAddress,
    PostalContactInfo,
)


@dataclass(frozen=True)
class FlatContact:
    """All contact fields in one record. middle_initial is "" when absent."""

    first_name: str
    middle_initial: str
    last_name: str
    email_address: str
    is_email_verified: bool
    address1: str
    address2: str
    city: str
    state: str
    zip: str
    is_address_valid: bool


def decompose(flat: FlatContact) -> Contact:
    """
    Group a FlatContact into a Contact.

    A blank or whitespace-only middle initial becomes None.
    """
    middle_initial = flat.middle_initial if flat.middle_initial.strip() else None

    return Contact(
        name=PersonalName(
            first_name=flat.first_name,
            middle_initial=middle_initial,
            last_name=flat.last_name,
        ),
        email_contact_info=EmailContactInfo(
            email_address=flat.email_address,
            is_email_verified=flat.is_email_verified,
        ),
        postal_contact_info=PostalContactInfo(
            address=PostalAddress(
                address1=flat.address1,
                address2=flat.address2,
                city=flat.city,
                state=flat.state,
                zip=flat.zip,
            ),
            is_address_valid=flat.is_address_valid,
        ),
    )


def flatten(contact: Contact) -> FlatContact:
    """Spread a Contact back into a FlatContact. None becomes ""."""
    name = contact.name
    email = contact.email_contact_info
    postal = contact.postal_contact_info
    address = postal.address

    return FlatContact(
        first_name=name.first_name,
        middle_initial=name.middle_initial or "",
        last_name=name.last_name,
        email_address=email.email_address,
        is_email_verified=email.is_email_verified,
        address1=address.address1,
        address2=address.address2,
        city=address.city,
        state=address.state,
        zip=address.zip,
        is_address_valid=postal.is_address_valid,
    )
