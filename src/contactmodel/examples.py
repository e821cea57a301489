"""
Example contact builder.

Builds the Jane Doe contact used throughout the docs and tests: no middle
initial, an unverified email, and an address that has not been validated.
"""
from contactmodel.model import (
    Contact,
    PersonalName,
    EmailContactInfo,
    PostalAddress,
    PostalContactInfo,
)


def build_example_contact() -> Contact:
    name = PersonalName(first_name="Jane", middle_initial=None, last_name="Doe")

    email = EmailContactInfo(email_address="jane@example.com", is_email_verified=False)

    # Second address line is blank text, not absent
    address = PostalAddress(
        address1="123 Main St",
        address2="",
        city="Springfield",
        state="IL",
        zip="62704",
    )
    postal = PostalContactInfo(address=address, is_address_valid=False)

    return Contact(name=name, email_contact_info=email, postal_contact_info=postal)
