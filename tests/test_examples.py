"""
Test the example contact builder.
"""

from contactmodel.examples import build_example_contact
from contactmodel import Contact


def test_example_contact_structure():
    contact = build_example_contact()

    assert isinstance(contact, Contact)
    assert contact.name.first_name == "Jane"
    assert contact.name.middle_initial is None
    assert contact.postal_contact_info.address.city == "Springfield"
    assert contact.postal_contact_info.address.state == "IL"
    assert contact.postal_contact_info.address.zip == "62704"
