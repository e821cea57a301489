"""
Explicit update helpers for the contact model.

The record types never reset a status flag on their own. These helpers
are the opt-in way to replace a group's data and drop the flag that
described the old data. Every function returns a new value; arguments
are left untouched.
"""

from dataclasses import replace

from contactmodel.model import (
    Contact,
    PersonalName,
    EmailContactInfo,
    PostalAddress,
    PostalContactInfo,
)


def change_email_address(info: EmailContactInfo, new_address: str) -> EmailContactInfo:
    """
    Replace the email address and clear is_email_verified.

    If new_address equals the current address, info is returned unchanged.
    """
    if new_address == info.email_address:
        return info
    return EmailContactInfo(email_address=new_address, is_email_verified=False)


def verify_email(info: EmailContactInfo) -> EmailContactInfo:
    return replace(info, is_email_verified=True)


def change_postal_address(info: PostalContactInfo, new_address: PostalAddress) -> PostalContactInfo:
    """
    Replace the postal address and clear is_address_valid.

    If new_address equals the current address, info is returned unchanged.
    """
    if new_address == info.address:
        return info
    return PostalContactInfo(address=new_address, is_address_valid=False)


def mark_address_valid(info: PostalContactInfo) -> PostalContactInfo:
    return replace(info, is_address_valid=True)


def with_name(contact: Contact, name: PersonalName) -> Contact:
    return replace(contact, name=name)


def with_email_contact_info(contact: Contact, info: EmailContactInfo) -> Contact:
    return replace(contact, email_contact_info=info)


def with_postal_contact_info(contact: Contact, info: PostalContactInfo) -> Contact:
    return replace(contact, postal_contact_info=info)
