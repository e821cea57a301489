"""
Core Contact Model Objects

Defines the record types of the decomposed contact model.

These are pure data classes representing:
    - Personal names (with an optional middle initial)
    - Email contact details plus their verification status
    - Postal addresses (raw address data only)
    - Postal contact details plus their validation status
    - Contacts (root aggregate)

ARCHITECTURAL RULE:
    These objects:
        - Hold values, nothing else
        - Are immutable (frozen)
        - Are fully serializable
        - Carry no validation or side effects
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PersonalName:
    """
    A person's name as one atomic group.

    Properties:
        first_name: Given name (required)
        middle_initial:
            Optional middle initial.
            None means "no middle initial". An empty string is never
            used as a stand-in for absence.
        last_name: Family name (required)
    """

    first_name: str
    middle_initial: Optional[str]
    last_name: str


@dataclass(frozen=True)
class EmailContactInfo:
    """
    An email address together with its verification status.

    The address and the flag are grouped because they change together:
    a new address has not been verified yet.

    Properties:
        email_address: The address itself (required)
        is_email_verified: Whether the address has been confirmed

    NOTE:
        Replacing email_address should logically reset is_email_verified
        to False. This type does not enforce that; see
        contactmodel.changes.change_email_address for the explicit reset.
    """

    email_address: str
    is_email_verified: bool


@dataclass(frozen=True)
class PostalAddress:
    """
    A mailing address.

    Raw address data only. Whether the address has been validated is not
    part of the address itself, so there is no validity flag here.

    Properties:
        address1: First address line
        address2: Second address line (often blank, typed as plain text)
        city: City
        state: State or region code
        zip: Postal code
    """

    address1: str
    address2: str
    city: str
    state: str
    zip: str


@dataclass(frozen=True)
class PostalContactInfo:
    """
    A postal address paired with its validation status.

    This is the only type that carries is_address_valid.

    Properties:
        address: The PostalAddress
        is_address_valid: Whether the address has been validated
    """

    address: PostalAddress
    is_address_valid: bool


@dataclass(frozen=True)
class Contact:
    """
    Root aggregate for a contact.

    Composed of exactly three sub-aggregates instead of one flat list
    of fields:

        Contact
            name                 -> PersonalName
            email_contact_info   -> EmailContactInfo
            postal_contact_info  -> PostalContactInfo
                address          -> PostalAddress

    INVARIANTS:
        - No field lives directly on Contact
        - Reading back any nested field returns the value it was built with
        - There is no derived or hidden state
    """

    name: PersonalName
    email_contact_info: EmailContactInfo
    postal_contact_info: PostalContactInfo
