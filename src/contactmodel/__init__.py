"""
Contact Data Model Package

Models a contact record with nominal types, atomic grouping and explicit
optionality.

ARCHITECTURAL GUARANTEE:
------------------------
The record types in this package contain ZERO:
    - Validation logic
    - Side effects on construction
    - Derived or hidden state
    - Empty-string sentinels for absent values

This package defines CONTACT STRUCTURE only.

Conversions (flat rows, JSON/YAML, CSV) and reports live in their own
modules and consume the model unchanged.
"""

from contactmodel.model import (
    Contact,
    PersonalName,
    EmailContactInfo,
    PostalAddress,
    PostalContactInfo,
)

__version__ = "0.1.0"

__all__ = [
    "Contact",
    "PersonalName",
    "EmailContactInfo",
    "PostalAddress",
    "PostalContactInfo",
]
