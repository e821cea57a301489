"""
Contact Analyzer — inventory of a collection of contacts.

This module provides lightweight analysis of Contact lists:
    - Optional-field coverage (middle initials)
    - Email verification status
    - Postal address validation status
    - Duplicate email addresses

IMPORTANT: It does NOT modify the contacts. It only produces read-only reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Set

from contactmodel.model import Contact, PersonalName


def display_name(name: PersonalName) -> str:
    """Format a name as "First M. Last", or "First Last" without an initial."""
    if name.middle_initial is None:
        return f"{name.first_name} {name.last_name}"
    return f"{name.first_name} {name.middle_initial}. {name.last_name}"


@dataclass
class ContactBookReport:
    """Analysis report for a collection of contacts."""

    total_contacts: int = 0

    # Optionality
    with_middle_initial: int = 0
    without_middle_initial: int = 0

    # Status flags
    verified_emails: int = 0
    unverified_emails: int = 0
    valid_addresses: int = 0
    invalid_addresses: int = 0

    # Lower-cased addresses seen more than once
    duplicate_emails: Set[str] = field(default_factory=set)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_contacts(contacts: Iterable[Contact]) -> ContactBookReport:
    """
    Build a ContactBookReport for the given contacts.

    Warns about unverified emails, unvalidated postal addresses and
    email addresses shared by more than one contact.
    """
    contacts = list(contacts)
    report = ContactBookReport(total_contacts=len(contacts))

    for contact in contacts:
        label = display_name(contact.name)

        if contact.name.middle_initial is None:
            report.without_middle_initial += 1
        else:
            report.with_middle_initial += 1

        email = contact.email_contact_info
        if email.is_email_verified:
            report.verified_emails += 1
        else:
            report.unverified_emails += 1
            report.add_warning(f"Email {email.email_address} for {label} is not verified")

        postal = contact.postal_contact_info
        if postal.is_address_valid:
            report.valid_addresses += 1
        else:
            report.invalid_addresses += 1
            report.add_warning(f"Postal address for {label} has not been validated")

    counts = Counter(c.email_contact_info.email_address.strip().lower() for c in contacts)
    report.duplicate_emails = {addr for addr, n in counts.items() if n > 1}
    for addr in sorted(report.duplicate_emails):
        report.add_warning(f"Email {addr} is shared by {counts[addr]} contacts")

    return report
