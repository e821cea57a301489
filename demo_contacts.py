#!/usr/bin/env python3
"""
Contact Model Demo: Flat CSV → Contacts → YAML → Analysis

Shows the full workflow:
1. Build the example contact and read nested fields back
2. Parse a small flat CSV into decomposed contacts
3. Serialize to YAML
4. Change an email address and watch the verification flag reset
5. Analyze the contact list
"""

from contactmodel.analyzer import analyze_contacts, display_name
from contactmodel.changes import change_email_address, verify_email, with_email_contact_info
from contactmodel.csv_parser import parse_csv_string, contacts_to_csv
from contactmodel.examples import build_example_contact
from contactmodel.serialization import contacts_to_yaml


SAMPLE_CSV = """first_name,middle_initial,last_name,email_address,is_email_verified,address1,address2,city,state,zip,is_address_valid
Jane,,Doe,jane@example.com,false,123 Main St,,Springfield,IL,62704,false
John,Q,Public,jqp@example.com,true,9 Oak Ave,Suite 100,Capital City,CA,90210,true
"""


def main():
    print("=" * 80)
    print("CONTACT MODEL DEMO: CSV → Contacts → YAML → Analysis")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Example contact
    # =========================================================================
    print("\n1. EXAMPLE CONTACT...")
    contact = build_example_contact()
    print(f"   ✓ Name: {display_name(contact.name)}")
    print(f"   ✓ Middle initial: {'absent' if contact.name.middle_initial is None else contact.name.middle_initial}")
    print(f"   ✓ City: {contact.postal_contact_info.address.city}")

    # =========================================================================
    # STEP 2: Parse CSV
    # =========================================================================
    print("\n2. PARSING CSV...")
    contacts = parse_csv_string(SAMPLE_CSV)
    print(f"   ✓ Loaded contacts: {len(contacts)}")

    # =========================================================================
    # STEP 3: YAML
    # =========================================================================
    print("\n3. YAML OUTPUT:")
    print("-" * 80)
    for line in contacts_to_yaml(contacts).splitlines():
        print(f"   {line}")

    # =========================================================================
    # STEP 4: Change an email address
    # =========================================================================
    print("\n4. CHANGING AN EMAIL ADDRESS...")
    john = contacts[1]
    print(f"   Before: {john.email_contact_info}")
    moved = change_email_address(john.email_contact_info, "john.public@example.com")
    print(f"   After:  {moved}")
    contacts[1] = with_email_contact_info(john, moved)
    print(f"   Re-verified: {verify_email(moved)}")

    # =========================================================================
    # STEP 5: Analysis
    # =========================================================================
    print("\n5. ANALYSIS:")
    print("-" * 80)
    report = analyze_contacts(contacts)
    print(f"   Contacts: {report.total_contacts}")
    print(f"   Without middle initial: {report.without_middle_initial}")
    print(f"   Unverified emails: {report.unverified_emails}")
    print(f"   Unvalidated addresses: {report.invalid_addresses}")
    if report.warnings:
        print(f"\n   Warnings ({len(report.warnings)}):")
        for warning in report.warnings:
            print(f"      - {warning}")

    print("\n" + "=" * 80)
    print("FLAT CSV (round trip):")
    print(contacts_to_csv(contacts))
    print("=" * 80)


if __name__ == "__main__":
    main()
