"""
CSV Parser for contacts (flat rows -> decomposed Contact objects).

CSV Format:
    first_name, middle_initial, last_name,
    email_address, is_email_verified,
    address1, address2, city, state, zip, is_address_valid

Syntax Notes:
    - middle_initial and address2 may be blank
    - A blank middle_initial becomes None, never ""
    - Values are kept as written; whitespace only matters for blank checks
    - Errors and warnings cite the physical line number
    - Flag columns accept true/false, yes/no, y/n, 1/0; blank means false
"""

import csv
import warnings
from io import StringIO
from typing import Iterable, List

from contactmodel.model import Contact
from contactmodel.flat import FlatContact, decompose, flatten


class CSVParseError(Exception):
    """Raised when CSV parsing fails."""
    pass


COLUMNS = [
    'first_name',
    'middle_initial',
    'last_name',
    'email_address',
    'is_email_verified',
    'address1',
    'address2',
    'city',
    'state',
    'zip',
    'is_address_valid',
]

OPTIONAL_COLUMNS = {'middle_initial', 'address2', 'is_email_verified', 'is_address_valid'}

_TRUE_VALUES = {'true', 'yes', 'y', '1'}
_FALSE_VALUES = {'false', 'no', 'n', '0', ''}


def parse_bool(value: str) -> bool:
    """
    Parse a flag column.

    Raises:
        ValueError: If the value is not a recognised boolean
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def _parse_row(row: dict) -> FlatContact:
    values = {col: row.get(col) or '' for col in COLUMNS}

    blank = [col for col in COLUMNS if col not in OPTIONAL_COLUMNS and not values[col].strip()]
    if blank:
        raise ValueError(f"Blank required fields: {blank}")

    return FlatContact(
        first_name=values['first_name'],
        middle_initial=values['middle_initial'],
        last_name=values['last_name'],
        email_address=values['email_address'],
        is_email_verified=parse_bool(values['is_email_verified']),
        address1=values['address1'],
        address2=values['address2'],
        city=values['city'],
        state=values['state'],
        zip=values['zip'],
        is_address_valid=parse_bool(values['is_address_valid']),
    )


def parse_csv_string(csv_content: str) -> List[Contact]:
    """
    Parse CSV content into Contact objects.

    Args:
        csv_content: CSV as string (header row required)

    Returns:
        List of Contact objects, in row order

    Raises:
        CSVParseError: If parsing fails
    """
    reader = csv.DictReader(StringIO(csv_content))

    if reader.fieldnames is None:
        raise CSVParseError("CSV is empty")

    fieldnames = [name.strip() for name in reader.fieldnames]
    missing = [col for col in COLUMNS if col not in OPTIONAL_COLUMNS and col not in fieldnames]
    if missing:
        raise CSVParseError(f"Missing required columns: {missing}")
    reader.fieldnames = fieldnames

    contacts = []
    for row in reader:
        # Physical line where the record ends; blank lines and multi-line fields count
        line_num = reader.line_num
        try:
            flat = _parse_row(row)
        except ValueError as e:
            raise CSVParseError(f"Error parsing line {line_num}: {str(e)}")

        if len(flat.middle_initial.strip()) > 1:
            warnings.warn(
                f"Middle initial {flat.middle_initial!r} on line {line_num} is longer than one character",
                UserWarning,
            )

        contacts.append(decompose(flat))

    return contacts


def parse_csv_file(filepath: str, encoding: str = 'utf-8') -> List[Contact]:
    """
    Parse a CSV file into Contact objects.

    Raises:
        FileNotFoundError: If file doesn't exist
        CSVParseError: If parsing fails
    """
    try:
        with open(filepath, 'r', encoding=encoding, newline='') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    return parse_csv_string(content)


def contacts_to_csv(contacts: Iterable[Contact]) -> str:
    """Write contacts as flat CSV rows with a header. Flags become true/false."""
    out = StringIO()
    writer = csv.DictWriter(out, fieldnames=COLUMNS)
    writer.writeheader()
    for contact in contacts:
        flat = flatten(contact)
        row = {col: getattr(flat, col) for col in COLUMNS}
        row['is_email_verified'] = 'true' if flat.is_email_verified else 'false'
        row['is_address_valid'] = 'true' if flat.is_address_valid else 'false'
        writer.writerow(row)
    return out.getvalue()


__all__ = [
    "parse_csv_string",
    "parse_csv_file",
    "contacts_to_csv",
    "parse_bool",
    "CSVParseError",
    "COLUMNS",
]
