"""
Serialization helpers for contact model objects.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
The dict layout mirrors the nesting of the record types; an absent middle
initial is written as null.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping

import yaml

from contactmodel.model import (
    Contact,
    PersonalName,
    EmailContactInfo,
    PostalAddress,
    PostalContactInfo,
)


def _require_mapping(d: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(d, Mapping):
        raise TypeError(f"Expected a mapping for {what}, got {type(d).__name__}")
    return d


def name_to_dict(n: PersonalName) -> Dict[str, Any]:
    return {
        "first_name": n.first_name,
        "middle_initial": n.middle_initial,
        "last_name": n.last_name,
    }


def _require_bool(d: Mapping[str, Any], key: str) -> bool:
    value = d.get(key, False)
    if not isinstance(value, bool):
        raise TypeError(f"Expected a bool for {key}, got {type(value).__name__}")
    return value


def _require_str(d: Mapping[str, Any], key: str) -> str:
    value = d[key]
    if not isinstance(value, str):
        raise TypeError(f"Expected a str for {key}, got {type(value).__name__}")
    return value


def name_from_dict(d: Any) -> PersonalName:
    d = _require_mapping(d, "name")
    # Blank input is accepted but never kept as a sentinel
    middle_initial = d.get("middle_initial")
    if middle_initial is not None and not middle_initial.strip():
        middle_initial = None
    return PersonalName(first_name=d["first_name"], middle_initial=middle_initial, last_name=d["last_name"])


def email_to_dict(e: EmailContactInfo) -> Dict[str, Any]:
    return {"email_address": e.email_address, "is_email_verified": e.is_email_verified}


def email_from_dict(d: Any) -> EmailContactInfo:
    d = _require_mapping(d, "email_contact_info")
    return EmailContactInfo(
        email_address=d["email_address"],
        is_email_verified=_require_bool(d, "is_email_verified"),
    )


def address_to_dict(a: PostalAddress) -> Dict[str, Any]:
    return {
        "address1": a.address1,
        "address2": a.address2,
        "city": a.city,
        "state": a.state,
        "zip": a.zip,
    }


def address_from_dict(d: Any) -> PostalAddress:
    d = _require_mapping(d, "address")
    return PostalAddress(
        address1=d["address1"],
        address2=d.get("address2", ""),
        city=d["city"],
        state=d["state"],
        # Unquoted YAML zips load as ints (02134 as octal), so refuse them
        zip=_require_str(d, "zip"),
    )


def postal_to_dict(p: PostalContactInfo) -> Dict[str, Any]:
    return {"address": address_to_dict(p.address), "is_address_valid": p.is_address_valid}


def postal_from_dict(d: Any) -> PostalContactInfo:
    d = _require_mapping(d, "postal_contact_info")
    return PostalContactInfo(
        address=address_from_dict(d["address"]),
        is_address_valid=_require_bool(d, "is_address_valid"),
    )


def contact_to_dict(c: Contact) -> Dict[str, Any]:
    return {
        "name": name_to_dict(c.name),
        "email_contact_info": email_to_dict(c.email_contact_info),
        "postal_contact_info": postal_to_dict(c.postal_contact_info),
    }


def contact_from_dict(d: Any) -> Contact:
    d = _require_mapping(d, "contact")
    return Contact(
        name=name_from_dict(d["name"]),
        email_contact_info=email_from_dict(d["email_contact_info"]),
        postal_contact_info=postal_from_dict(d["postal_contact_info"]),
    )


def contact_to_json(c: Contact) -> str:
    return json.dumps(contact_to_dict(c), sort_keys=True)


def contact_from_json(s: str) -> Contact:
    return contact_from_dict(json.loads(s))


def contact_to_yaml(c: Contact) -> str:
    return yaml.safe_dump(contact_to_dict(c))


def contact_from_yaml(s: str) -> Contact:
    return contact_from_dict(yaml.safe_load(s))


def _contacts_from_list(d: Any) -> List[Contact]:
    if not isinstance(d, list):
        raise TypeError(f"Expected a list of contacts, got {type(d).__name__}")
    return [contact_from_dict(item) for item in d]


def contacts_to_json(contacts: List[Contact]) -> str:
    return json.dumps([contact_to_dict(c) for c in contacts], sort_keys=True)


def contacts_from_json(s: str) -> List[Contact]:
    return _contacts_from_list(json.loads(s))


def contacts_to_yaml(contacts: List[Contact]) -> str:
    return yaml.safe_dump([contact_to_dict(c) for c in contacts])


def contacts_from_yaml(s: str) -> List[Contact]:
    return _contacts_from_list(yaml.safe_load(s))
