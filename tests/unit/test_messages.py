"""Unit tests for user-facing entity formatting."""

from __future__ import annotations

import pytest

from addressbook.messages import format_emergency_contact, format_person
from addressbook.model import EmergencyContact, Person


@pytest.mark.unit
def test_format_emergency_contact_with_and_without_relationship() -> None:
    """Relationship should only be rendered when present."""
    with_relationship = EmergencyContact(
        name="Mary Yeoh", phone="91234567", relationship="mother"
    )
    without_relationship = EmergencyContact(name="Sam Yeoh", phone="98765432")

    assert (
        format_emergency_contact(with_relationship)
        == "Mary Yeoh; Phone: 91234567; Relationship: mother"
    )
    assert format_emergency_contact(without_relationship) == "Sam Yeoh; Phone: 98765432"


@pytest.mark.unit
def test_format_person_includes_all_fields() -> None:
    """Person rendering should include every user-visible field."""
    person = Person(
        name="Alex Yeoh",
        phone="87438807",
        email="alexyeoh@example.com",
        address="Blk 30 Geylang Street 29",
        tags=("friends", "colleagues"),
        emergency_contacts=(EmergencyContact(name="Sam Yeoh", phone="98765432"),),
    )

    assert format_person(person) == (
        "Alex Yeoh; Phone: 87438807; Email: alexyeoh@example.com; "
        "Address: Blk 30 Geylang Street 29; Tags: [colleagues][friends]; "
        "Emergency Contacts: Sam Yeoh; Phone: 98765432"
    )
