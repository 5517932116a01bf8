"""Pytest configuration and shared fixtures."""

from collections.abc import Callable

import pytest

from addressbook.model import AddressBook, EmergencyContact, ModelManager, Person


def _contact(number: int) -> EmergencyContact:
    """Build deterministic emergency contact fixture."""
    return EmergencyContact(
        name=f"Contact {number}",
        phone=f"9000000{number}",
        relationship="friend" if number % 2 else None,
    )


@pytest.fixture
def make_person() -> Callable[..., Person]:
    """Factory for valid persons with a chosen number of emergency contacts."""

    def _make(name: str = "Alice Pauline", contacts: int = 1) -> Person:
        return Person(
            name=name,
            phone="94351253",
            email=f"{name.split()[0].lower()}@example.com",
            address="123, Jurong West Ave 6, #08-111",
            tags=("friends",),
            emergency_contacts=tuple(_contact(n) for n in range(1, contacts + 1)),
        )

    return _make


@pytest.fixture
def three_person_model(make_person: Callable[..., Person]) -> ModelManager:
    """Model displaying three persons with one, two and three contacts."""
    return ModelManager(
        AddressBook(
            (
                make_person("Alice Pauline", contacts=1),
                make_person("Benson Meier", contacts=2),
                make_person("Carl Kurz", contacts=3),
            )
        )
    )
