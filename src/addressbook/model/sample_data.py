"""Seed persons for a fresh address book."""

from __future__ import annotations

from addressbook.model.address_book import AddressBook
from addressbook.model.person import EmergencyContact, Person


def sample_persons() -> tuple[Person, ...]:
    """Return sample persons with emergency contacts."""
    return (
        Person(
            name="Alex Yeoh",
            phone="87438807",
            email="alexyeoh@example.com",
            address="Blk 30 Geylang Street 29, #06-40",
            tags=("friends",),
            emergency_contacts=(
                EmergencyContact(
                    name="Mary Yeoh", phone="91234567", relationship="mother"
                ),
                EmergencyContact(
                    name="Sam Yeoh", phone="98765432", relationship="brother"
                ),
            ),
        ),
        Person(
            name="Bernice Yu",
            phone="99272758",
            email="berniceyu@example.com",
            address="Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            tags=("colleagues", "friends"),
            emergency_contacts=(
                EmergencyContact(
                    name="Daniel Yu", phone="93210283", relationship="spouse"
                ),
            ),
        ),
        Person(
            name="Charlotte Oliveiro",
            phone="93210283",
            email="charlotte@example.com",
            address="Blk 11 Ang Mo Kio Street 74, #11-04",
            tags=("neighbours",),
            emergency_contacts=(
                EmergencyContact(name="Luis Oliveiro", phone="87492021"),
            ),
        ),
        Person(
            name="David Li",
            phone="91031282",
            email="lidavid@example.com",
            address="Blk 436 Serangoon Gardens Street 26, #16-43",
            tags=("family",),
            emergency_contacts=(
                EmergencyContact(
                    name="Irfan Ibrahim", phone="92492021", relationship="friend"
                ),
                EmergencyContact(name="Roy Balakrishnan", phone="92624417"),
            ),
        ),
    )


def sample_address_book() -> AddressBook:
    """Return a new address book populated with sample persons."""
    return AddressBook(sample_persons())
