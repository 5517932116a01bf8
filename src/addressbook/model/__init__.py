"""Address book domain model."""

from addressbook.model.address_book import (
    AddressBook,
    DuplicatePersonError,
    PersonNotFoundError,
)
from addressbook.model.model_manager import SHOW_ALL_PERSONS, ModelManager
from addressbook.model.person import (
    EmergencyContact,
    EmergencyContactIndexError,
    Person,
)
from addressbook.model.sample_data import sample_address_book, sample_persons

__all__ = [
    "SHOW_ALL_PERSONS",
    "AddressBook",
    "DuplicatePersonError",
    "EmergencyContact",
    "EmergencyContactIndexError",
    "ModelManager",
    "Person",
    "PersonNotFoundError",
    "sample_address_book",
    "sample_persons",
]
