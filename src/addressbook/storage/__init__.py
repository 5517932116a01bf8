"""Address book persistence."""

from addressbook.storage.store import (
    ADDRESS_BOOK_SCHEMA_VERSION,
    AddressBookFormatError,
    AddressBookSchemaVersionError,
    AddressBookStorage,
    AddressBookStorageError,
)

__all__ = [
    "ADDRESS_BOOK_SCHEMA_VERSION",
    "AddressBookFormatError",
    "AddressBookSchemaVersionError",
    "AddressBookStorage",
    "AddressBookStorageError",
]
