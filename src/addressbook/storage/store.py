"""JSON file storage for the address book."""

from __future__ import annotations

import logging
import os
import tempfile
import time
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from addressbook.model.address_book import AddressBook, DuplicatePersonError
from addressbook.model.person import Person

ADDRESS_BOOK_SCHEMA_VERSION = 1

_LOGGER = logging.getLogger(__name__)


class AddressBookStorageError(RuntimeError):
    """Base error for address book storage operations."""


class AddressBookFormatError(AddressBookStorageError):
    """Raised when the data file is not a valid address book document."""


class AddressBookSchemaVersionError(AddressBookStorageError):
    """Raised when the data file was written by an unsupported schema."""


class _AddressBookDocument(BaseModel):
    """On-disk shape of one address book."""

    model_config = ConfigDict(extra="forbid")

    schema_version: int
    persons: tuple[Person, ...] = ()


class AddressBookStorage:
    """Read and write one address book JSON data file."""

    def __init__(self, data_file: Path) -> None:
        """Bind storage to a data file.

        Args:
            data_file: JSON document path; created on first write.
        """
        self._data_file = data_file

    @property
    def data_file(self) -> Path:
        """Return bound data file path."""
        return self._data_file

    def read(self) -> AddressBook:
        """Read the address book from the data file.

        Returns:
            Address book with persons in stored order.

        Raises:
            FileNotFoundError: If the data file does not exist.
            AddressBookFormatError: If the document or a person is invalid.
            AddressBookSchemaVersionError: If the schema version is unsupported.
        """
        raw = self._data_file.read_text(encoding="utf-8")
        try:
            document = _AddressBookDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise AddressBookFormatError(
                f"{self._data_file} is not a valid address book: {exc}"
            ) from exc
        if document.schema_version != ADDRESS_BOOK_SCHEMA_VERSION:
            raise AddressBookSchemaVersionError(
                f"{self._data_file} uses schema version {document.schema_version}; "
                f"only version {ADDRESS_BOOK_SCHEMA_VERSION} is supported."
            )
        try:
            return AddressBook(document.persons)
        except DuplicatePersonError as exc:
            raise AddressBookFormatError(
                f"{self._data_file} lists a person twice: {exc}"
            ) from exc

    def write(self, address_book: AddressBook) -> None:
        """Replace the data file with the given address book.

        The document is written to a sibling temporary file first so readers
        never see a partial file.

        Args:
            address_book: Address book to store.
        """
        document = _AddressBookDocument(
            schema_version=ADDRESS_BOOK_SCHEMA_VERSION,
            persons=address_book.persons,
        )
        directory = self._data_file.parent
        directory.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=directory,
            prefix=f".{self._data_file.name}.",
            delete=False,
        ) as handle:
            handle.write(document.model_dump_json(indent=2))
        os.replace(handle.name, self._data_file)
        _LOGGER.debug("Wrote %d persons to %s", len(address_book), self._data_file)

    def quarantine(self) -> Path | None:
        """Move an unreadable data file aside.

        Returns:
            New location of the file, or None when there was no file.
        """
        if not self._data_file.exists():
            return None
        target = self._data_file.with_name(
            f"{self._data_file.name}.corrupt-{int(time.time())}"
        )
        self._data_file.replace(target)
        _LOGGER.warning("Moved unreadable address book to %s", target)
        return target
