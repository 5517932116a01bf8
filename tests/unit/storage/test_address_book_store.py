"""Unit tests for address book JSON storage."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from addressbook.model import AddressBook, Person
from addressbook.storage import (
    ADDRESS_BOOK_SCHEMA_VERSION,
    AddressBookFormatError,
    AddressBookSchemaVersionError,
    AddressBookStorage,
)


@pytest.mark.unit
def test_write_and_read_keeps_persons(
    tmp_path: Path, make_person: Callable[..., Person]
) -> None:
    """Storage should keep persons with ids and contacts."""
    # Arrange - storage in a missing directory and a book
    storage = AddressBookStorage(tmp_path / "data" / "addressbook.json")
    source = AddressBook((make_person("Alice Pauline", contacts=2),))

    # Act - write then read
    storage.write(source)
    loaded = storage.read()

    # Assert - same persons, schema version on disk, no temp files left
    assert loaded.persons == source.persons
    payload = json.loads(storage.data_file.read_text(encoding="utf-8"))
    assert payload["schema_version"] == ADDRESS_BOOK_SCHEMA_VERSION
    assert [path.name for path in storage.data_file.parent.iterdir()] == [
        "addressbook.json"
    ]


@pytest.mark.unit
def test_read_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    """Missing data file should surface as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        AddressBookStorage(tmp_path / "missing.json").read()


@pytest.mark.unit
def test_read_unsupported_schema_version_raises(tmp_path: Path) -> None:
    """Unknown schema versions should be rejected."""
    # Arrange - document with future version
    path = tmp_path / "addressbook.json"
    path.write_text(json.dumps({"schema_version": 99, "persons": []}))

    # Act / Assert - schema error
    with pytest.raises(AddressBookSchemaVersionError):
        AddressBookStorage(path).read()


@pytest.mark.unit
def test_read_duplicate_persons_raises(
    tmp_path: Path, make_person: Callable[..., Person]
) -> None:
    """A document listing the same person twice should be rejected."""
    # Arrange - two alices with different ids
    path = tmp_path / "addressbook.json"
    persons = [
        make_person("Alice Pauline").model_dump(mode="json") for _ in range(2)
    ]
    path.write_text(
        json.dumps({"schema_version": ADDRESS_BOOK_SCHEMA_VERSION, "persons": persons})
    )

    # Act / Assert - format error
    with pytest.raises(AddressBookFormatError):
        AddressBookStorage(path).read()


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "[]",
        json.dumps({"schema_version": 1, "persons": [{"name": "No Phone"}]}),
    ],
)
def test_read_invalid_document_raises(tmp_path: Path, raw: str) -> None:
    """Malformed JSON and invalid persons should raise format errors."""
    path = tmp_path / "addressbook.json"
    path.write_text(raw, encoding="utf-8")

    with pytest.raises(AddressBookFormatError):
        AddressBookStorage(path).read()


@pytest.mark.unit
def test_quarantine_moves_file_aside(tmp_path: Path) -> None:
    """Quarantine should move the bad file and report its new path."""
    # Arrange - corrupt file
    storage = AddressBookStorage(tmp_path / "addressbook.json")
    storage.data_file.write_text("{not json", encoding="utf-8")

    # Act - quarantine
    backup = storage.quarantine()

    # Assert - moved, original gone; missing file yields None
    assert backup is not None
    assert backup.name.startswith("addressbook.json.corrupt-")
    assert backup.read_text(encoding="utf-8") == "{not json"
    assert not storage.data_file.exists()
    assert storage.quarantine() is None
