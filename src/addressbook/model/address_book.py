"""Canonical person collection."""

from __future__ import annotations

from collections.abc import Iterable

from addressbook.model.person import Person


class DuplicatePersonError(ValueError):
    """Raised when an operation would store the same person twice."""


class PersonNotFoundError(LookupError):
    """Raised when a person is not present in the address book."""


class AddressBook:
    """Ordered persons keyed by ``person_id``."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        """Create address book, validating the initial entries.

        Args:
            persons: Initial persons in display order.
        """
        self._persons: list[Person] = []
        for person in persons:
            self.add_person(person)

    @property
    def persons(self) -> tuple[Person, ...]:
        """Return persons in stored order."""
        return tuple(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def has_person(self, person: Person) -> bool:
        """Return whether an equivalent person is already stored.

        Args:
            person: Candidate person.

        Returns:
            True when a stored person has the same identity.
        """
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        """Append one person.

        Args:
            person: Person to append.

        Raises:
            DuplicatePersonError: If the person or its id is already stored.
        """
        if self.has_person(person) or self._position(person.person_id) is not None:
            raise DuplicatePersonError(f"Person already exists: {person.name}")
        self._persons.append(person)

    def remove_person(self, person: Person) -> None:
        """Remove one person by id.

        Args:
            person: Person to remove.

        Raises:
            PersonNotFoundError: If no stored person has the same id.
        """
        position = self._require_position(person)
        del self._persons[position]

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` at the same position.

        Args:
            target: Stored person to replace, matched by id.
            edited: Replacement value.

        Raises:
            PersonNotFoundError: If target is not stored.
            DuplicatePersonError: If edited collides with another stored person.
        """
        position = self._require_position(target)
        for offset, existing in enumerate(self._persons):
            if offset != position and existing.is_same_person(edited):
                raise DuplicatePersonError(f"Person already exists: {edited.name}")
        self._persons[position] = edited

    def _position(self, person_id: str) -> int | None:
        for offset, existing in enumerate(self._persons):
            if existing.person_id == person_id:
                return offset
        return None

    def _require_position(self, person: Person) -> int:
        position = self._position(person.person_id)
        if position is None:
            raise PersonNotFoundError(f"Person not found: {person.name}")
        return position
