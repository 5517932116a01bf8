"""In-memory model with a filtered display view."""

from __future__ import annotations

import logging
from collections.abc import Callable

from addressbook.model.address_book import AddressBook
from addressbook.model.person import Person

_LOGGER = logging.getLogger(__name__)

PersonPredicate = Callable[[Person], bool]


def SHOW_ALL_PERSONS(person: Person) -> bool:  # noqa: N802
    """Predicate that keeps every person."""
    del person
    return True


class ModelManager:
    """Process-wide store for the address book and its displayed view."""

    def __init__(self, address_book: AddressBook | None = None) -> None:
        """Create model over an address book.

        Args:
            address_book: Canonical collection; empty when omitted.
        """
        self._address_book = (
            address_book if address_book is not None else AddressBook()
        )
        self._predicate: PersonPredicate = SHOW_ALL_PERSONS

    @property
    def address_book(self) -> AddressBook:
        """Return canonical person collection."""
        return self._address_book

    def get_filtered_person_list(self) -> tuple[Person, ...]:
        """Return displayed persons in display order.

        Returns:
            Persons matching the current predicate, reflecting current state.
        """
        return tuple(
            person for person in self._address_book.persons if self._predicate(person)
        )

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Replace the display predicate.

        Args:
            predicate: Filter deciding which persons are displayed.
        """
        self._predicate = predicate

    def has_person(self, person: Person) -> bool:
        """Return whether an equivalent person is stored.

        Args:
            person: Candidate person.
        """
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        """Add person and reset the view to show everyone.

        Args:
            person: Person to add.
        """
        self._address_book.add_person(person)
        self.update_filtered_person_list(SHOW_ALL_PERSONS)
        _LOGGER.debug("Added person %s", person.person_id)

    def delete_person(self, target: Person) -> None:
        """Remove person from the canonical collection.

        Args:
            target: Person to remove; must be stored.
        """
        self._address_book.remove_person(target)
        _LOGGER.debug("Deleted person %s", target.person_id)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace stored person with an edited value keyed by id.

        Args:
            target: Stored person.
            edited: Replacement value.
        """
        self._address_book.set_person(target, edited)
        _LOGGER.debug("Updated person %s", target.person_id)
