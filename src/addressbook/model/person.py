"""Person and emergency-contact models."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from addressbook.commons.index import Index

_NAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9 ]*$"
_PHONE_PATTERN = r"^\d{3,}$"
_EMAIL_PATTERN = r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*$"
_TAG_PATTERN = r"^[A-Za-z0-9]+$"


class EmergencyContactIndexError(IndexError):
    """Raised when an emergency-contact index is outside a person's contacts."""


class EmergencyContact(BaseModel):
    """Secondary contact owned by exactly one person."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(pattern=_NAME_PATTERN)
    phone: str = Field(pattern=_PHONE_PATTERN)
    relationship: str | None = None


class Person(BaseModel):
    """Address book entry.

    Persons are immutable; edits produce a new value that keeps the same
    ``person_id`` so the address book can replace the entry by key.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    person_id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = Field(pattern=_NAME_PATTERN)
    phone: str = Field(pattern=_PHONE_PATTERN)
    email: str = Field(pattern=_EMAIL_PATTERN)
    address: str = Field(min_length=1)
    tags: tuple[str, ...] = ()
    emergency_contacts: tuple[EmergencyContact, ...] = ()

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Validate tag names and return them sorted without duplicates.

        Args:
            value: Raw tag names.

        Returns:
            Sorted unique tag names.

        Raises:
            ValueError: If a tag is not alphanumeric.
        """
        for tag in value:
            if not tag or not tag.isalnum():
                raise ValueError(f"Tag names should be alphanumeric, got {tag!r}.")
        return tuple(sorted(set(value)))

    def is_same_person(self, other: Person) -> bool:
        """Return whether both entries describe the same real person.

        Args:
            other: Person to compare against.

        Returns:
            True when names match case-insensitively.
        """
        return self.name.casefold() == other.name.casefold()

    def has_only_one_emergency_contact(self) -> bool:
        """Return whether exactly one emergency contact remains."""
        return len(self.emergency_contacts) == 1

    def get_and_remove_emergency_contact(
        self, index: Index
    ) -> tuple[Person, EmergencyContact]:
        """Look up and remove one emergency contact.

        Args:
            index: Position in this person's emergency-contact list.

        Returns:
            Updated person without the contact, and the removed contact.

        Raises:
            EmergencyContactIndexError: If index is out of range.
        """
        position = index.zero_based
        if position >= len(self.emergency_contacts):
            raise EmergencyContactIndexError(
                f"Emergency contact index {index.one_based} is out of range for "
                f"{self.name} ({len(self.emergency_contacts)} contacts)."
            )
        removed = self.emergency_contacts[position]
        remaining = (
            self.emergency_contacts[:position] + self.emergency_contacts[position + 1 :]
        )
        updated = self.model_copy(update={"emergency_contacts": remaining})
        return updated, removed
