"""Delete a person, or one of a person's emergency contacts."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from addressbook.commands.types import CommandError, CommandResult, ModelPort
from addressbook.commons.index import Index
from addressbook.messages import (
    MESSAGE_INVALID_EMERGENCY_CONTACT_DISPLAYED_INDEX,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_LAST_EMERGENCY_CONTACT_INDEX,
    format_emergency_contact,
    format_person,
)
from addressbook.model.person import EmergencyContactIndexError, Person

_LOGGER = logging.getLogger(__name__)


class DeleteCommandDescriptor(BaseModel):
    """Optional parameters of one delete invocation.

    An unset emergency-contact index means the whole person is deleted.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    emergency_contact_index: Index | None = None

    @classmethod
    def copy_of(cls, other: DeleteCommandDescriptor) -> DeleteCommandDescriptor:
        """Return an independent descriptor with the same parameters.

        Args:
            other: Descriptor to copy.

        Returns:
            New descriptor.
        """
        return cls(emergency_contact_index=other.emergency_contact_index)


class DeleteCommand(BaseModel):
    """Delete the person at a displayed index, or one of their contacts."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the person identified by the index number used in the "
        "displayed person list, or one of that person's emergency contacts.\n"
        "Parameters: INDEX (must be a positive integer) "
        "[EMERGENCY_CONTACT_INDEX (must be a positive integer)]\n"
        "Example: delete 1 1"
    )
    MESSAGE_DELETE_PERSON_SUCCESS: ClassVar[str] = "Deleted Person: {}"
    MESSAGE_DELETE_EMERGENCY_CONTACT_SUCCESS: ClassVar[str] = (
        "Deleted Emergency Contact: {}"
    )

    target_index: Index
    descriptor: DeleteCommandDescriptor = Field(
        default_factory=DeleteCommandDescriptor
    )

    @field_validator("descriptor")
    @classmethod
    def _detach_descriptor(
        cls, value: DeleteCommandDescriptor
    ) -> DeleteCommandDescriptor:
        """Keep a private copy so later caller edits do not leak in."""
        return DeleteCommandDescriptor.copy_of(value)

    def __hash__(self) -> int:
        return hash((self.target_index, self.descriptor.emergency_contact_index))

    def execute(self, model: ModelPort) -> CommandResult:
        """Delete the target person or one of their emergency contacts.

        Args:
            model: Model whose displayed list defines the target index.

        Returns:
            Success result describing what was deleted.

        Raises:
            TypeError: If model is None.
            CommandError: If an index is invalid or the contact is the last one.
        """
        if model is None:
            raise TypeError("DeleteCommand.execute requires a model.")
        last_shown_list = model.get_filtered_person_list()
        if self.target_index.zero_based >= len(last_shown_list):
            raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)

        person_to_delete = last_shown_list[self.target_index.zero_based]
        contact_index = self.descriptor.emergency_contact_index
        if contact_index is not None:
            return self._delete_emergency_contact(
                model, person_to_delete, contact_index
            )

        model.delete_person(person_to_delete)
        _LOGGER.info("Deleted person at index %d", self.target_index.one_based)
        return CommandResult.ok(
            self.MESSAGE_DELETE_PERSON_SUCCESS.format(format_person(person_to_delete)),
            code="person_deleted",
        )

    def _delete_emergency_contact(
        self,
        model: ModelPort,
        person: Person,
        contact_index: Index,
    ) -> CommandResult:
        """Remove one emergency contact and store the updated person.

        Args:
            model: Model to update.
            person: Resolved target person.
            contact_index: Position in the person's emergency-contact list.

        Returns:
            Success result describing the removed contact.

        Raises:
            CommandError: If the contact is the last one or the index is invalid.
        """
        if person.has_only_one_emergency_contact():
            raise CommandError(MESSAGE_LAST_EMERGENCY_CONTACT_INDEX)
        try:
            updated, removed = person.get_and_remove_emergency_contact(contact_index)
        except EmergencyContactIndexError as exc:
            raise CommandError(
                MESSAGE_INVALID_EMERGENCY_CONTACT_DISPLAYED_INDEX
            ) from exc
        model.set_person(person, updated)
        _LOGGER.info(
            "Deleted emergency contact %d of person at index %d",
            contact_index.one_based,
            self.target_index.one_based,
        )
        return CommandResult.ok(
            self.MESSAGE_DELETE_EMERGENCY_CONTACT_SUCCESS.format(
                format_emergency_contact(removed)
            ),
            code="emergency_contact_deleted",
        )
