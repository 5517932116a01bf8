"""Shared command-domain types."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from addressbook.model.person import Person


class CommandError(Exception):
    """Raised when a command cannot run against the current model state.

    The model is left unchanged; the message is safe to show the user.
    """

    def __init__(self, message: str) -> None:
        """Store user-facing message.

        Args:
            message: Description of the failure.
        """
        super().__init__(message)
        self.message = message


class CommandStatus(StrEnum):
    """Normalized command execution status."""

    OK = "ok"
    ERROR = "error"


class CommandResult(BaseModel):
    """Command execution result carrying one user-facing message."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: CommandStatus
    code: str
    message: str

    @classmethod
    def ok(cls, message: str, *, code: str = "ok") -> CommandResult:
        """Construct a successful command result.

        Args:
            message: User-facing output.
            code: Stable machine-readable success code.

        Returns:
            Successful command result.
        """
        return cls(status=CommandStatus.OK, code=code, message=message)

    @classmethod
    def error(cls, message: str, *, code: str = "error") -> CommandResult:
        """Construct an error command result.

        Args:
            message: User-facing error.
            code: Stable machine-readable error code.

        Returns:
            Error command result.
        """
        return cls(status=CommandStatus.ERROR, code=code, message=message)


class ModelPort(Protocol):
    """Model interface used by command layer."""

    def get_filtered_person_list(self) -> tuple[Person, ...]:
        """Return displayed persons in display order."""

    def delete_person(self, target: Person) -> None:
        """Remove one stored person.

        Args:
            target: Person to remove.
        """

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace one stored person by id.

        Args:
            target: Stored person.
            edited: Replacement value.
        """


class Command(Protocol):
    """Protocol implemented by executable commands."""

    def execute(self, model: ModelPort) -> CommandResult:
        """Run command against the model.

        Args:
            model: Model to read and mutate.
        """
