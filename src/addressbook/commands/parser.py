"""Command-line text parsing for address book commands."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from addressbook.commands.delete import DeleteCommand, DeleteCommandDescriptor
from addressbook.commons.index import Index
from addressbook.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_INVALID_INDEX

_MAX_DELETE_ARGS = 2


class CommandParseError(ValueError):
    """Raised when command text cannot be turned into a command."""

    def __init__(self, message: str) -> None:
        """Store user-facing message.

        Args:
            message: Description of the syntax problem.
        """
        super().__init__(message)
        self.message = message


class CommandCall(BaseModel):
    """Normalized command word plus raw argument tokens."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    args: tuple[str, ...] = ()
    raw: str


def tokenize(text: str) -> CommandCall:
    """Split one line of user input into command word and arguments.

    Args:
        text: Raw user input string.

    Returns:
        Normalized command call.

    Raises:
        CommandParseError: If input is blank.
    """
    parts = text.split()
    if not parts:
        raise CommandParseError(
            MESSAGE_INVALID_COMMAND_FORMAT.format("Enter a command.")
        )
    return CommandCall(name=parts[0].lower(), args=tuple(parts[1:]), raw=text)


def parse_index(token: str) -> Index:
    """Parse a one-based positive integer token.

    Args:
        token: Raw argument token.

    Returns:
        Parsed index.

    Raises:
        CommandParseError: If token is not a positive integer.
    """
    stripped = token.strip()
    if not stripped.isdecimal() or int(stripped) == 0:
        raise CommandParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(stripped))


def parse_delete_args(args: tuple[str, ...]) -> DeleteCommand:
    """Build a delete command from `INDEX [EMERGENCY_CONTACT_INDEX]`.

    Args:
        args: Argument tokens after the command word.

    Returns:
        Delete command.

    Raises:
        CommandParseError: If the argument count or an index is invalid.
    """
    if not args or len(args) > _MAX_DELETE_ARGS:
        raise CommandParseError(
            MESSAGE_INVALID_COMMAND_FORMAT.format(DeleteCommand.MESSAGE_USAGE)
        )
    try:
        target_index = parse_index(args[0])
        descriptor = DeleteCommandDescriptor()
        if len(args) == _MAX_DELETE_ARGS:
            descriptor.emergency_contact_index = parse_index(args[1])
    except CommandParseError as exc:
        raise CommandParseError(
            MESSAGE_INVALID_COMMAND_FORMAT.format(DeleteCommand.MESSAGE_USAGE)
        ) from exc
    return DeleteCommand(target_index=target_index, descriptor=descriptor)
