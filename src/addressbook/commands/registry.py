"""Command registry and execution."""

from __future__ import annotations

import logging
from collections.abc import Callable

from addressbook.commands.delete import DeleteCommand
from addressbook.commands.parser import CommandParseError, parse_delete_args, tokenize
from addressbook.commands.types import (
    Command,
    CommandError,
    CommandResult,
    ModelPort,
)
from addressbook.messages import MESSAGE_UNKNOWN_COMMAND

_LOGGER = logging.getLogger(__name__)

CommandParser = Callable[[tuple[str, ...]], Command]


class CommandRegistry:
    """Map command words to argument parsers and run user input."""

    def __init__(self, *, parsers: dict[str, CommandParser] | None = None) -> None:
        """Construct registry with built-in parsers plus optional overrides.

        Args:
            parsers: Optional custom parsers keyed by command word.
        """
        self._parsers: dict[str, CommandParser] = {
            DeleteCommand.COMMAND_WORD: parse_delete_args,
        }
        if parsers:
            self._parsers.update(parsers)

    @property
    def command_words(self) -> tuple[str, ...]:
        """Return registered command words in sorted order."""
        return tuple(sorted(self._parsers))

    def parse(self, text: str) -> Command:
        """Parse one line of user input into a command.

        Args:
            text: Raw user input.

        Returns:
            Executable command.

        Raises:
            CommandParseError: If the command word is unknown or args are invalid.
        """
        call = tokenize(text)
        parser = self._parsers.get(call.name)
        if parser is None:
            raise CommandParseError(MESSAGE_UNKNOWN_COMMAND)
        return parser(call.args)

    def execute(self, text: str, model: ModelPort) -> CommandResult:
        """Parse and run one line of user input.

        Args:
            text: Raw user input.
            model: Model the command runs against.

        Returns:
            Success result, or an error result for user-recoverable failures.
        """
        _LOGGER.info("Executing command: %s", text.strip())
        try:
            command = self.parse(text)
        except CommandParseError as exc:
            _LOGGER.warning("Could not parse command: %s", exc.message)
            code = (
                "unknown_command"
                if exc.message == MESSAGE_UNKNOWN_COMMAND
                else "parse_error"
            )
            return CommandResult.error(exc.message, code=code)
        try:
            return command.execute(model)
        except CommandError as exc:
            _LOGGER.warning("Command failed: %s", exc.message)
            return CommandResult.error(exc.message, code="command_failed")
