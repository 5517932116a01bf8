"""Unit tests for delete command text parsing."""

from __future__ import annotations

import pytest

from addressbook.commands.delete import DeleteCommand, DeleteCommandDescriptor
from addressbook.commands.parser import (
    CommandParseError,
    parse_delete_args,
    parse_index,
    tokenize,
)
from addressbook.commons import Index
from addressbook.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_INVALID_INDEX


@pytest.mark.unit
def test_tokenize_splits_command_word_and_args() -> None:
    """Tokenizer should lowercase the command word and keep args."""
    call = tokenize("  DELETE 1   2 ")

    assert call.name == "delete"
    assert call.args == ("1", "2")
    assert call.raw == "  DELETE 1   2 "


@pytest.mark.unit
def test_tokenize_rejects_blank_input() -> None:
    """Blank input should raise parse error."""
    with pytest.raises(CommandParseError):
        tokenize("   ")


@pytest.mark.unit
@pytest.mark.parametrize("token", ["0", "-1", "a", "1.5", ""])
def test_parse_index_rejects_non_positive_integers(token: str) -> None:
    """Only positive integer tokens should parse."""
    with pytest.raises(CommandParseError) as exc_info:
        parse_index(token)
    assert exc_info.value.message == MESSAGE_INVALID_INDEX


@pytest.mark.unit
def test_parse_delete_person_only() -> None:
    """One index should build a whole-person delete."""
    command = parse_delete_args(("2",))

    assert command == DeleteCommand(target_index=Index.from_one_based(2))
    assert command.descriptor.emergency_contact_index is None


@pytest.mark.unit
def test_parse_delete_with_emergency_contact() -> None:
    """Two indices should set the emergency-contact index."""
    command = parse_delete_args(("1", "2"))

    assert command == DeleteCommand(
        target_index=Index.from_one_based(1),
        descriptor=DeleteCommandDescriptor(
            emergency_contact_index=Index.from_one_based(2)
        ),
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "args",
    [(), ("0",), ("a",), ("1", "0"), ("1", "b"), ("1", "2", "3")],
)
def test_parse_delete_rejects_bad_arguments(args: tuple[str, ...]) -> None:
    """Malformed arguments should report usage."""
    with pytest.raises(CommandParseError) as exc_info:
        parse_delete_args(args)
    assert exc_info.value.message == MESSAGE_INVALID_COMMAND_FORMAT.format(
        DeleteCommand.MESSAGE_USAGE
    )
