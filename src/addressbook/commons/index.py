"""Display index value type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InvalidIndexError(ValueError):
    """Raised when an index cannot be built from the given number."""


class Index(BaseModel):
    """Position in a displayed list, stored zero-based.

    Users see one-based numbers while lists are addressed zero-based; the
    two constructors keep that conversion in one place. Build indices through
    them: they raise ``InvalidIndexError``, while direct construction such as
    ``Index(zero_based=-1)`` raises pydantic's ``ValidationError``. Both are
    ``ValueError`` subclasses.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    zero_based: int = Field(ge=0)

    @classmethod
    def from_zero_based(cls, value: int) -> Index:
        """Build index from a zero-based offset.

        Args:
            value: Zero-based offset.

        Returns:
            Index for the offset.

        Raises:
            InvalidIndexError: If value is negative.
        """
        if value < 0:
            raise InvalidIndexError(f"Zero-based index must be >= 0, got {value}.")
        return cls(zero_based=value)

    @classmethod
    def from_one_based(cls, value: int) -> Index:
        """Build index from a user-facing one-based number.

        Args:
            value: One-based position.

        Returns:
            Index for the position.

        Raises:
            InvalidIndexError: If value is zero or negative.
        """
        if value <= 0:
            raise InvalidIndexError(f"One-based index must be >= 1, got {value}.")
        return cls(zero_based=value - 1)

    @property
    def one_based(self) -> int:
        """Return the user-facing one-based position."""
        return self.zero_based + 1
