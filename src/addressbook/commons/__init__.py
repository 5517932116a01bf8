"""Shared value types."""

from addressbook.commons.index import Index, InvalidIndexError

__all__ = ["Index", "InvalidIndexError"]
