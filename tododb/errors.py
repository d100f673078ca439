"""Errors raised by the to-do store."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for every error the store raises."""


class StorageError(TodoError, OSError):
    """Raised when the database or backup file cannot be created, opened, read or written."""


class NotFoundError(TodoError, LookupError):
    """Raised when an operation references an id that is not in the store."""

    def __init__(self, item_id: int, action: str = "find") -> None:
        self.item_id = item_id
        super().__init__(f"Couldn't {action} item because the id {item_id} doesn't exist")


class DuplicateKeyError(TodoError):
    """Raised when adding an item whose id is already stored."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"An item with id {item_id} already exists in the database")
