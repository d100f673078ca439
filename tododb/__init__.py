"""tododb core package."""

from .domain import TodoItem, parse_item, format_item
from .errors import TodoError, StorageError, NotFoundError, DuplicateKeyError
from .schema import ParseError
from .store import TodoStore

__all__ = [
    "TodoItem",
    "parse_item",
    "format_item",
    "TodoError",
    "StorageError",
    "NotFoundError",
    "DuplicateKeyError",
    "ParseError",
    "TodoStore",
]
