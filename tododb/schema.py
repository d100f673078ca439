from __future__ import annotations

from typing import Any, List

from .errors import TodoError


class ParseError(TodoError, ValueError):
    """Raised when text is not valid JSON or an item does not have the expected shape."""


def validate_item(item: Any) -> None:
    """Validate a single decoded item.

    Expected keys:
    - id: required integer
    - title: optional string
    - done: optional bool

    Other keys are ignored.
    """
    if not isinstance(item, dict):
        raise ParseError("item must be a JSON object")

    # bool is a subclass of int
    if "id" not in item or isinstance(item["id"], bool) or not isinstance(item["id"], int):
        raise ParseError("item must have an integer 'id'")

    if "title" in item and not isinstance(item["title"], str):
        raise ParseError("'title' must be a string if present")

    if "title" in item:
        try:
            item["title"].encode("utf-8")
        except UnicodeEncodeError:
            raise ParseError("'title' must be valid Unicode text") from None

    if "done" in item and not isinstance(item["done"], bool):
        raise ParseError("'done' must be a boolean if present")


def validate_items(data: Any) -> List[dict]:
    """Validate the root of a database file, which is an array of items."""
    if not isinstance(data, list):
        raise ParseError("database root must be a JSON array")
    for index, item in enumerate(data):
        try:
            validate_item(item)
        except ParseError as e:
            raise ParseError(f"item {index}: {e}") from None
    return data
