from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List
import json

from .schema import ParseError, validate_item, validate_items


@dataclass
class TodoItem:
    """A single to-do record, keyed by a caller-chosen ``id``."""

    id: int
    title: str = ""
    done: bool = False

    def to_dict(self) -> dict:
        return {'id': self.id, 'title': self.title, 'done': self.done}

    @classmethod
    def from_dict(cls, data: dict) -> 'TodoItem':
        validate_item(data)
        return cls(
            id=data['id'],
            title=data.get('title', ''),
            done=data.get('done', False),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> 'TodoItem':
        return cls.from_dict(_decode(text))


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise ParseError(f"invalid JSON: {e}") from e


def parse_item(text: str) -> TodoItem:
    """Return the :class:`TodoItem` encoded in ``text``.

    Raises :class:`ParseError` if ``text`` is not JSON or is not an item object.
    """
    return TodoItem.from_json(text)


def format_item(item: TodoItem) -> str:
    """Return ``item`` as an indented JSON object."""
    return item.to_json()


def items_from_json(text: str) -> List[TodoItem]:
    """Decode a whole database document into items, in file order."""
    return [TodoItem.from_dict(d) for d in validate_items(_decode(text))]


def items_to_json(items: List[TodoItem]) -> str:
    return json.dumps([i.to_dict() for i in items], indent=2, ensure_ascii=False)
