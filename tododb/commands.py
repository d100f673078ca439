"""Explicit command values and the dispatcher that runs them against a store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .domain import TodoItem, parse_item
from .store import TodoStore


class Op(str, Enum):
    LIST = "list"
    QUERY = "query"
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    STATUS = "status"
    RESTORE = "restore"


@dataclass
class Command:
    op: Op
    item_id: Optional[int] = None
    payload: Optional[str] = None
    done: bool = False


@dataclass
class Outcome:
    items: List[TodoItem] = field(default_factory=list)
    message: Optional[str] = None


def _require_id(command: Command) -> int:
    if command.item_id is None:
        raise ValueError(f"{command.op.value} requires an item id")
    return command.item_id


def _require_payload(command: Command) -> str:
    if command.payload is None:
        raise ValueError(f"{command.op.value} requires a JSON item")
    return command.payload


def dispatch(store: TodoStore, command: Command) -> Outcome:
    """Run ``command`` against ``store`` and return what the caller should show.

    Store errors propagate unchanged.
    """
    op = command.op
    if op is Op.LIST:
        items = sorted(store.get_all_items(), key=lambda i: i.id)
        return Outcome(items=items)
    if op is Op.QUERY:
        return Outcome(items=[store.get_item(_require_id(command))])
    if op is Op.ADD:
        store.add_item(parse_item(_require_payload(command)))
        return Outcome()
    if op is Op.UPDATE:
        store.update_item(parse_item(_require_payload(command)))
        return Outcome()
    if op is Op.DELETE:
        store.delete_item(_require_id(command))
        return Outcome()
    if op is Op.STATUS:
        store.set_done(_require_id(command), command.done)
        return Outcome()
    if op is Op.RESTORE:
        store.restore()
        return Outcome(message="Database restored from backup file")
    raise ValueError(f"Unsupported operation: {op!r}")
