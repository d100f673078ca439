"""File-backed store of to-do items.

Every public operation reloads the database file, applies its change to the
in-memory map and, when it mutates, rewrites the whole file. Operations on
stores pointing at the same file are serialised by a per-file lock within the
process; separate processes sharing a file need their own coordination (for
example a filesystem lock), and the last writer wins.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from pathlib import Path
from typing import Dict, List

from . import drive
from .domain import TodoItem
from .errors import DuplicateKeyError, NotFoundError

BACKUP_SUFFIX = ".bak"

_locks: Dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    """Return the lock shared by every store on ``path``.

    Locks are kept for the life of the process, one per resolved path.
    """
    key = path.resolve()
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.RLock()
        return lock


class TodoStore:
    """A keyed collection of :class:`TodoItem` mirrored to one JSON file."""

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._items: Dict[int, TodoItem] = {}
        self._lock = _lock_for(self._path)
        with self._lock:
            if not self._path.exists():
                drive.init(self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._path.with_name(self._path.name + BACKUP_SUFFIX)

    def load_all(self) -> None:
        """Rebuild the in-memory map from the file.

        The map is only replaced once the whole file has parsed, so a failed
        load keeps the previous contents. Later duplicates of an id win.
        """
        with self._lock:
            items = drive.load(self._path)
            self._items = {item.id: item for item in items}

    def save_all(self) -> None:
        """Overwrite the file with every item currently in memory."""
        with self._lock:
            drive.save(list(self._items.values()), self._path)

    def add_item(self, item: TodoItem) -> None:
        with self._lock:
            self.load_all()
            if item.id in self._items:
                raise DuplicateKeyError(item.id)
            self._items[item.id] = replace(item)
            self.save_all()

    def get_item(self, item_id: int) -> TodoItem:
        with self._lock:
            self.load_all()
            if item_id not in self._items:
                raise NotFoundError(item_id, "get")
            return replace(self._items[item_id])

    def get_all_items(self) -> List[TodoItem]:
        """Return a snapshot of every item; order is unspecified."""
        with self._lock:
            self.load_all()
            return [replace(item) for item in self._items.values()]

    def update_item(self, item: TodoItem) -> None:
        """Replace the stored item with the same id by ``item`` in full."""
        with self._lock:
            self.load_all()
            if item.id not in self._items:
                raise NotFoundError(item.id, "update")
            self._items[item.id] = replace(item)
            self.save_all()

    def delete_item(self, item_id: int) -> None:
        with self._lock:
            self.load_all()
            if item_id not in self._items:
                raise NotFoundError(item_id, "delete")
            del self._items[item_id]
            self.save_all()

    def set_done(self, item_id: int, value: bool) -> None:
        """Change the ``done`` flag of an item through :meth:`get_item` and :meth:`update_item`."""
        with self._lock:
            item = self.get_item(item_id)
            self.update_item(replace(item, done=value))

    def restore(self) -> None:
        """Overwrite the database file with the bytes of its ``.bak`` sibling.

        The content is copied verbatim and not validated; the next operation
        reloads it. The in-memory map is left as is.
        """
        with self._lock:
            drive.copy(self.backup_path, self._path)


__all__ = ["TodoStore", "BACKUP_SUFFIX"]
