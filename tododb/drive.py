"""Persistence helpers for reading and writing the database file on disk."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .domain import TodoItem, items_from_json, items_to_json
from .errors import StorageError
from .schema import ParseError

EMPTY_DB = "[]"
CHUNK_SIZE = 1024


def init(path: Path) -> None:
    """Create ``path`` holding an empty array."""
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(EMPTY_DB)
    except OSError as e:
        raise StorageError(f"failed to create {path}: {e.strerror or e}") from e


def load(path: Path) -> List[TodoItem]:
    """Return the items stored in ``path``, in file order."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise StorageError(f"failed to read {path}: {e.strerror or e}") from e
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8: {e.reason} at byte {e.start}") from e
    return items_from_json(text)


def save(items: List[TodoItem], path: Path) -> None:
    """Overwrite ``path`` with ``items`` as a JSON array.

    The document is encoded before ``path`` is opened, so an item that cannot
    be written leaves the file as it was.
    """
    try:
        data = items_to_json(items).encode("utf-8")
    except UnicodeEncodeError as e:
        raise ParseError(f"cannot encode items as UTF-8: {e.reason}") from e
    try:
        with path.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise StorageError(f"failed to write {path}: {e.strerror or e}") from e


def copy(source: Path, target: Path, chunk_size: int = CHUNK_SIZE) -> int:
    """Stream ``source`` into ``target`` byte for byte and return the bytes copied.

    ``target`` is opened and truncated before ``source`` is opened, so a
    missing source leaves ``target`` empty.
    """
    try:
        dst = target.open("wb")
    except OSError as e:
        raise StorageError(f"failed to open {target}: {e.strerror or e}") from e
    with dst:
        try:
            src = source.open("rb")
        except OSError as e:
            raise StorageError(f"failed to open {source}: {e.strerror or e}") from e
        with src:
            copied = 0
            while True:
                try:
                    chunk = src.read(chunk_size)
                except OSError as e:
                    raise StorageError(f"failed to read from {source}: {e.strerror or e}") from e
                if not chunk:
                    break
                try:
                    dst.write(chunk)
                except OSError as e:
                    raise StorageError(f"failed to write to {target}: {e.strerror or e}") from e
                copied += len(chunk)
    return copied


__all__ = ["init", "load", "save", "copy", "EMPTY_DB"]
