from pathlib import Path

import pytest

from tododb.store import TodoStore


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    return tmp_path / "todo.json"


@pytest.fixture
def store(db_file: Path) -> TodoStore:
    return TodoStore(db_file)
