from pathlib import Path

import pytest

from tododb.config import DEFAULT_DB_FILE, load_settings
from tododb.schema import ParseError


def test_defaults(tmp_path: Path):
    settings = load_settings(tmp_path, environ={})
    assert settings.db_file == DEFAULT_DB_FILE


def test_yaml_file_relative_to_its_directory(tmp_path: Path):
    (tmp_path / "tododb.yaml").write_text("db_file: lists/work.json\n")
    settings = load_settings(tmp_path, environ={})
    assert settings.db_file == tmp_path / "lists" / "work.json"


def test_environment_overrides_yaml(tmp_path: Path):
    (tmp_path / "tododb.yaml").write_text("db_file: lists/work.json\n")
    settings = load_settings(tmp_path, environ={"TODODB_FILE": "/tmp/other.json"})
    assert settings.db_file == Path("/tmp/other.json")


def test_empty_yaml_file(tmp_path: Path):
    (tmp_path / "tododb.yaml").write_text("")
    assert load_settings(tmp_path, environ={}).db_file == DEFAULT_DB_FILE


@pytest.mark.parametrize("text", ["- a\n- b\n", "db_file: [\n"])
def test_invalid_yaml_file(tmp_path: Path, text):
    (tmp_path / "tododb.yaml").write_text(text)
    with pytest.raises(ParseError, match="Invalid config file"):
        load_settings(tmp_path, environ={})
