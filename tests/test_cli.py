import json

from typer.testing import CliRunner

from tododb.cli import app

runner = CliRunner()


def _invoke(db_file, *args):
    return runner.invoke(app, ["--db", str(db_file), *args])


def test_add_and_query(db_file):
    result = _invoke(db_file, "add", '{"id": 1, "title": "Learn Go / GoLang", "done": false}')
    assert result.exit_code == 0
    assert result.stdout.strip().endswith("Ok")

    result = _invoke(db_file, "query", "1")
    assert result.exit_code == 0
    assert '"title": "Learn Go / GoLang"' in result.stdout


def test_list_prints_items_and_summary(db_file):
    db_file.write_text(json.dumps([
        {"id": 2, "title": "Learn Kubernetes", "done": False},
        {"id": 1, "title": "Learn Go / GoLang", "done": True},
    ]))
    result = _invoke(db_file, "list")
    assert result.exit_code == 0
    assert result.stdout.index('"id": 1') < result.stdout.index('"id": 2')
    assert "2 items, 1 done" in result.stdout
    assert "50%" in result.stdout


def test_status_and_update(db_file):
    _invoke(db_file, "add", '{"id": 3, "title": "x"}')

    assert _invoke(db_file, "status", "3", "--done").exit_code == 0
    assert json.loads(db_file.read_text()) == [{"id": 3, "title": "x", "done": True}]

    assert _invoke(db_file, "update", '{"id": 3, "title": "y"}').exit_code == 0
    assert json.loads(db_file.read_text()) == [{"id": 3, "title": "y", "done": False}]


def test_delete_missing_item(db_file):
    result = _invoke(db_file, "delete", "7")
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "7" in result.output


def test_add_invalid_json(db_file):
    result = _invoke(db_file, "add", "{not json")
    assert result.exit_code == 1
    assert "invalid JSON" in result.output


def test_restore(db_file):
    backup = db_file.parent / "todo.json.bak"
    backup.write_text('[{"id": 1, "title": "Learn", "done": false}]')
    result = _invoke(db_file, "restore")
    assert result.exit_code == 0
    assert "Database restored from backup file" in result.stdout
    assert db_file.read_bytes() == backup.read_bytes()


def test_default_database_location(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TODODB_FILE", raising=False)
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert (tmp_path / "data" / "todo.json").read_text() == "[]"


def test_database_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TODODB_FILE", str(tmp_path / "env.json"))
    result = runner.invoke(app, ["add", '{"id": 1}'])
    assert result.exit_code == 0
    assert json.loads((tmp_path / "env.json").read_text()) == [{"id": 1, "title": "", "done": False}]


def test_no_arguments_shows_help():
    result = runner.invoke(app, [])
    assert "Usage" in result.output
