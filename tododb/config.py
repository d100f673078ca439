"""Settings for the command-line front-end.

Values are resolved in order, later sources winning: built-in defaults, the
``tododb.yaml`` file in the working directory, then the ``TODODB_FILE``
environment variable. The ``--db`` flag of the CLI overrides all of them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml

from .errors import StorageError
from .schema import ParseError

CONFIG_FILE = "tododb.yaml"
ENV_DB_FILE = "TODODB_FILE"
DEFAULT_DB_FILE = Path("data") / "todo.json"

log = logging.getLogger(__name__)


@dataclass
class Settings:
    db_file: Path = DEFAULT_DB_FILE


def load_config_file(file: Path) -> dict:
    """Return the mapping stored in a YAML config ``file``."""
    try:
        text = file.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageError(f"failed to read {file}: {e.strerror or e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid config file {file}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(f"Invalid config file {file}: root must be a mapping")
    return data


def load_settings(
    path: Path = Path('.'),
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Resolve :class:`Settings` for a working directory ``path``."""
    environ = os.environ if environ is None else environ
    settings = Settings()

    file = path / CONFIG_FILE
    if file.exists():
        data = load_config_file(file)
        if data.get("db_file"):
            db_file = Path(str(data["db_file"]))
            settings.db_file = db_file if db_file.is_absolute() else path / db_file
            log.debug("db_file %s taken from %s", settings.db_file, file)

    if environ.get(ENV_DB_FILE):
        settings.db_file = Path(environ[ENV_DB_FILE])
        log.debug("db_file %s taken from $%s", settings.db_file, ENV_DB_FILE)

    return settings
