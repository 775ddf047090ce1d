"""Locating and reading ``schemalgebra.toml``.

The file is looked up the way git looks for ``.git/``: in the start
directory, then in each parent.  ``SCHEMALGEBRA_CONFIG`` names a file
directly and disables the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from schemalgebra.config.models import SchemalgebraConfig

CONFIG_FILENAME = "schemalgebra.toml"
CONFIG_ENV_VAR = "SCHEMALGEBRA_CONFIG"


class ConfigFileError(ValueError):
    """A config file exists but is not valid TOML."""

    def __init__(self, path: Path, exc: tomllib.TOMLDecodeError) -> None:
        super().__init__(f"Invalid TOML in {path}: {exc}")
        self.path = path


def _ancestors(start: Path) -> list[Path]:
    here = start.resolve()
    return [here, *here.parents]


def find_config(start: Path | None = None) -> Path | None:
    """Path of the governing config file, or None.

    An ``SCHEMALGEBRA_CONFIG`` that points nowhere yields None rather than
    falling back to the walk.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigFileError: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(path, exc) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> SchemalgebraConfig:
    """Validated config sections from *path*, or from the file found from *cwd*.

    Sections absent from the file keep their code defaults; with no file at
    all the defaults are returned as is.
    """
    path = path or find_config(cwd)
    if path is None:
        return SchemalgebraConfig()
    return SchemalgebraConfig.model_validate(read_toml(path))
