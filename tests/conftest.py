"""Shared pytest fixtures and test helpers for schemalgebra tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from schemalgebra.domain.descriptors import Descriptor
from schemalgebra.domain.membership import matches
from schemalgebra.services.telemetry import disable_telemetry

# A small JSON value universe spanning every value kind; algebra results are
# checked against it by direct enumeration.
VALUE_DOMAIN: list[Any] = [
    "cat",
    "dog",
    "duck",
    "",
    0,
    1,
    2.5,
    -3,
    True,
    False,
    None,
    [],
    ["dog"],
    ["cat", "poodle"],
    ["dog", "poodle", "other"],
    {},
    {"type": "dog"},
    {"type": "cat", "catRace": "persan"},
]


def accepted(descriptor: Descriptor, domain: list[Any] | None = None) -> list[Any]:
    """Values of *domain* (default: VALUE_DOMAIN) that *descriptor* matches."""
    return [value for value in (domain or VALUE_DOMAIN) if matches(descriptor, value)]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty temp directory so no schemalgebra.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SCHEMALGEBRA_CONFIG", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_cli_state() -> Generator[None]:
    """CLI invocations reconfigure logging and may enable telemetry; undo both."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    pkg_level = logging.getLogger("schemalgebra").level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("schemalgebra").setLevel(pkg_level)
