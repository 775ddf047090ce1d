"""Tests for AlgebraSettings — unified settings with TOML source."""

from pathlib import Path

import pytest

from schemalgebra.config.discovery import ConfigFileError
from schemalgebra.config.settings import AlgebraSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SCHEMALGEBRA_CONFIG", "SCHEMALGEBRA_ALGEBRA__MAX_DEPTH", "SCHEMALGEBRA_QUIET"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = AlgebraSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.algebra.max_depth == 64
        assert settings.output.width == 120

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AlgebraSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "schemalgebra.toml"
        toml.write_text("[algebra]\nmax_depth = 16\n")
        settings = AlgebraSettings.from_cli(start=tmp_path)
        assert settings.algebra.max_depth == 16
        assert settings.output.width == 120  # default preserved
        assert settings.config_path == toml

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "algebra.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\nwidth = 80\n")
        settings = AlgebraSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.output.width == 80
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "schemalgebra.toml").write_text("[algebra\n")
        with pytest.raises(ConfigFileError, match="Invalid TOML"):
            AlgebraSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "schemalgebra.toml").write_text("[algebra]\nmax_depth = 16\n")
        monkeypatch.setenv("SCHEMALGEBRA_ALGEBRA__MAX_DEPTH", "9")
        settings = AlgebraSettings.from_cli(start=tmp_path)
        assert settings.algebra.max_depth == 9

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCHEMALGEBRA_QUIET", "true")
        settings = AlgebraSettings.from_cli(start=tmp_path, quiet=False, json_output=True)
        assert settings.quiet is False
        assert settings.json_output is True

    def test_unknown_top_level_keys_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "schemalgebra.toml").write_text("[tool]\nname = 1\n[algebra]\nmax_depth = 5\n")
        assert AlgebraSettings.from_cli(start=tmp_path).algebra.max_depth == 5
