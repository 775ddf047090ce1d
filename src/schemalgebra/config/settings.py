"""AlgebraSettings — CLI flags, environment and ``schemalgebra.toml`` merged.

Later sources only fill what earlier ones leave unset:

1. keyword arguments (the CLI flags),
2. ``SCHEMALGEBRA_*`` environment variables (``__`` descends into a
   section, e.g. ``SCHEMALGEBRA_ALGEBRA__MAX_DEPTH``),
3. the TOML file found by :func:`~schemalgebra.config.discovery.find_config`,
4. the defaults baked into the section models.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from schemalgebra.config.discovery import find_config, read_toml
from schemalgebra.config.models import AlgebraConfig, OutputConfig

# The TOML source is built inside pydantic-settings, which gives it no way to
# receive arguments; from_cli parks the chosen path here for the duration.
_toml_path: ContextVar[Path | None] = ContextVar("_toml_path", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source over an already located TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_toml(path) if path is not None and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        known = self.settings_cls.model_fields
        return {name: value for name, value in self._data.items() if name in known}


class AlgebraSettings(BaseSettings):
    """Settings for the service layer and the CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        algebra: Recursion limit for the algebra.
        output: Human output rendering options.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SCHEMALGEBRA_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    algebra: AlgebraConfig = Field(default_factory=AlgebraConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, _toml_path.get()))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> AlgebraSettings:
        """Build settings for one CLI invocation.

        *config_path* (``--config``) wins over discovery from *start*; a
        path that is not a file means "no config file".

        Raises:
            ConfigFileError: If the selected file is not valid TOML.
        """
        if config_path:
            explicit = Path(config_path)
            path = explicit if explicit.is_file() else None
        else:
            path = find_config(start)

        token = _toml_path.set(path)
        try:
            return cls(config_path=path, **cli_flags)
        finally:
            _toml_path.reset(token)
