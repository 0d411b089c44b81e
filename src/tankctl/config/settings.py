"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TANKCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``tankctl.toml`` from :mod:`tankctl.config.discovery`
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tankctl.config.discovery import ConfigError, find_config, read_toml
from tankctl.config.models import EquipmentConfig, ResizeConfig, SearchConfig, VolumeConfig
from tankctl.domain.types import UnitSystem, VolumeUnit

# File chosen by from_cli(); pydantic-settings builds sources without arguments.
_toml_path: ContextVar[Path | None] = ContextVar("tankctl_toml_path", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings layer backed by one parsed ``tankctl.toml``.

    Malformed TOML surfaces as :class:`click.ClickException` so the CLI
    prints one clean line and exits 1.
    """

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self.path = path
        try:
            self.data = read_toml(path) if path is not None else {}
        except ConfigError as exc:
            raise click.ClickException(str(exc)) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.data.get(field_name), field_name, field_name in self.data

    def __call__(self) -> dict[str, Any]:
        return {name: value for name, value in self.data.items() if value is not None}


class TankSettings(BaseSettings):
    """Everything a command needs to know about units, output and tuning.

    Frozen; services receive one instance and never mutate it.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        unit_system: Linear unit callers type dimensions in.
        volume_unit: Unit callers type and read volumes in.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TANKCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    unit_system: UnitSystem = UnitSystem.IMPERIAL
    volume_unit: VolumeUnit = VolumeUnit.LITERS

    volume: VolumeConfig = Field(default_factory=VolumeConfig)
    equipment: EquipmentConfig = Field(default_factory=EquipmentConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    resize: ResizeConfig = Field(default_factory=ResizeConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """CLI kwargs, then env, then TOML. No dotenv or secrets dir."""
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, _toml_path.get()))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TankSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist means "no file"
        rather than an error. Flags passed as None are dropped so env
        and TOML values show through.
        """
        if config_path:
            path: Path | None = Path(config_path) if Path(config_path).is_file() else None
        else:
            path = find_config(start)

        overrides = {name: value for name, value in cli_flags.items() if value is not None}
        token = _toml_path.set(path)
        try:
            return cls(config_path=path, **overrides)
        finally:
            _toml_path.reset(token)
