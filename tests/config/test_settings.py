"""Tests for TankSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from tankctl.config.settings import TankSettings
from tankctl.domain.types import UnitSystem, VolumeUnit


class TestTankSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = TankSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.unit_system == UnitSystem.IMPERIAL
        assert settings.volume_unit == VolumeUnit.LITERS
        assert settings.volume.displacement == 0.10
        assert settings.search.max_results == 10

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TankSettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "tankctl.toml"
        toml.write_text('unit_system = "metric"\n[equipment]\nturnover_max = 6\n')
        settings = TankSettings.from_cli(start=tmp_path)
        assert settings.unit_system == UnitSystem.METRIC
        assert settings.equipment.turnover_max == 6
        assert settings.equipment.turnover_min == 3.0  # default preserved
        assert settings.config_path == toml

    def test_walk_up_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "tankctl.toml").write_text('volume_unit = "gallons"\n')
        child = tmp_path / "tanks" / "reef"
        child.mkdir(parents=True)
        settings = TankSettings.from_cli(start=child)
        assert settings.volume_unit == VolumeUnit.GALLONS

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "tankctl.toml").write_text("")
        settings = TankSettings.from_cli(start=tmp_path)
        assert settings.volume_unit == VolumeUnit.LITERS

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[search]\nmax_results = 3\n")
        settings = TankSettings.from_cli(config_path=str(custom))
        assert settings.search.max_results == 3
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = TankSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.config_path is None
        assert settings.search.max_results == 10

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "tankctl.toml").write_text("[search\nmax_results = \n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TankSettings.from_cli(start=tmp_path)

    def test_invalid_value_raises_validation_error(self, tmp_path: Path) -> None:
        (tmp_path / "tankctl.toml").write_text("[volume]\ndisplacement = 5\n")
        with pytest.raises(ValidationError):
            TankSettings.from_cli(start=tmp_path)


class TestEnvVars:
    def test_top_level_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TANKCTL_UNIT_SYSTEM", "metric")
        settings = TankSettings.from_cli(start=tmp_path)
        assert settings.unit_system == UnitSystem.METRIC

    def test_nested_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TANKCTL_SEARCH__MAX_RESULTS", "42")
        settings = TankSettings.from_cli(start=tmp_path)
        assert settings.search.max_results == 42

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "tankctl.toml").write_text('volume_unit = "gallons"\n')
        monkeypatch.setenv("TANKCTL_VOLUME_UNIT", "liters")
        settings = TankSettings.from_cli(start=tmp_path)
        assert settings.volume_unit == VolumeUnit.LITERS


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = TankSettings.from_cli(
            start=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            log_json=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tankctl.toml").write_text('unit_system = "metric"\n')
        settings = TankSettings.from_cli(start=tmp_path, unit_system="imperial")
        assert settings.unit_system == UnitSystem.IMPERIAL

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TANKCTL_VOLUME_UNIT", "gallons")
        settings = TankSettings.from_cli(start=tmp_path, volume_unit="liters")
        assert settings.volume_unit == VolumeUnit.LITERS

    def test_none_flags_keep_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tankctl.toml").write_text('volume_unit = "gallons"\nverbose = true\n')
        settings = TankSettings.from_cli(start=tmp_path, volume_unit=None, verbose=None)
        assert settings.volume_unit == VolumeUnit.GALLONS
        assert settings.verbose is True
