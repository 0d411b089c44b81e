"""Tests for config discovery and reading."""

from pathlib import Path

import pytest

from tankctl.config.discovery import (
    CONFIG_FILENAME,
    ConfigError,
    find_config,
    read_toml,
)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('unit_system = "metric"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('unit_system = "metric"\n')
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert find_config() == config_file

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text('volume_unit = "gallons"\n')
        monkeypatch.setenv("TANKCTL_CONFIG", str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("TANKCTL_CONFIG", str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None



class TestReadToml:
    def test_returns_dict(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('volume_unit = "gallons"\n[resize]\nmax_inches = 96\n')
        assert read_toml(config_file) == {"volume_unit": "gallons", "resize": {"max_inches": 96}}

    def test_config_error_is_value_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("= nope\n")
        with pytest.raises(ValueError):
            read_toml(config_file)

    def test_empty_file_is_empty_dict(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert read_toml(config_file) == {}

    def test_malformed_toml_raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[volume\n")
        with pytest.raises(ConfigError, match="Invalid TOML") as excinfo:
            read_toml(config_file)
        assert excinfo.value.path == config_file
