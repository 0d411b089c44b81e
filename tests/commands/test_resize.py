"""Tests for the resize command."""

import json

import pytest
from click.testing import CliRunner

from tankctl.cli import cli


class TestResize:
    def test_total_volume(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--volume-unit", "gallons", "resize", "30", "12", "12", "40"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["target_kind"] == "total"
        assert abs(data["deviation_percent"]) < 0.5
        assert data["clamped"] is False

    def test_water_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "--volume-unit", "gallons", "resize", "30", "12", "12", "40", "--water"],
        )
        data = json.loads(result.output)["data"]
        assert data["target_kind"] == "water"
        assert data["water_volume"] == pytest.approx(40, rel=0.01)

    def test_quiet_prints_triple(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "resize", "20", "10", "12", "100"])
        assert result.exit_code == 0
        assert result.output.strip().count("x") == 2

    def test_clamp_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--volume-unit", "gallons", "resize", "20", "10", "12", "100000"]
        )
        assert result.exit_code == 0
        assert "WARNING: Axes clamped" in result.stderr
        assert "WARNING" not in result.stdout

    def test_json_keeps_warning_in_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--volume-unit", "gallons", "resize", "20", "10", "12", "100000"]
        )
        parsed = json.loads(result.stdout)
        assert parsed["data"]["clamped"] is True
        assert parsed["warnings"]
        assert result.stderr == ""

    def test_invalid_target(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "resize", "20", "10", "12", "0"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_VOLUME"
