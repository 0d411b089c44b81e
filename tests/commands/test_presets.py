"""Tests for the presets command group."""

import json

from click.testing import CliRunner

from tankctl.cli import cli


class TestPresetsList:
    def test_all(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["presets", "list"])
        assert result.exit_code == 0
        assert "14 presets" in result.output
        assert "40 Gallon Breeder" in result.output

    def test_near_target(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "--volume-unit", "gallons", "presets", "list", "20"])
        assert result.exit_code == 0
        assert set(result.output.split("\n")) - {""} == {"20 Gallon Long", "20 Gallon High"}

    def test_none_near_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--volume-unit", "gallons", "presets", "list", "1"])
        assert result.exit_code == 0
        assert "WARNING: No presets near 1 gal" in result.stderr

    def test_group_without_subcommand_shows_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["presets"])
        assert "list" in result.output
        assert "show" in result.output


class TestPresetsShow:
    def test_report(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["presets", "show", "40 Gallon Breeder"])
        assert result.exit_code == 0
        assert "preset: 40 Gallon Breeder" in result.output
        assert "Glass" in result.output

    def test_case_insensitive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "presets", "show", "20 gallon long"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["preset"] == "20 Gallon Long"
        assert data["dimensions"]["length"] == 30

    def test_flow(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "presets", "show", "125 Gallon", "--flow", "900"]
        )
        data = json.loads(result.output)["data"]
        assert data["equipment"]["flow_gph"] == 900

    def test_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "presets", "show", "1000 Gallon"])
        assert result.exit_code == 1
        parsed = json.loads(result.stderr)
        assert parsed["op"] == "report"
        assert parsed["error"]["code"] == "UNKNOWN_PRESET"
