"""Tests for the find command."""

import json
from pathlib import Path

from click.testing import CliRunner

from tankctl.cli import cli


class TestFind:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--volume-unit", "gallons", "find", "20"])
        assert result.exit_code == 0
        assert "Dimensions for 20 gal" in result.output
        assert "10 results" in result.output

    def test_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "--volume-unit",
                "gallons",
                "find",
                "75",
                "--max-length",
                "48",
                "--max-height",
                "24",
                "--limit",
                "5",
                "--tolerance",
                "0.05",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["count"] <= 5
        assert data["tolerance"] == 0.05
        for item in data["items"]:
            assert item["length"] <= 48
            assert item["height"] <= 24

    def test_config_limit(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        toml = tmp_path / "tankctl.toml"
        toml.write_text('volume_unit = "gallons"\n[search]\nmax_results = 2\n')
        result = cli_runner.invoke(cli, ["-q", "find", "40"])
        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 2

    def test_no_results_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--volume-unit", "gallons", "find", "20", "--max-length", "5"]
        )
        assert result.exit_code == 0
        assert "0 results" in result.stdout
        assert "WARNING: No dimensions within 10% of 20 gal" in result.stderr

    def test_bad_tolerance(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "find", "20", "--tolerance", "2"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_TOLERANCE"

    def test_bad_limit(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "find", "20", "--limit", "0"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_CONSTRAINT"
