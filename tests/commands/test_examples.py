"""Tests for --examples flag on CLI commands.

Parametrized to cover all commands that define examples text.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from tankctl.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["tankctl calc 48 24 24", "tankctl presets list"]),
    (["calc", "--examples"], ["tankctl calc", "--units metric"]),
    (["glass", "--examples"], ["tankctl glass"]),
    (["equipment", "--examples"], ["--flow 350"]),
    (["report", "--examples"], ["tankctl report", "--flow 900"]),
    (["resize", "--examples"], ["--water"]),
    (["find", "--examples"], ["--max-length 48", "--tolerance 0.05"]),
    (["presets", "--examples"], ["tankctl presets list", "tankctl presets show"]),
    (["presets", "list", "--examples"], ["presets list 55"]),
    (["presets", "show", "--examples"], ["--flow 900"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    """Generate a readable test ID from args."""
    args, _ = item
    return "_".join(a for a in args if a != "--examples") or "root"


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


class TestExamplesInHelp:
    """--examples appears in --help output for commands that have it."""

    @pytest.mark.parametrize(
        "args",
        [
            ["--help"],
            ["calc", "--help"],
            ["glass", "--help"],
            ["equipment", "--help"],
            ["report", "--help"],
            ["resize", "--help"],
            ["find", "--help"],
            ["presets", "--help"],
            ["presets", "list", "--help"],
            ["presets", "show", "--help"],
        ],
    )
    def test_examples_in_help(self, cli_runner: CliRunner, args: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "--examples" in result.output


class TestExamplesEagerExit:
    """--examples exits before argument validation."""

    def test_skips_required_dimensions(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calc", "--examples"])
        assert result.exit_code == 0

    def test_skips_required_label(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["presets", "show", "--examples"])
        assert result.exit_code == 0
        assert "presets show" in result.output
