"""Root CLI group for tankctl with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from tankctl import __version__
from tankctl.commands import register_commands
from tankctl.commands._base import TankGroup
from tankctl.commands._context import AppContext
from tankctl.config.settings import TankSettings
from tankctl.domain.types import UnitSystem, VolumeUnit


@click.group(
    cls=TankGroup,
    invoke_without_command=True,
    examples="""\
  tankctl calc 48 24 24
  tankctl --volume-unit gallons find 20
  tankctl --units metric report 120 45 50
  tankctl presets list""",
)
@click.version_option(version=__version__, prog_name="tankctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--units",
    "unit_system",
    type=click.Choice([u.value for u in UnitSystem]),
    default=None,
    help="Linear unit for dimensions (default from config: imperial).",
)
@click.option(
    "--volume-unit",
    type=click.Choice([u.value for u in VolumeUnit]),
    default=None,
    help="Unit for volumes (default from config: liters).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    unit_system: str | None,
    volume_unit: str | None,
) -> None:
    """tankctl — aquarium volume, glass and equipment advisor."""
    ctx.ensure_object(dict)
    # Unset flags stay None so env vars and tankctl.toml show through.
    try:
        settings = TankSettings.from_cli(
            config_path=config_path,
            json_output=json_output or None,
            quiet=quiet or None,
            verbose=verbose or None,
            log_json=log_json or None,
            unit_system=unit_system,
            volume_unit=volume_unit,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
