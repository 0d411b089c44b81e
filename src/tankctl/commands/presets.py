"""Command group: standard retail tank sizes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tankctl.commands._base import TankGroup, flow_option

if TYPE_CHECKING:
    from tankctl.commands._context import AppContext

_PRESETS_EXAMPLES = """\
  tankctl presets list
  tankctl --volume-unit gallons presets list 40
  tankctl presets show "75 Gallon"
  tankctl --json presets show "20 gallon long\""""


@click.group(cls=TankGroup, examples=_PRESETS_EXAMPLES)
@click.pass_obj
def presets(app: AppContext) -> None:
    """List and inspect standard tank sizes."""


@presets.command(
    "list",
    examples="""\
  tankctl presets list
  tankctl --volume-unit gallons presets list 55
  tankctl -q presets list""",
)
@click.argument("target_volume", type=float, required=False)
@click.pass_obj
def list_presets(app: AppContext, target_volume: float | None) -> None:
    """List presets, or those near TARGET_VOLUME."""
    app.emit(app.search_service().presets(target_volume))


@presets.command(
    examples="""\
  tankctl presets show "40 Gallon Breeder"
  tankctl presets show "125 gallon" --flow 900""",
)
@click.argument("label")
@flow_option
@click.pass_obj
def show(app: AppContext, label: str, flow_gph: float | None) -> None:
    """Full report for the preset named LABEL."""
    app.emit(app.tank_service().preset(label, flow_gph=flow_gph))
