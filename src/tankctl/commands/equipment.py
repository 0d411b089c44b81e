"""Command: equipment recommendations for every category."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tankctl.commands._base import TankCommand, dimension_arguments, flow_option

if TYPE_CHECKING:
    from tankctl.commands._context import AppContext


@click.command(
    cls=TankCommand,
    examples="""\
  tankctl equipment 48 24 24
  tankctl equipment 48 24 24 --flow 350
  tankctl --json equipment 20 10 12""",
)
@dimension_arguments
@flow_option
@click.pass_obj
def equipment(
    app: AppContext,
    length: float,
    width: float,
    height: float,
    flow_gph: float | None,
) -> None:
    """Recommend filter, heater, chiller and other equipment."""
    app.emit(app.tank_service().equipment(length, width, height, flow_gph=flow_gph))
