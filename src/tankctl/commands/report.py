"""Command: combined volume, glass and equipment report."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tankctl.commands._base import TankCommand, dimension_arguments, flow_option

if TYPE_CHECKING:
    from tankctl.commands._context import AppContext


@click.command(
    cls=TankCommand,
    examples="""\
  tankctl report 48 24 24
  tankctl report 72 18 24 --flow 900
  tankctl --units metric --volume-unit liters report 120 50 50
  tankctl -v report 36 18 16""",
)
@dimension_arguments
@flow_option
@click.pass_obj
def report(
    app: AppContext,
    length: float,
    width: float,
    height: float,
    flow_gph: float | None,
) -> None:
    """Full advice for LENGTH x WIDTH x HEIGHT: volume, glass and equipment."""
    app.emit(app.tank_service().report(length, width, height, flow_gph=flow_gph))
