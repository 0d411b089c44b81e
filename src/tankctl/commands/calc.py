"""Command: volume, water volume and surface area for a tank."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tankctl.commands._base import TankCommand, dimension_arguments

if TYPE_CHECKING:
    from tankctl.commands._context import AppContext


@click.command(
    cls=TankCommand,
    examples="""\
  tankctl calc 48 24 24
  tankctl --volume-unit gallons calc 36 18 16
  tankctl --units metric calc 120 45 50
  tankctl --json calc 30 12 12""",
)
@dimension_arguments
@click.pass_obj
def calc(app: AppContext, length: float, width: float, height: float) -> None:
    """Volume, water volume, surface area and shape of LENGTH x WIDTH x HEIGHT."""
    app.emit(app.tank_service().calculate(length, width, height))
