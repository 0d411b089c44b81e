"""Command: panel thickness recommendation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tankctl.commands._base import TankCommand, dimension_arguments

if TYPE_CHECKING:
    from tankctl.commands._context import AppContext


@click.command(
    cls=TankCommand,
    examples="""\
  tankctl glass 48 24 24
  tankctl glass 72 24 36
  tankctl -q glass 20 10 12""",
)
@dimension_arguments
@click.pass_obj
def glass(app: AppContext, length: float, width: float, height: float) -> None:
    """Recommend glass thickness for LENGTH x WIDTH x HEIGHT."""
    app.emit(app.tank_service().glass(length, width, height))
