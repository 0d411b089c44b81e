"""Command: scale a tank to a target volume, keeping its proportions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tankctl.commands._base import TankCommand, dimension_arguments
from tankctl.domain.types import VolumeTarget

if TYPE_CHECKING:
    from tankctl.commands._context import AppContext


@click.command(
    cls=TankCommand,
    examples="""\
  tankctl resize 48 24 24 200
  tankctl --volume-unit gallons resize 36 18 16 75
  tankctl --volume-unit gallons resize 36 18 16 75 --water
  tankctl -q resize 20 10 12 100""",
)
@dimension_arguments
@click.argument("target_volume", type=float)
@click.option(
    "--water",
    is_flag=True,
    help="Treat TARGET_VOLUME as water volume after displacement.",
)
@click.pass_obj
def resize(
    app: AppContext,
    length: float,
    width: float,
    height: float,
    target_volume: float,
    water: bool,
) -> None:
    """Scale LENGTH x WIDTH x HEIGHT uniformly to TARGET_VOLUME."""
    target = VolumeTarget.WATER if water else VolumeTarget.TOTAL
    app.emit(app.tank_service().resize(length, width, height, target_volume, target=target))
