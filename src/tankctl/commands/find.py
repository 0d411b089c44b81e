"""Command: reverse dimension search for a target volume."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tankctl.commands._base import TankCommand

if TYPE_CHECKING:
    from tankctl.commands._context import AppContext


@click.command(
    cls=TankCommand,
    examples="""\
  tankctl --volume-unit gallons find 20
  tankctl --volume-unit gallons find 75 --max-length 48 --max-height 24
  tankctl find 300 --tolerance 0.05 --limit 5
  tankctl -q --volume-unit gallons find 40""",
)
@click.argument("target_volume", type=float)
@click.option("--max-length", type=float, default=None, help="Longest allowed length.")
@click.option("--max-width", type=float, default=None, help="Widest allowed width.")
@click.option("--max-height", type=float, default=None, help="Tallest allowed height.")
@click.option("--limit", type=int, default=None, help="Max results (default from config).")
@click.option(
    "--tolerance",
    type=float,
    default=None,
    help="Allowed deviation as a fraction, e.g. 0.1 for 10%.",
)
@click.pass_obj
def find(
    app: AppContext,
    target_volume: float,
    max_length: float | None,
    max_width: float | None,
    max_height: float | None,
    limit: int | None,
    tolerance: float | None,
) -> None:
    """Find tank dimensions that hold TARGET_VOLUME."""
    app.emit(
        app.search_service().find(
            target_volume,
            max_length=max_length,
            max_width=max_width,
            max_height=max_height,
            limit=limit,
            tolerance=tolerance,
        )
    )
