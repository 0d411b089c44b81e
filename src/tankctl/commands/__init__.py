"""Subcommand modules for tankctl.

Provides register_commands() which uses deferred imports to keep
``tankctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group.

    One group (``presets``) plus six standalone commands.
    """
    # --- Groups ---
    from tankctl.commands.presets import presets

    cli.add_command(presets)

    # --- Standalone commands ---
    from tankctl.commands.calc import calc
    from tankctl.commands.equipment import equipment
    from tankctl.commands.find import find
    from tankctl.commands.glass import glass
    from tankctl.commands.report import report
    from tankctl.commands.resize import resize

    cli.add_command(calc)
    cli.add_command(glass)
    cli.add_command(equipment)
    cli.add_command(report)
    cli.add_command(resize)
    cli.add_command(find)
