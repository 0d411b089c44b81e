"""AppContext — the object every subcommand receives via ``@click.pass_obj``.

Built once by the root group from the merged :class:`TankSettings`. It
sets up logging (and telemetry under ``--verbose``), hands out services,
and owns the one place results reach the terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tankctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tankctl.config.settings import TankSettings
    from tankctl.services.result import ServiceResult
    from tankctl.services.search import SearchService
    from tankctl.services.tank import TankService


class AppContext:
    def __init__(self, settings: TankSettings) -> None:
        from tankctl.config.logging import configure_logging
        from tankctl.services.telemetry import enable_telemetry

        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    def tank_service(self) -> TankService:
        from tankctl.services.tank import TankService

        return TankService(self.settings)

    def search_service(self) -> SearchService:
        from tankctl.services.search import SearchService

        return SearchService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successful output goes to stdout. Warnings go to stderr as
        ``WARNING:`` lines unless ``--json`` already carries them in the
        payload. Failures go to stderr and exit with status 1.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if self.output.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
