"""AppContext — the object ``@click.pass_obj`` hands to every subcommand.

The root group builds it from :class:`AlgebraSettings`; building it also
sets up logging, and telemetry under ``--verbose``.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from schemalgebra.config.logging import configure_logging
from schemalgebra.output.formatters import OutputSettings, format_result
from schemalgebra.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from schemalgebra.config.settings import AlgebraSettings
    from schemalgebra.services.algebra import AlgebraService
    from schemalgebra.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: AlgebraSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @cached_property
    def service(self) -> AlgebraService:
        from schemalgebra.services.algebra import AlgebraService

        return AlgebraService(self.settings)

    @property
    def output_settings(self) -> OutputSettings:
        cfg = self.settings
        return OutputSettings(
            json_output=cfg.json_output,
            quiet=cfg.quiet,
            verbose=cfg.verbose,
            width=cfg.output.width,
            no_color=cfg.output.no_color,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with status 1.

        Warnings of a successful result follow on stderr, except in JSON mode
        where they are already part of the payload.
        """
        output_settings = self.output_settings
        text = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if output_settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
