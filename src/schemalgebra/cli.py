"""Root CLI group for schemalgebra with global flags and command registration."""

from __future__ import annotations

import click

from schemalgebra import __version__
from schemalgebra.commands import register_commands
from schemalgebra.commands._context import AppContext
from schemalgebra.config.discovery import ConfigFileError
from schemalgebra.config.settings import AlgebraSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="schemalgebra")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting descriptor.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing telemetry.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """schemalgebra — set algebra over schema value-spaces."""
    ctx.ensure_object(dict)
    try:
        settings = AlgebraSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ConfigFileError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
