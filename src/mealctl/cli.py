"""Root CLI group for mealctl with global flags and command registration."""

from __future__ import annotations

import click

from mealctl import __version__
from mealctl.commands import register_commands
from mealctl.commands._context import AppContext
from mealctl.config.settings import MealSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mealctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the log level.",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    log_level: str | None,
    config_path: str | None,
) -> None:
    """mealctl — lunch and dinner planning for a two-person household."""
    settings = MealSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        log_level=log_level.upper() if log_level else None,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
