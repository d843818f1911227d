"""Root CLI group for scripty with global flags and command registration."""

from __future__ import annotations

import click

from scripty import __version__
from scripty.commands import register_commands
from scripty.commands._context import AppContext
from scripty.config.settings import ScriptySettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="scripty")
@click.option(
    "--no-color",
    "disable_console_colors",
    is_flag=True,
    help="Plain status lines (same as DISABLE_CONSOLE_COLORS).",
)
@click.option(
    "--silent-stdout",
    is_flag=True,
    help="Discard executed commands' stdout (same as SILENT_STDOUT).",
)
@click.option(
    "--catch-error",
    is_flag=True,
    help="Let 'try' swallow failures (same as CATCH_ERROR).",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging of executed commands.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    disable_console_colors: bool,
    silent_stdout: bool,
    catch_error: bool,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """scripty — logging, env, and command helpers for shell scripts."""
    ctx.ensure_object(dict)
    settings = ScriptySettings.from_cli(
        config_path=config_path,
        disable_console_colors=disable_console_colors,
        silent_stdout=silent_stdout,
        catch_error=catch_error,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
