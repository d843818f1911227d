"""Commands: run external programs with error propagation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scripty.commands._base import PASSTHROUGH, ScriptyCommand

if TYPE_CHECKING:
    from scripty.commands._context import AppContext

_COMMAND = click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)


@click.command(
    "exec",
    cls=ScriptyCommand,
    context_settings=PASSTHROUGH,
    examples="""\
  scripty exec make test
  scripty --silent-stdout exec make build""",
)
@_COMMAND
@click.pass_obj
def exec_cmd(app: AppContext, command: tuple[str, ...]) -> None:
    """Run COMMAND and exit with its status. Logs nothing."""
    result = app.helpers.execute(*command)
    app.emit(result)
    raise SystemExit(result.status)


@click.command(
    "try",
    cls=ScriptyCommand,
    context_settings=PASSTHROUGH,
    examples="""\
  scripty try "run the test suite" make test
  CATCH_ERROR=1 scripty try "lint sources" make lint""",
)
@click.argument("label")
@_COMMAND
@click.pass_obj
def try_cmd(app: AppContext, label: str, command: tuple[str, ...]) -> None:
    """Run COMMAND and log success or failure against LABEL.

    A failure exits with the command's status unless catch-error is set.
    """
    app.emit(app.helpers.try_run(label, *command))


@click.command(
    cls=ScriptyCommand,
    context_settings=PASSTHROUGH,
    examples='  scripty propagate "create the bucket" aws s3 mb s3://example',
)
@click.argument("label")
@_COMMAND
@click.pass_obj
def propagate(app: AppContext, label: str, command: tuple[str, ...]) -> None:
    """Run COMMAND with stdout discarded; on failure log LABEL and exit with its status."""
    app.emit(app.helpers.propagate_error(label, *command))


@click.command(
    "raise",
    cls=ScriptyCommand,
    examples='  scripty raise "find a release tag"',
)
@click.argument("reason", nargs=-1, required=True)
@click.pass_obj
def raise_cmd(app: AppContext, reason: tuple[str, ...]) -> None:
    """Log 'Failed to REASON' and exit with status 1."""
    app.emit(app.helpers.raise_error(" ".join(reason)))


@click.command(
    cls=ScriptyCommand,
    examples="  scripty require git docker jq",
)
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def require(app: AppContext, names: tuple[str, ...]) -> None:
    """Check that every NAME is an executable on PATH; stop at the first missing one."""
    app.emit(app.helpers.require_commands(*names))
