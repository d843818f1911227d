"""Command group: environment variable lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scripty.commands._base import ScriptyGroup
from scripty.services.result import HelperResult

if TYPE_CHECKING:
    from scripty.commands._context import AppContext

_ENV_EXAMPLES = """\
  TOKEN=$(scripty env get TOKEN)
  REGION=$(scripty env default REGION eu-west-1)
  EXTRA_ARGS=$(scripty env empty EXTRA_ARGS)
  PASSWORD=$(scripty env prompt PASSWORD)"""


@click.group(cls=ScriptyGroup, examples=_ENV_EXAMPLES)
def env() -> None:
    """Read environment variables with fallbacks."""


@env.command(
    examples="""\
  scripty env get HOME
  scripty --json env get HOME"""
)
@click.argument("name")
@click.pass_obj
def get(app: AppContext, name: str) -> None:
    """Print NAME's value; fail with status 1 if it is unset or empty."""
    result = app.helpers.get_required(name)
    app.emit(result, value=result.data.get("value"))


def _emit_value(app: AppContext, op: str, name: str, value: str) -> None:
    app.emit(HelperResult(ok=True, op=op, data={"name": name, "value": value}), value=value)


@env.command(examples="  scripty env default REGION eu-west-1")
@click.argument("name")
@click.argument("default")
@click.pass_obj
def default(app: AppContext, name: str, default: str) -> None:
    """Print NAME's value, or DEFAULT if it is unset or empty."""
    _emit_value(app, "get_or_default", name, app.helpers.get_or_default(name, default))


@env.command(examples="  scripty env empty EXTRA_ARGS")
@click.argument("name")
@click.pass_obj
def empty(app: AppContext, name: str) -> None:
    """Print NAME's value, or an empty line if it is unset."""
    _emit_value(app, "get_or_empty", name, app.helpers.get_or_empty(name))


@env.command(examples="  PASSWORD=$(scripty env prompt PASSWORD)")
@click.argument("name")
@click.pass_obj
def prompt(app: AppContext, name: str) -> None:
    """Print NAME's value, asking for it on the terminal if it is unset."""
    _emit_value(app, "get_or_prompt", name, app.helpers.get_or_prompt(name))
