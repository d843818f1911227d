"""Command group: status lines for shell scripts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scripty.commands._base import ScriptyGroup

if TYPE_CHECKING:
    from scripty.commands._context import AppContext

_LOG_EXAMPLES = """\
  scripty log action "Deploying release 1.2"
  scripty log success "deploy release 1.2"
  scripty log failure "reach the registry"
  DISABLE_CONSOLE_COLORS=1 scripty log action 'plain output'"""

_TEXT = click.argument("text", nargs=-1, required=True)


@click.group(cls=ScriptyGroup, examples=_LOG_EXAMPLES)
def log() -> None:
    """Print action, failure, and success lines."""


@log.command(examples='  scripty log action "Building images"')
@_TEXT
@click.pass_obj
def action(app: AppContext, text: tuple[str, ...]) -> None:
    """Print '⇒ TEXT' to stdout."""
    app.helpers.log_action(" ".join(text))


@log.command(examples='  scripty log failure "build images"')
@_TEXT
@click.pass_obj
def failure(app: AppContext, text: tuple[str, ...]) -> None:
    """Print '✗ Failed to TEXT' to stderr."""
    app.helpers.log_failure(" ".join(text))


@log.command(examples='  scripty log success "build images"')
@_TEXT
@click.pass_obj
def success(app: AppContext, text: tuple[str, ...]) -> None:
    """Print '✓ Succeeded to TEXT' to stdout."""
    app.helpers.log_success(" ".join(text))
