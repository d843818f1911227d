"""Commands: random identifiers and hex dumps."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scripty.commands._base import ScriptyCommand
from scripty.services.result import HelperResult

if TYPE_CHECKING:
    from scripty.commands._context import AppContext


@click.command("random", cls=ScriptyCommand, examples="  RUN_ID=$(scripty random)")
@click.pass_obj
def random_cmd(app: AppContext) -> None:
    """Print 32 random alphanumeric characters."""
    value = app.helpers.random_alnum()
    app.emit(HelperResult(ok=True, op="random_alnum", data={"value": value}), value=value)


@click.command("hex", cls=ScriptyCommand, examples='  scripty hex "$SUSPICIOUS_VALUE"')
@click.argument("value")
@click.pass_obj
def hex_cmd(app: AppContext, value: str) -> None:
    """Print VALUE in canonical hex+ASCII form."""
    dump = app.helpers.print_to_hex(value)
    app.emit(HelperResult(ok=True, op="print_to_hex", data={"value": dump}), value=dump or None)
