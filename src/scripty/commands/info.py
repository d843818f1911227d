"""Command: describe where scripty is running."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scripty import __version__
from scripty.commands._base import ScriptyCommand

if TYPE_CHECKING:
    from scripty.commands._context import AppContext


@click.command(cls=ScriptyCommand, examples="  scripty info")
@click.pass_obj
def info(app: AppContext) -> None:
    """Log the scripty version, project directory, and working directory."""
    helpers = app.helpers
    helpers.log_action(f"scripty {__version__}")
    helpers.log_action(f"The base project directory is {app.settings.project_root}")
    helpers.log_action(f"The present working directory is {Path.cwd()}")
