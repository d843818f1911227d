"""Subcommand modules for scripty.

Provides register_commands() which uses deferred imports to keep
``scripty --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from scripty.commands.env import env
    from scripty.commands.log import log

    cli.add_command(log)
    cli.add_command(env)

    # --- Standalone commands ---
    from scripty.commands.info import info
    from scripty.commands.run import exec_cmd, propagate, raise_cmd, require, try_cmd
    from scripty.commands.strings import hex_cmd, random_cmd

    cli.add_command(exec_cmd)
    cli.add_command(try_cmd)
    cli.add_command(propagate)
    cli.add_command(raise_cmd)
    cli.add_command(require)
    cli.add_command(random_cmd)
    cli.add_command(hex_cmd)
    cli.add_command(info)
