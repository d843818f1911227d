"""Click base classes for scripty commands.

scripty is mostly called from shell scripts, so every command carries an
``--examples`` flag that prints the shell snippets showing how to use it
(``RUN_ID=$(scripty random)``, ``scripty try "build" make``) and exits 0.
Commands that run a child program hand its arguments over untouched,
see :data:`PASSTHROUGH`.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class ScriptyCommand(click.Command):
    """Leaf command (``scripty random``, ``scripty try``) with ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ScriptyGroup(click.Group):
    """Command group (``scripty log``, ``scripty env``) with ``--examples``.

    Sets ``command_class = ScriptyCommand`` so subcommands accept
    ``examples=`` without an explicit ``cls=``.
    """

    command_class = ScriptyCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


# Passes everything after the label through untouched, including options
# meant for the child command (``scripty try "list" ls -la``).
PASSTHROUGH = {"ignore_unknown_options": True, "allow_interspersed_args": False}
