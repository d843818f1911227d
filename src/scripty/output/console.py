"""Rich Console factory and theme for scripty status lines.

Consoles are bound to the live ``sys.stdout``/``sys.stderr`` so redirected
or captured streams are always honored. Color mode pins the 8-color
palette and forces terminal output, so piped status lines keep their
ANSI codes exactly like an ``echo -e`` would. No-color mode drops every
escape sequence, including bold.
"""

from __future__ import annotations

import errno
import os
from typing import IO

from rich.console import Console
from rich.theme import Theme

SCRIPTY_THEME = Theme(
    {
        "scripty.action": "yellow",
        "scripty.failure": "red",
        "scripty.success": "green",
    }
)


class StatusConsole(Console):
    """Console that reports a broken pipe instead of exiting the process.

    Rich's default answers ``BrokenPipeError`` with ``SystemExit(1)``. Status
    lines are best-effort, so the error is re-raised for the reporter to
    drop, and the console goes quiet since the pipe will not come back.
    """

    def on_broken_pipe(self) -> None:
        self.quiet = True
        raise BrokenPipeError(errno.EPIPE, os.strerror(errno.EPIPE))


def create_console(
    *,
    stderr: bool = False,
    no_color: bool = False,
    file: IO[str] | None = None,
) -> Console:
    """Create a Console for status output.

    Args:
        stderr: Write to ``sys.stderr`` instead of ``sys.stdout``.
        no_color: Disable all ANSI escape codes.
        file: Explicit target stream (used in tests).
    """
    return StatusConsole(
        file=file,
        stderr=stderr,
        theme=SCRIPTY_THEME,
        color_system=None if no_color else "standard",
        force_terminal=not no_color,
        no_color=no_color,
        highlight=False,
        emoji=False,
        markup=False,
        soft_wrap=True,
    )
