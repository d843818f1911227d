"""Locate the project's ``scripty.toml``.

A ``scripty.toml`` pins the ambient flags (``catch_error``, ``silent_stdout``,
``disable_console_colors``, ``verbose``, ...) for every script run inside a
project tree, and its directory becomes ``project_root``. It is found by
walking up from the working directory. ``SCRIPTY_CONFIG`` names a file
directly and disables the walk; ``--config`` is passed in by the CLI.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "scripty.toml"
CONFIG_ENV_VAR = "SCRIPTY_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``scripty.toml`` at or above *start* (default: cwd).

    ``SCRIPTY_CONFIG`` wins when set; a path there that is not a file
    yields None rather than falling back to the walk.
    """
    named = os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
