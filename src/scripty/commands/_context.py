"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Helpers initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from scripty.config.settings import ScriptySettings
    from scripty.facade import Helpers
    from scripty.services.result import HelperResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    This is the only place in scripty that ends the process on a failed
    result.
    """

    def __init__(self, settings: ScriptySettings) -> None:
        self.settings = settings
        self._helpers: Helpers | None = None

        from scripty.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            no_color=settings.disable_console_colors,
        )

    @property
    def helpers(self) -> Helpers:
        """The helper facade (created lazily on first access)."""
        if self._helpers is None:
            from scripty.facade import Helpers

            self._helpers = Helpers(self.settings)
        return self._helpers

    def emit(self, result: HelperResult, *, value: str | None = None) -> None:
        """Output a HelperResult with correct exit semantics.

        * Success: writes *value* (if any) to stdout, or the full result
          in ``--json`` mode, and returns normally.
        * Failure: the failure line was already logged by the helper. In
          ``--json`` mode the result goes to stderr. Exits with
          ``result.exit_code``.
        """
        if self.settings.json_output:
            click.echo(result.model_dump_json(indent=2), err=not result.ok)
        elif result.ok and value is not None:
            click.echo(value)
        if not result.ok:
            raise SystemExit(result.exit_code)
