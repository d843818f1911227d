"""BaseService — shared foundation for helper services.

Every service receives the process settings and a reporter at
construction time. Settings are read-only; nothing here mutates them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scripty.output.reporter import Reporter

if TYPE_CHECKING:
    from scripty.config.settings import ScriptySettings


class BaseService:
    """Base for helper service classes.

    Usage::

        class CommandService(BaseService):
            def try_run(self, label: str, *argv: str) -> HelperResult:
                ...
                self._reporter.log_success(label)
    """

    def __init__(
        self,
        settings: ScriptySettings,
        reporter: Reporter | None = None,
    ) -> None:
        self._settings = settings
        self._reporter = reporter or Reporter(no_color=settings.disable_console_colors)
