"""Helpers — the one object scripts build at start-up and call into.

Usage::

    from scripty.facade import Helpers

    helpers = Helpers.from_env()
    helpers.exit_on_failure(helpers.require_commands("git", "tar"))
    token = helpers.exit_on_failure(helpers.get_required("TOKEN")).data["value"]
    helpers.exit_on_failure(helpers.try_run("fetch sources", "git", "fetch"))

Nothing below ``exit_on_failure`` ends the process.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from scripty.config.settings import ScriptySettings
from scripty.domain.hexdump import print_to_hex
from scripty.domain.ids import random_alnum
from scripty.output.reporter import Reporter
from scripty.services.env import EnvService
from scripty.services.execute import CommandService
from scripty.services.result import HelperResult


class Helpers:
    """Logging, environment, execution, and identifier helpers sharing one settings object."""

    def __init__(
        self,
        settings: ScriptySettings | None = None,
        *,
        reporter: Reporter | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.settings = settings or ScriptySettings()
        self.reporter = reporter or Reporter(no_color=self.settings.disable_console_colors)
        self._env = EnvService(self.settings, self.reporter, environ=environ)
        self._commands = CommandService(self.settings, self.reporter)

    @classmethod
    def from_env(cls, **overrides: Any) -> Helpers:
        """Build helpers from ambient flags, ``scripty.toml``, and *overrides*."""
        return cls(ScriptySettings.from_cli(**overrides))

    @staticmethod
    def exit_on_failure(result: HelperResult) -> HelperResult:
        """Pass *result* through, or end the process with its exit code."""
        if not result.ok:
            raise SystemExit(result.exit_code)
        return result

    # --- Logging ---

    def log_action(self, text: str) -> None:
        self.reporter.log_action(text)

    def log_failure(self, text: str) -> None:
        self.reporter.log_failure(text)

    def log_success(self, text: str) -> None:
        self.reporter.log_success(text)

    # --- Environment ---

    def get_required(self, name: str) -> HelperResult:
        return self._env.get_required(name)

    def get_or_default(self, name: str, default: str) -> str:
        return self._env.get_or_default(name, default)

    def get_or_empty(self, name: str) -> str:
        return self._env.get_or_empty(name)

    def get_or_prompt(self, name: str) -> str:
        return self._env.get_or_prompt(name)

    # --- Execution ---

    def execute(self, *argv: str, silent: bool | None = None) -> HelperResult:
        return self._commands.execute(*argv, silent=silent)

    def try_run(self, label: str, *argv: str) -> HelperResult:
        return self._commands.try_run(label, *argv)

    def propagate_error(self, label: str, *argv: str) -> HelperResult:
        return self._commands.propagate_error(label, *argv)

    def raise_error(self, reason: str) -> HelperResult:
        return self._commands.raise_error(reason)

    def require_commands(self, *names: str) -> HelperResult:
        return self._commands.require_commands(*names)

    # --- Strings ---

    def random_alnum(self) -> str:
        return random_alnum()

    def print_to_hex(self, value: str | bytes) -> str:
        return print_to_hex(value)
