"""EnvService — environment variable lookups with fallbacks.

An empty variable and an unset one are the same thing to every accessor.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from scripty.services.base import BaseService
from scripty.services.result import HelperResult, failure

if TYPE_CHECKING:
    from scripty.config.settings import ScriptySettings
    from scripty.output.reporter import Reporter

logger = logging.getLogger(__name__)


class EnvService(BaseService):
    """Read named variables from *environ* (default: ``os.environ``)."""

    def __init__(
        self,
        settings: ScriptySettings,
        reporter: Reporter | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(settings, reporter)
        self._environ = os.environ if environ is None else environ

    def _lookup(self, name: str) -> str:
        return self._environ.get(name) or ""

    def get_required(self, name: str) -> HelperResult:
        """Return the value of *name*, or a failed result if it is missing.

        Logs ``Failed to retrieve environment '<name>' variable`` on failure.
        Nothing is logged on success.
        """
        value = self._lookup(name)
        if not value:
            reason = f"retrieve environment '{name}' variable"
            self._reporter.log_failure(reason)
            return failure("get_required", "MISSING_ENV", reason, name=name)
        return HelperResult(ok=True, op="get_required", data={"name": name, "value": value})

    def get_or_default(self, name: str, default: str) -> str:
        return self._lookup(name) or default

    def get_or_empty(self, name: str) -> str:
        return self.get_or_default(name, "")

    def get_or_prompt(self, name: str) -> str:
        """Return the value of *name*, asking for it interactively when missing."""
        value = self._lookup(name)
        if value:
            return value
        logger.debug("Prompting for %s", name)
        return self._reporter.prompt(name)
