"""CommandService — run external commands and decide what a failure means.

Statuses follow shell conventions so they can be handed straight to
``exit``: the child's own exit code, 127 when the program cannot be
found, 126 when it cannot be executed, and ``128 + N`` when the child
was killed by signal N.

Per invocation: ``idle -> running -> {succeeded, failed_swallowed,
failed_fatal}``. Only ``failed_fatal`` yields a result with ``ok=False``.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from scripty.domain.lifecycle import Outcome, settle
from scripty.services.base import BaseService
from scripty.services.result import HelperResult, failure

logger = logging.getLogger(__name__)

STATUS_NOT_EXECUTABLE = 126
STATUS_NOT_FOUND = 127
SIGNAL_STATUS_BASE = 128


class CommandService(BaseService):
    """Execute commands with the silent-stdout and catch-error policies."""

    def execute(self, *argv: str, silent: bool | None = None) -> HelperResult:
        """Run *argv* and return its exit status.

        Never fails and never logs a status line: a non-zero status is
        reported through ``result.status`` with ``ok=True``.

        Args:
            argv: Program name followed by its arguments.
            silent: Discard the child's stdout. ``None`` uses the
                ``silent_stdout`` setting. Stderr is never redirected.
        """
        if not argv:
            msg = "execute() needs at least a program name"
            raise ValueError(msg)
        if silent is None:
            silent = self._settings.silent_stdout

        args = list(argv)
        logger.debug("Executing %s (silent=%s)", args, silent)
        try:
            completed = subprocess.run(
                args,
                stdout=subprocess.DEVNULL if silent else None,
                check=False,
            )
            status = completed.returncode
        except FileNotFoundError as exc:
            logger.debug("Command not found: %s", exc)
            status = STATUS_NOT_FOUND
        except PermissionError as exc:
            logger.debug("Command not executable: %s", exc)
            status = STATUS_NOT_EXECUTABLE
        except OSError as exc:
            logger.debug("Command could not start: %s", exc)
            status = STATUS_NOT_EXECUTABLE

        if status < 0:
            status = SIGNAL_STATUS_BASE - status
        logger.debug("Command %s exited with %d", args[0], status)
        return HelperResult(ok=True, op="execute", status=status, data={"argv": args})

    def try_run(self, label: str, *argv: str) -> HelperResult:
        """Run *argv*, logging success or failure against *label*.

        A failure is fatal unless ``catch_error`` is set, in which case it
        is swallowed: the result is ``ok`` with status 0, exactly like a
        success, and the child's real status survives only in
        ``data["caught_status"]``.
        """
        status = self.execute(*argv).status
        outcome = settle(status, catch_error=self._settings.catch_error)

        if outcome is Outcome.SUCCEEDED:
            self._reporter.log_success(label)
            return HelperResult(
                ok=True, op="try_run", outcome=outcome, data={"label": label, "argv": list(argv)}
            )

        self._reporter.log_failure(label)
        if outcome is Outcome.FAILED_SWALLOWED:
            return HelperResult(
                ok=True,
                op="try_run",
                status=0,
                outcome=outcome,
                data={"label": label, "argv": list(argv), "caught_status": status},
                warnings=[f"Caught exit status {status} from {label}"],
            )
        return failure(
            "try_run",
            "COMMAND_FAILED",
            f"{label} exited with status {status}",
            status=status,
            outcome=outcome,
            label=label,
            argv=list(argv),
        )

    def propagate_error(self, label: str, *argv: str) -> HelperResult:
        """Run *argv* with stdout discarded; any failure is fatal.

        Ignores ``catch_error``. Success is silent.
        """
        status = self.execute(*argv, silent=True).status
        if status == 0:
            return HelperResult(
                ok=True, op="propagate_error", outcome=Outcome.SUCCEEDED, data={"label": label}
            )
        self._reporter.log_failure(label)
        return failure(
            "propagate_error",
            "COMMAND_FAILED",
            f"{label} exited with status {status}",
            status=status,
            outcome=Outcome.FAILED_FATAL,
            label=label,
            argv=list(argv),
        )

    def raise_error(self, reason: str, *, code: str = "RAISED", **detail: object) -> HelperResult:
        """Log *reason* as a failure and return a fatal result with status 1."""
        self._reporter.log_failure(reason)
        return failure("raise_error", code, reason, **detail)

    def require_commands(self, *names: str) -> HelperResult:
        """Check that every command in *names* resolves on ``PATH``.

        Stops at the first missing command.
        """
        found: dict[str, str] = {}
        for name in names:
            path = shutil.which(name)
            if path is None:
                return self.raise_error(
                    f"locate command '{name}'", code="MISSING_COMMAND", command=name
                )
            found[name] = path
        return HelperResult(ok=True, op="require_commands", data={"commands": found})
