"""HelperResult and HelperError — the helper contract.

INVARIANT: Helpers never end the process themselves. Every operation that
can fail returns a HelperResult; only an entry point (``Helpers.exit_on_failure``
or the CLI) turns a failed result into ``SystemExit(result.exit_code)``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from scripty.domain.lifecycle import TERMINAL_OUTCOMES, Outcome


class HelperError(BaseModel):
    """Structured error payload within a HelperResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class HelperResult(BaseModel):
    """Return type for helper operations.

    Attributes:
        ok: Whether the caller should keep going.
        op: Name of the operation (e.g. ``"try_run"``).
        status: Exit status carried by the operation, 0 on success.
        outcome: Terminal state for command invocations, None otherwise.
        data: Operation-specific payload.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    status: int = 0
    outcome: Outcome | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: HelperError | None = None

    @field_validator("outcome")
    @classmethod
    def _outcome_is_terminal(cls, value: Outcome | None) -> Outcome | None:
        if value is not None and value not in TERMINAL_OUTCOMES:
            msg = f"outcome must be terminal, got {value!r}"
            raise ValueError(msg)
        return value

    @property
    def exit_code(self) -> int:
        """Status the process should end with if this result is final."""
        if self.ok:
            return 0
        return self.status or 1


def failure(
    op: str,
    code: str,
    message: str,
    *,
    status: int = 1,
    outcome: Outcome | None = None,
    **detail: Any,
) -> HelperResult:
    """Build a failed result carrying *status*."""
    return HelperResult(
        ok=False,
        op=op,
        status=status,
        outcome=outcome,
        error=HelperError(code=code, message=message, detail=detail),
    )
