"""Outcome lifecycle of a single command invocation.

Every invocation walks ``idle -> running`` and then settles in exactly one
terminal outcome. ``succeeded`` and ``failed_swallowed`` hand control back
to the caller; ``failed_fatal`` tells the entry point to end the process.
"""

from __future__ import annotations

from enum import StrEnum


class Outcome(StrEnum):
    """States of a command invocation."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED_SWALLOWED = "failed_swallowed"
    FAILED_FATAL = "failed_fatal"


OUTCOME_TRANSITIONS: dict[str, list[str]] = {
    "idle": ["running"],
    "running": ["succeeded", "failed_swallowed", "failed_fatal"],
    "succeeded": [],
    "failed_swallowed": [],
    "failed_fatal": [],
}

# States with no way out; a finished invocation is always in one of these.
TERMINAL_OUTCOMES = frozenset(
    Outcome(state) for state, targets in OUTCOME_TRANSITIONS.items() if not targets
)


def settle(status: int, *, catch_error: bool) -> Outcome:
    """Compute the terminal outcome for a finished invocation.

    A zero *status* always succeeds. A non-zero one is swallowed only
    when *catch_error* is set.
    """
    if status == 0:
        return Outcome.SUCCEEDED
    if catch_error:
        return Outcome.FAILED_SWALLOWED
    return Outcome.FAILED_FATAL
