"""Status-line reporter: action, failure, and success lines.

=========  ======  ============================  ================
Status     Symbol  Line                          Channel
=========  ======  ============================  ================
action     ``⇒``   ``⇒ <text>``                  stdout
failure    ``✗``   ``✗ Failed to <text>``        stderr
success    ``✓``   ``✓ Succeeded to <text>``     stdout
=========  ======  ============================  ================

Only the symbol is colored, and the symbol is dropped together with its
color when colors are disabled. The symbol is rendered by rich; the text
after it is written to the console's stream unchanged, so tabs, carriage
returns and other control characters reach the terminal as given.

INVARIANT: Reporting never raises. A stream that cannot be written to
(closed pipe, closed file, detached terminal) loses the line, nothing else.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

from rich.text import Text

from scripty.output.console import create_console

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)

ACTION_SYMBOL = "⇒"
FAILURE_SYMBOL = "✗"
SUCCESS_SYMBOL = "✓"

FAILURE_LEAD = "Failed to "
SUCCESS_LEAD = "Succeeded to "


def write_verbatim(stream: IO[str], text: str) -> None:
    """Write *text* to *stream* as-is.

    Undecodable bytes from argv or the environment arrive as lone
    surrogates (``surrogateescape``). Those are written back out as the
    original bytes when the stream exposes a binary buffer.
    """
    try:
        stream.write(text)
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogateescape")
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(raw.decode("utf-8", "replace"))
            return
        stream.flush()
        buffer.write(raw)
        buffer.flush()


class Reporter:
    """Writes status lines to stdout/stderr and reads interactive answers."""

    def __init__(
        self,
        *,
        no_color: bool = False,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self.no_color = no_color
        self._out = out or create_console(no_color=no_color)
        self._err = err or create_console(stderr=True, no_color=no_color)

    def log_action(self, text: str) -> None:
        """Announce something that is about to happen."""
        self._emit(self._out, ACTION_SYMBOL, "scripty.action", text)

    def log_failure(self, text: str) -> None:
        """Report that *text* could not be done (``Failed to <text>``)."""
        self._emit(self._err, FAILURE_SYMBOL, "scripty.failure", FAILURE_LEAD + text)

    def log_success(self, text: str) -> None:
        """Report that *text* was done (``Succeeded to <text>``)."""
        self._emit(self._out, SUCCESS_SYMBOL, "scripty.success", SUCCESS_LEAD + text)

    def prompt(self, name: str) -> str:
        """Ask for a value of *name* on stderr and read one line from stdin.

        Returns an empty string when the line is empty or stdin is exhausted.
        """
        self._emit(self._err, None, None, f"Value for {name}: \n> ", end="")
        line = sys.stdin.readline()
        return line.rstrip("\r\n")

    def _emit(
        self,
        console: Console,
        symbol: str | None,
        style: str | None,
        message: str,
        *,
        end: str = "\n",
    ) -> None:
        try:
            if symbol and not self.no_color:
                console.print(Text(symbol, style=style or ""), end=" ")
            stream = console.file
            write_verbatim(stream, message + end)
            stream.flush()
        except (OSError, ValueError) as exc:
            logger.debug("Status line dropped: %s", exc)
