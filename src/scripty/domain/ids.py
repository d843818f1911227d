"""Random identifier generation and validation.

Identifiers are drawn from the system entropy source and filtered down
to the alphanumeric alphabet, so every character is equally likely.
They are meant for naming things, not for secrets.
"""

from __future__ import annotations

import os
import re
import string
from collections.abc import Callable

ALNUM_ALPHABET = string.ascii_letters + string.digits
DEFAULT_LENGTH = 32

_ALNUM_BYTES = frozenset(ALNUM_ALPHABET.encode("ascii"))


def random_alnum(
    length: int = DEFAULT_LENGTH,
    *,
    source: Callable[[int], bytes] = os.urandom,
) -> str:
    """Return *length* random characters from ``[a-zA-Z0-9]``.

    Reads raw bytes from *source* and keeps only those that already are
    alphanumeric ASCII, discarding the rest.
    """
    if length < 0:
        msg = f"length must be non-negative, got {length}"
        raise ValueError(msg)
    kept: list[str] = []
    while len(kept) < length:
        chunk = source(max(length * 4, 64))
        kept.extend(chr(b) for b in chunk if b in _ALNUM_BYTES)
    return "".join(kept[:length])


def validate_alnum(value: str, length: int = DEFAULT_LENGTH) -> bool:
    """Check whether *value* is exactly *length* alphanumeric characters."""
    return re.fullmatch(rf"[a-zA-Z0-9]{{{length}}}", value) is not None
