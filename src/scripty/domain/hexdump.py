"""Canonical hex+ASCII rendering, laid out like ``hexdump -C``.

Each line holds an 8-digit offset, sixteen bytes in two groups of eight,
and the printable ASCII column between pipes. Runs of identical full
lines collapse to a single ``*``. The last line is the total length.
"""

from __future__ import annotations

BYTES_PER_LINE = 16
_HEX_WIDTH = 3 * BYTES_PER_LINE + 1


def _printable(b: int) -> str:
    return chr(b) if 0x20 <= b < 0x7F else "."


def format_line(offset: int, chunk: bytes) -> str:
    """Render one line of at most sixteen bytes starting at *offset*."""
    left = " ".join(f"{b:02x}" for b in chunk[:8])
    right = " ".join(f"{b:02x}" for b in chunk[8:])
    hex_part = f"{left}  {right}" if right else left
    ascii_part = "".join(_printable(b) for b in chunk)
    return f"{offset:08x}  {hex_part:<{_HEX_WIDTH}} |{ascii_part}|"


def hexdump(data: bytes) -> str:
    """Render *data* in canonical hex+ASCII form (empty input renders nothing)."""
    if not data:
        return ""
    lines: list[str] = []
    previous: bytes | None = None
    squeezing = False
    for offset in range(0, len(data), BYTES_PER_LINE):
        chunk = data[offset : offset + BYTES_PER_LINE]
        if chunk == previous and len(chunk) == BYTES_PER_LINE:
            if not squeezing:
                lines.append("*")
                squeezing = True
            continue
        squeezing = False
        previous = chunk
        lines.append(format_line(offset, chunk))
    lines.append(f"{len(data):08x}")
    return "\n".join(lines)


def print_to_hex(value: str | bytes) -> str:
    """Hex-dump *value*; strings are encoded as UTF-8 first.

    Bytes that arrived undecodable (as ``surrogateescape`` surrogates, the
    way Python decodes argv and the environment) are dumped as the original
    bytes.
    """
    data = value.encode("utf-8", "surrogateescape") if isinstance(value, str) else value
    return hexdump(data)
