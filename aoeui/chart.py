"""Print a chart of characters with their code points."""

from __future__ import annotations

import string
import sys
from typing import Sequence

from aoeui.utf8 import encode

__all__ = ["format_chart", "main"]

_PER_LINE = 8
_WORD = 0xFFFFFFFF


def format_chart(start: int = 0x203B, count: int = 1) -> bytes:
    """Return a chart of *count* characters from *start*, eight to a line."""
    lines = []
    row = b""
    code = start & _WORD
    for index in range(count):
        if index % _PER_LINE == 0:
            row = b"0x%04x" % code
        row += b"\t" + encode(code).split(b"\0", 1)[0]
        code = (code + 1) & _WORD
        if index % _PER_LINE == _PER_LINE - 1:
            lines.append(row + b"\n")
    if count % _PER_LINE and count > 0:
        lines.append(row + b"\n")
    return b"".join(lines)


def _parse_unsigned(text: str, base: int) -> int:
    """Read an unsigned number leniently, stopping at the first bad digit."""
    s = text.lstrip()
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]
    if (
        base in (0, 16)
        and s[:2].lower() == "0x"
        and s[2:3]
        and s[2] in string.hexdigits
    ):
        s = s[2:]
        base = 16
    elif base == 0:
        base = 8 if s.startswith("0") else 10
    valid = (string.digits + string.ascii_lowercase)[:base]
    digits = ""
    for ch in s:
        if ch.lower() not in valid:
            break
        digits += ch
    value = int(digits, base) if digits else 0
    return (-value if negative else value) & _WORD


def main(argv: Sequence[str] | None = None) -> int:
    """Write a chart; arguments are a hex start code and a count."""
    args = list(sys.argv[1:] if argv is None else argv)
    start = _parse_unsigned(args[0], 16) if args else 0x203B
    count = _parse_unsigned(args[1], 0) if len(args) > 1 else 1
    out = sys.stdout.buffer
    out.write(format_chart(start, count))
    out.flush()
    return 0