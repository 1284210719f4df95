"""Completion of partly typed file paths."""

from __future__ import annotations

import os
from typing import Iterable

__all__ = ["path_complete"]

_C_SPACE = " \t\n\v\f\r"


def _entries(directory: str) -> Iterable[str] | None:
    """List *directory* the way a raw directory read does, dot entries included."""
    try:
        names = os.listdir(directory)
    except OSError:
        return None
    return [".", "..", *names]


def _common_length(a: str, b: str) -> int:
    length = 0
    for x, y in zip(a, b):
        if x != y:
            break
        length += 1
    return length


def path_complete(string: str) -> str | None:
    """Extend *string* by what all directory entries matching it share.

    Leading white space is ignored and a leading ``~/`` stands for the
    home directory.  Returns the extended path, or None when no entry
    extends it or the matching entries share no further characters.
    """
    string = string.lstrip(_C_SPACE)
    home = os.environ.get("HOME")
    if string.startswith("~/") and home is not None:
        string = home + string[1:]

    slash = string.rfind("/")
    if slash >= 0:
        directory = string[:slash]
        prefix = string[slash + 1 :]
    else:
        directory = "."
        prefix = string

    entries = _entries(directory)
    if entries is None:
        return None

    best: str | None = None
    for name in entries:
        if len(name) <= len(prefix) or not name.startswith(prefix):
            continue
        rest = name[len(prefix) :]
        if best is None:
            best = rest
            continue
        best = best[: _common_length(best, rest)]
        if not best:
            break

    if not best:
        return None
    return string + best