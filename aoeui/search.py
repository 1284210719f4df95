"""Incremental search within a view, by literal text or regular expression.

Literal searches ignore the case of ASCII letters.  A regular expression
search is also case-insensitive and line oriented; the text captured by
its groups 1 to 9 is kept in numbered registers.
"""

from __future__ import annotations

import re
import sys

from aoeui.chars import view_char_prior
from aoeui.rgba import SEARCH_BGRGBA
from aoeui.text import CURSOR, MARK, View
from aoeui.utf8 import encode, is_unicode

__all__ = ["match_char", "IncrementalSearch"]

_NEWLINE = ord("\n")


def match_char(x: int, y: int) -> bool:
    """Compare two characters, ignoring the case of ASCII letters."""
    if not is_unicode(x) or not is_unicode(y):
        return False
    if ord("a") <= x <= ord("z"):
        x -= 32
    if ord("a") <= y <= ord("z"):
        y -= 32
    return x == y


def _unsigned(value: int) -> int:
    """A negative position stands for 'no limit'."""
    return value if value >= 0 else sys.maxsize


class IncrementalSearch:
    """The state of one incremental search in a view."""

    selection_bgrgba = SEARCH_BGRGBA

    def __init__(
        self,
        view: View,
        regex: bool = False,
        last_search: bytes | None = None,
    ) -> None:
        self.view = view
        self.regex = regex
        self.last_search = last_search
        self.backward = False
        self.last_bytes = 0
        self.registers: dict[int, bytes] = {}
        self._buffer = bytearray()
        self._length = 0
        self._compiled: re.Pattern[bytes] | None = None
        cursor = view.get_locus(CURSOR)
        self.start = 0 if cursor is None else cursor
        self.mark = view.get_locus(MARK)
        if self.mark is not None and self.start < self.mark and not regex:
            self._buffer = bytearray(view.get(self.start, self.mark - self.start))
            self._length = len(self._buffer)
            self.last_bytes = self._length
            view.set_locus(MARK, self.start)
            view.set_locus(CURSOR, self.mark)

    @property
    def pattern(self) -> bytes:
        """The current search target."""
        return bytes(self._buffer[: self._length])

    def _match_pattern(self, offset: int) -> int:
        pattern = self._buffer[: self._length]
        for j, byte in enumerate(pattern):
            if not match_char(byte, self.view.byte(offset + j)):
                return 0
        return len(pattern)

    def _match_regex(self, offset: int, advance: bool) -> tuple[int, int]:
        view = self.view
        assert self._compiled is not None
        raw = view.get(offset, view.size)
        at_line_start = view_char_prior(view, offset)[0] == _NEWLINE
        subject = (b"\n" if at_line_start else b"\0") + raw
        match = self._compiled.search(subject, 1)
        if match is None:
            return 0, offset
        so = match.start() - 1
        if not advance and so:
            return 0, offset
        if so >= len(raw):
            return 0, offset
        eo = min(match.end() - 1, len(raw))
        for j in range(1, min(10, (self._compiled.groups or 0) + 1)):
            gs = match.start(j)
            if gs < 0:
                continue
            gso = max(gs - 1, 0)
            if gso >= len(raw):
                continue
            geo = min(match.end(j) - 1, len(raw))
            self.registers[j] = view.get(offset + gso, geo - gso)
        return eo - so, offset + so

    def scan_forward(self, offset: int, max_offset: int) -> tuple[int, int] | None:
        """Find the first hit in [offset, max_offset); return (at, length)."""
        size = self.view.size
        n = self._length
        if n > size:
            return None
        max_offset = min(max_offset, size - n)
        if offset + n > max_offset:
            return None
        if self._compiled is not None:
            length, at = self._match_regex(offset, True)
            if length and at < max_offset:
                return at, length
            return None
        for at in range(offset, max_offset):
            length = self._match_pattern(at)
            if length:
                return at, length
        return None

    def scan_backward(self, offset: int, min_offset: int) -> tuple[int, int] | None:
        """Find the last hit starting in [min_offset, offset]; return (at, length)."""
        size = self.view.size
        n = self._length
        if min_offset + n > size:
            return None
        if offset + n > size:
            offset = size - n
        for at in range(offset, min_offset - 1, -1):
            if self._compiled is not None:
                length = self._match_regex(at, False)[0]
            else:
                length = self._match_pattern(at)
            if length:
                return at, length
        return None

    def search(self, backward: bool, new: bool) -> bool:
        """Move to a hit, wrapping around; *new* allows a hit at the mark."""
        view = self.view
        if not self._length:
            view.set_locus(CURSOR, self.start)
            view.set_locus(MARK, None)
            return True
        if self.regex:
            if new:
                self._compiled = None
            if self._compiled is None:
                try:
                    self._compiled = re.compile(
                        self.pattern, re.IGNORECASE | re.MULTILINE
                    )
                except re.error:
                    return False
        mark = view.get_locus(MARK)
        if mark is None:
            mark = view.get_locus(CURSOR) or 0
        step = 0 if new else 1
        if backward:
            hit = self.scan_backward(_unsigned(mark - step), 0)
            if hit is None:
                hit = self.scan_backward(view.size, mark + 1)
        else:
            hit = self.scan_forward(mark + step, view.size)
            if hit is None:
                hit = self.scan_forward(0, _unsigned(mark - 1))
        if hit is None:
            return False
        at, length = hit
        view.set_locus(MARK, at)
        view.set_locus(CURSOR, at + length)
        self.last_bytes = self._length
        return True

    def extend(self, ch: int | str) -> bool:
        """Add a character to the target and search on; return success."""
        code = ord(ch) if isinstance(ch, str) else ch
        encoded = encode(code)
        del self._buffer[self._length :]
        self._buffer.extend(encoded)
        self._length += len(encoded)
        found = self.search(self.backward, True)
        if not found and not self.regex:
            self._length -= len(encoded)
        return found

    def retract(self) -> bool:
        """Drop the last byte of the target and return to the prior hit.

        Returns False when the target is already empty.
        """
        if not self._length:
            return False
        self._length -= 1
        self.search(not self.backward, True)
        return True

    def repeat(self, backward: bool | None) -> bool:
        """Go on to the next hit, earlier when *backward* is true.

        With None the search goes forward after a hit, or keeps its
        direction when reusing the last search.  An empty target takes
        the last search target.  Returns False when there is nothing to
        repeat or no hit.
        """
        if self.last_bytes:
            self._length = self.last_bytes
            self.backward = bool(backward)
            return self.search(self.backward, False)
        if not self._length and self.last_search:
            self._buffer = bytearray(self.last_search)
            self._length = len(self._buffer)
            if backward is not None:
                self.backward = backward
            return self.search(self.backward, False)
        return False

    def finish(self, keep_selection: bool = False) -> bytes | None:
        """End the search; return the target to remember for the next one.

        Unless *keep_selection* is set, the mark held before the search
        is restored.
        """
        if not keep_selection:
            self.view.set_locus(MARK, self.mark)
        self._compiled = None
        if self._length:
            self.last_search = self.pattern
        return self.last_search