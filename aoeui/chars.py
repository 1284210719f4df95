"""Character access to views, selections and character classes.

Views hold raw bytes; these helpers read them as (extended) UTF-8
characters.  They honour the text's NO_UTF8 and CRNL flags, and they
treat a folded section as a single character.
"""

from __future__ import annotations

from typing import NamedTuple

from aoeui.text import CURSOR, MARK, TextFlag, View
from aoeui.utf8 import (
    FOLD_END,
    FOLD_START,
    UNICODE_BAD,
    decode,
    folded_bytes,
    is_codepoint,
    is_folded,
    is_unicode,
    utf8_length,
    utf8_length_backwards,
)

__all__ = [
    "Selection",
    "view_unicode",
    "view_unicode_prior",
    "view_char",
    "view_char_prior",
    "get_selection",
    "extract",
    "extract_selection",
    "delete_selection",
    "append",
    "is_open_bracket",
    "is_close_bracket",
    "is_wordch",
    "is_idch",
    "char_columns",
]

_NEWLINE = ord("\n")
_RETURN = ord("\r")
_APPEND_LIMIT = 1023


class Selection(NamedTuple):
    """The selected span of a view and whether the cursor ends it."""

    offset: int
    count: int
    append: bool


def view_unicode(view: View, offset: int) -> tuple[int, int]:
    """Return the character at *offset* and the offset that follows it."""
    flags = view.text.flags
    ch = view.byte(offset)
    if not is_unicode(ch) or ch < 0x80 or flags & TextFlag.NO_UTF8:
        if ch == _RETURN and flags & TextFlag.CRNL and view.byte(offset + 1) == _NEWLINE:
            return _NEWLINE, offset + 2
        return ch, offset + (1 if is_unicode(ch) else 0)
    raw = view.get(offset, 8)
    length = utf8_length(raw)
    return decode(raw[:length]), offset + length


def view_unicode_prior(view: View, offset: int) -> tuple[int, int]:
    """Return the character before *offset* and the offset where it starts."""
    flags = view.text.flags
    ch = UNICODE_BAD
    if offset:
        offset -= 1
        ch = view.byte(offset)
        if is_unicode(ch) and ch >= 0x80 and not flags & TextFlag.NO_UTF8:
            at = offset - 7 if offset >= 7 else 0
            raw = view.get(at, offset - at + 1)
            if raw:
                offset -= utf8_length_backwards(raw) - 1
            ch = view_unicode(view, offset)[0]
        elif (
            ch == _NEWLINE
            and flags & TextFlag.CRNL
            and offset
            and view.byte(offset - 1) == _RETURN
        ):
            offset -= 1
    return ch, offset


def view_char(view: View, offset: int) -> tuple[int, int]:
    """Like view_unicode, but a folded section is skipped as one character."""
    ch, following = view_unicode(view, offset)
    if is_folded(ch):
        fbytes = folded_bytes(ch)
        end, after = view_unicode(view, following + fbytes)
        if end == FOLD_END + fbytes:
            following = after
    return ch, following


def view_char_prior(view: View, offset: int) -> tuple[int, int]:
    """Like view_unicode_prior, but a folded section counts as one character."""
    ch, offset = view_unicode_prior(view, offset)
    if ch >= FOLD_END:
        fbytes = folded_bytes(ch)
        if fbytes <= offset:
            start, start_offset = view_unicode_prior(view, offset - fbytes)
            if is_folded(start) and folded_bytes(start) == fbytes:
                ch, offset = start, start_offset
    return ch, offset


def get_selection(view: View) -> Selection:
    """Return the span between cursor and mark, or the character at the cursor."""
    cursor = view.get_locus(CURSOR)
    if cursor is None:
        cursor = 0
    mark = view.get_locus(MARK)
    if mark is None:
        mark = cursor
        if mark < view.size:
            mark = view_char(view, mark)[1]
    append_to = cursor >= mark
    if mark <= cursor:
        return Selection(mark, cursor - mark, append_to)
    return Selection(cursor, mark - cursor, append_to)


def extract(view: View | None, offset: int, count: int) -> bytes | None:
    """Return up to *count* bytes at *offset*, or None when there are none."""
    if view is None or offset > view.size:
        return None
    count = min(count, view.size - offset)
    if count <= 0:
        return None
    return view.get(offset, count)


def extract_selection(view: View) -> bytes | None:
    """Return the bytes of the current selection."""
    selection = get_selection(view)
    return extract(view, selection.offset, selection.count)


def delete_selection(view: View) -> int:
    """Delete the selection, unset the mark and return the bytes removed."""
    selection = get_selection(view)
    view.delete(selection.offset, selection.count)
    view.set_locus(MARK, None)
    return selection.count


def append(view: View, text: str | bytes) -> int:
    """Append formatted *text* to the end of *view*; return bytes added.

    As with a fixed formatting buffer, text stops at the first NUL and
    at most 1023 bytes are added.
    """
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    raw = raw.split(b"\0", 1)[0][:_APPEND_LIMIT]
    return view.insert(view.size, raw)


def _code(ch: int | str) -> int:
    return ord(ch) if isinstance(ch, str) else ch


def is_open_bracket(brackets: str, ch: int | str) -> bool:
    """True when *ch* opens one of the bracket pairs in *brackets*."""
    code = _code(ch)
    if code >= 0x80:
        return False
    return any(ord(b) == code for b in brackets[0::2])


def is_close_bracket(brackets: str, ch: int | str) -> bool:
    """True when *ch* closes one of the bracket pairs in *brackets*."""
    code = _code(ch)
    if code >= 0x80:
        return False
    return any(ord(b) == code for b in brackets[1::2])


def is_wordch(ch: int | str) -> bool:
    """True for characters that may appear in a word."""
    code = _code(ch)
    if 0x100 < code < FOLD_START:
        return True
    return is_codepoint(code) and code < 0x80 and chr(code).isalnum()


def is_idch(ch: int | str) -> bool:
    """True for characters that may appear in an identifier."""
    code = _code(ch)
    return code == ord("_") or is_wordch(code)


def char_columns(ch: int | str, column: int, tabstop: int) -> int:
    """Return how many display columns *ch* takes at *column*."""
    code = _code(ch)
    if code == ord("\t"):
        return tabstop - column % tabstop
    if code < ord(" ") or code == 0x7F or is_folded(code):
        return 2
    return 1