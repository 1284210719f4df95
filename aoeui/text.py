"""Texts, the views onto them, and their undo history.

A text holds the bytes of a file or of a scratch buffer along with an
undo/redo log.  A text has one or more views, each of which presents
all or part of the text and keeps its own set of loci (cursor, mark and
any others created later).  A workspace owns the list of texts.
"""

from __future__ import annotations

import contextlib
import enum
import os
from dataclasses import dataclass, field
from typing import Iterator

from aoeui.utf8 import UNICODE_BAD

__all__ = [
    "CURSOR",
    "MARK",
    "TextFlag",
    "Text",
    "View",
    "Workspace",
]

CURSOR = 0
MARK = 1


class TextFlag(enum.IntFlag):
    """Properties of a text."""

    NONE = 0
    SAVED_ORIGINAL = 1 << 0
    RDONLY = 1 << 1
    EDITOR = 1 << 2
    CREATED = 1 << 3
    SCRATCH = 1 << 4
    NO_TABS = 1 << 5
    NO_UTF8 = 1 << 6
    CRNL = 1 << 7


@dataclass(eq=False)
class _Edit:
    offset: int
    count: int  # bytes deleted; negative means bytes inserted


@dataclass(eq=False)
class _UndoLog:
    edits: list[_Edit] = field(default_factory=list)
    deleted: bytearray = field(default_factory=bytearray)
    redo: int = 0
    saved: int = 0


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


class Text:
    """The content of one file or scratch buffer, with undo history."""

    def __init__(
        self,
        path: str = "",
        flags: TextFlag | int = TextFlag.NONE,
        tabstop: int = 8,
        content: bytes | str = b"",
    ) -> None:
        self.path = path
        self.flags = TextFlag(flags)
        self.tabstop = tabstop
        self.views: list[View] = []
        self.dirties = 0
        self.preserved = 0
        self._data = bytearray(_as_bytes(content))
        self._undo: _UndoLog | None = None

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Text(path={self.path!r}, bytes={len(self._data)})"

    @property
    def content(self) -> bytes:
        """All the bytes of the text."""
        return bytes(self._data)

    @property
    def is_dirty(self) -> bool:
        """True when modified since last preserved."""
        return self.dirties != self.preserved

    def _dirty(self) -> None:
        self.dirties += 1

    def byte(self, offset: int) -> int:
        """Return the byte at *offset*, or UNICODE_BAD when out of range."""
        if 0 <= offset < len(self._data):
            return self._data[offset]
        return UNICODE_BAD

    def get(self, offset: int, count: int) -> bytes:
        """Return up to *count* bytes starting at *offset*."""
        if offset < 0 or count <= 0:
            return b""
        return bytes(self._data[offset : offset + count])

    def _last_edit(self) -> _Edit | None:
        undo = self._undo
        if undo and undo.redo and undo.redo == len(undo.edits):
            return undo.edits[-1]
        return None

    def _resume_editing(self) -> _UndoLog:
        if self._undo is None:
            self._undo = _UndoLog()
        undo = self._undo
        del undo.edits[undo.redo :]
        del undo.deleted[undo.saved :]
        return undo

    def insert(self, offset: int, data: bytes | str) -> int:
        """Insert *data* at *offset*; return the number of bytes inserted."""
        raw = _as_bytes(data)
        if not raw:
            return 0
        if not 0 <= offset <= len(self._data):
            raise IndexError(f"insertion offset {offset} out of range")
        self._dirty()
        self._data[offset:offset] = raw
        count = len(raw)
        last = self._last_edit()
        if last is not None and last.count < 0 and last.offset - last.count == offset:
            last.count -= count
        else:
            undo = self._resume_editing()
            undo.edits.append(_Edit(offset, -count))
            undo.redo += 1
        self.adjust_loci(offset, count)
        return count

    def delete(self, offset: int, count: int) -> int:
        """Delete up to *count* bytes at *offset*; return how many went."""
        if count <= 0:
            return 0
        if offset < 0:
            raise IndexError(f"deletion offset {offset} out of range")
        old = bytes(self._data[offset : offset + count])
        count = len(old)
        if not count:
            return 0
        self._dirty()
        last = self._last_edit()
        if last is not None and last.count >= 0 and last.offset == offset:
            last.count += count
            undo = self._undo
            assert undo is not None
        else:
            undo = self._resume_editing()
            undo.edits.append(_Edit(offset, count))
            undo.redo += 1
        undo.deleted[undo.saved : undo.saved] = old
        del self._data[offset : offset + count]
        undo.saved += count
        self.adjust_loci(offset, -count)
        return count

    def undo(self) -> int | None:
        """Reverse the latest edit; return its offset, or None if none."""
        undo = self._undo
        if undo is None or not undo.redo:
            return None
        self._dirty()
        undo.redo -= 1
        edit = undo.edits[undo.redo]
        if edit.count >= 0:
            undo.saved -= edit.count
            restored = undo.deleted[undo.saved : undo.saved + edit.count]
            del undo.deleted[undo.saved : undo.saved + edit.count]
            self._data[edit.offset : edit.offset] = restored
        else:
            n = -edit.count
            undo.deleted[undo.saved : undo.saved] = self._data[
                edit.offset : edit.offset + n
            ]
            del self._data[edit.offset : edit.offset + n]
        self.adjust_loci(edit.offset, edit.count)
        return edit.offset

    def redo(self) -> int | None:
        """Repeat the latest undone edit; return its offset, or None."""
        undo = self._undo
        if undo is None or undo.redo == len(undo.edits):
            return None
        self._dirty()
        edit = undo.edits[undo.redo]
        undo.redo += 1
        if edit.count >= 0:
            undo.deleted[undo.saved : undo.saved] = self._data[
                edit.offset : edit.offset + edit.count
            ]
            del self._data[edit.offset : edit.offset + edit.count]
            undo.saved += edit.count
        else:
            n = -edit.count
            restored = undo.deleted[undo.saved : undo.saved + n]
            del undo.deleted[undo.saved : undo.saved + n]
            self._data[edit.offset : edit.offset] = restored
        self.adjust_loci(edit.offset, -edit.count)
        return edit.offset

    def forget_undo(self) -> None:
        """Discard the whole undo/redo history."""
        self._undo = None

    def adjust_loci(self, offset: int, delta: int) -> None:
        """Update every view after *delta* bytes changed at *offset*."""
        if not delta:
            return
        if delta < 0:
            limit = offset - delta
            for view in self.views:
                if limit < view.start:
                    view.start += delta
                elif offset < view.start:
                    loss = min(limit - view.start, view.size)
                    view.start = offset
                    view.size -= loss
                    view.adjust_loci(0, -loss)
                elif offset < view.start + view.size:
                    loss = min(view.start + view.size - offset, -delta)
                    view.size -= loss
                    view.adjust_loci(offset - view.start, -loss)
        else:
            for view in self.views:
                if offset < view.start:
                    view.start += delta
                elif offset <= view.start + view.size:
                    view.size += delta
                    view.adjust_loci(offset - view.start, delta)


class View:
    """A window onto all or part of a text, with its own loci."""

    def __init__(self, text: Text, start: int = 0, size: int | None = None) -> None:
        self.text = text
        self.name: str | None = None
        self.start = start
        self.size = len(text) - start if size is None else size
        self._loci: dict[int, int | None] = {CURSOR: 0, MARK: None}
        self._next_locus = MARK + 1

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"View(name={self.name!r}, start={self.start}, size={self.size})"

    def byte(self, offset: int) -> int:
        """Return the byte at *offset* in the view, or UNICODE_BAD."""
        if offset < 0 or offset >= self.size:
            return UNICODE_BAD
        return self.text.byte(self.start + offset)

    def get(self, offset: int, count: int) -> bytes:
        """Return up to *count* bytes at *offset*, clipped to the view."""
        if offset < 0 or offset >= self.size:
            return b""
        count = min(count, self.size - offset)
        return self.text.get(self.start + offset, count)

    def insert(self, offset: int, data: bytes | str) -> int:
        """Insert *data* at view offset *offset*."""
        return self.text.insert(self.start + offset, data)

    def delete(self, offset: int, count: int) -> int:
        """Delete up to *count* bytes at view offset *offset*."""
        return self.text.delete(self.start + offset, count)

    def get_locus(self, locus: int) -> int | None:
        """Return the position of *locus*, or None when it is unset."""
        try:
            return self._loci[locus]
        except KeyError:
            raise KeyError(f"no such locus: {locus}") from None

    def set_locus(self, locus: int, position: int | None) -> None:
        """Move *locus* to *position*, or unset it with None."""
        if locus not in self._loci:
            raise KeyError(f"no such locus: {locus}")
        self._loci[locus] = position

    def create_locus(self, position: int | None = None) -> int:
        """Create a new locus at *position* and return its handle."""
        locus = self._next_locus
        self._next_locus += 1
        self._loci[locus] = position
        return locus

    def destroy_locus(self, locus: int) -> None:
        """Forget a locus made by create_locus."""
        if locus in (CURSOR, MARK):
            raise ValueError("the cursor and mark cannot be destroyed")
        if self._loci.pop(locus, _MISSING) is _MISSING:
            raise KeyError(f"no such locus: {locus}")

    def loci(self) -> Iterator[tuple[int, int | None]]:
        """Yield every (locus, position) pair."""
        yield from self._loci.items()

    def adjust_loci(self, offset: int, delta: int) -> None:
        """Shift loci after *delta* bytes changed at view offset *offset*."""
        if not delta:
            return
        for locus, position in self._loci.items():
            if position is None:
                continue
            if delta > 0:
                if position >= offset:
                    self._loci[locus] = position + delta
            elif position >= offset - delta:
                self._loci[locus] = position + delta
            elif position > offset:
                self._loci[locus] = offset


_MISSING = object()

_NAME_PUNCTUATION = frozenset("_-+.,")


class Workspace:
    """The set of open texts and the defaults applied to new ones."""

    def __init__(
        self,
        default_tab_stop: int = 8,
        default_no_tabs: bool = False,
        utf8: bool = True,
    ) -> None:
        self.texts: list[Text] = []
        self.default_tab_stop = default_tab_stop
        self.default_no_tabs = default_no_tabs
        self.utf8 = utf8

    def create_text(self, path: str, flags: TextFlag | int = TextFlag.NONE) -> View:
        """Create an empty text for *path* and return its first view."""
        flags = TextFlag(flags)
        if not self.utf8:
            flags |= TextFlag.NO_UTF8
        if self.default_no_tabs:
            flags |= TextFlag.NO_TABS
        text = Text(path, flags, self.default_tab_stop)
        self.texts.append(text)
        return self.create_view(text)

    def create_view(self, text: Text) -> View:
        """Create a new view of the whole of *text*."""
        view = View(text)
        text.views.insert(0, view)
        self.name_view(view)
        return view

    def find_view(self, name: str | None) -> View | None:
        """Return the view called *name*, if there is one."""
        name = name or ""
        for text in self.texts:
            for view in text.views:
                if view.name is not None and view.name == name:
                    return view
        return None

    def name_view(self, view: View) -> None:
        """Give *view* a unique name derived from its text's path."""
        path = view.text.path or ""
        if view.text.flags & TextFlag.EDITOR:
            base = path
        else:
            kept: list[str] = []
            last = len(path) - 1
            for index, ch in enumerate(path):
                if ch.isascii() and ch.isalnum() or ch in _NAME_PUNCTUATION or ord(ch) >= 0x80:
                    kept.append(ch)
                elif ch == "/" and index < last:
                    kept.clear()
            base = "".join(kept)
        name = base
        serial = 2
        while self.find_view(name) is not None:
            name = f"{base}<{serial}>"
            serial += 1
        view.name = name

    def close_view(self, view: View | None) -> None:
        """Close *view*; the text goes too when it was its last view."""
        if view is None:
            return
        text = view.text
        if view in text.views:
            text.views.remove(view)
            if not text.views:
                self._close_text(text)
        view.name = None

    def _close_text(self, text: Text) -> None:
        if text in self.texts:
            self.texts.remove(text)
        text.forget_undo()
        if text.flags & (TextFlag.SCRATCH | TextFlag.CREATED) and text.path:
            with contextlib.suppress(OSError):
                os.unlink(text.path)

    def selection_view(self, view: View | None, offset: int, count: int) -> View | None:
        """Create a view onto *count* bytes of *view* at *offset*."""
        if view is None:
            return None
        new = self.create_view(view.text)
        offset = min(offset, view.size)
        count = min(count, view.size - offset)
        new.start = view.start + offset
        new.size = count
        new.set_locus(CURSOR, 0)
        return new