import pytest

from aoeui.text import CURSOR, MARK, Text, TextFlag, View, Workspace
from aoeui.utf8 import UNICODE_BAD


@pytest.fixture
def ws():
    return Workspace()


def make(ws, content=b"hello world", path="/tmp/doc.txt"):
    view = ws.create_text(path)
    view.insert(0, content)
    view.text.forget_undo()
    return view


def test_insert_and_get(ws):
    view = make(ws)
    assert view.get(0, 100) == b"hello world"
    assert view.size == len(b"hello world")
    assert view.text.content == b"hello world"


def test_byte_out_of_range(ws):
    view = make(ws, b"ab")
    assert view.byte(0) == ord("a")
    assert view.byte(2) == UNICODE_BAD
    assert view.text.byte(5) == UNICODE_BAD


def test_insert_str_encodes_utf8(ws):
    view = make(ws, "é")
    assert view.get(0, 10) == "é".encode("utf-8")


def test_insert_bad_offset_raises():
    text = Text(content=b"abc")
    with pytest.raises(IndexError):
        text.insert(10, b"x")


def test_delete_clamps(ws):
    view = make(ws, b"abcdef")
    assert view.delete(4, 100) == 2
    assert view.get(0, 10) == b"abcd"
    assert view.delete(10, 3) == 0


def test_undo_redo_round_trip(ws):
    view = make(ws, b"abcdef")
    text = view.text
    text.delete(1, 2)
    text.insert(0, b"XY")
    assert text.content == b"XYadef"
    assert text.undo() == 0
    assert text.content == b"adef"
    assert text.undo() == 1
    assert text.content == b"abcdef"
    assert text.undo() is None
    assert text.redo() == 1
    assert text.content == b"adef"
    assert text.redo() == 0
    assert text.content == b"XYadef"
    assert text.redo() is None


def test_consecutive_inserts_merge(ws):
    view = make(ws, b"")
    for ch in "abc":
        view.insert(view.size, ch)
    text = view.text
    assert text.content == b"abc"
    text.undo()
    assert text.content == b""
    assert text.undo() is None


def test_consecutive_deletes_merge(ws):
    view = make(ws, b"abcdef")
    text = view.text
    text.delete(1, 1)
    text.delete(1, 1)
    assert text.content == b"adef"
    text.undo()
    assert text.content == b"abcdef"


def test_new_edit_discards_redo(ws):
    view = make(ws, b"abc")
    text = view.text
    text.insert(3, b"d")
    text.undo()
    text.insert(0, b"z")
    assert text.redo() is None
    assert text.content == b"zabc"


def test_forget_undo(ws):
    view = make(ws, b"abc")
    view.text.insert(0, b"q")
    view.text.forget_undo()
    assert view.text.undo() is None
    assert view.text.content == b"qabc"


def test_dirties_count_edits(ws):
    view = make(ws, b"abc")
    before = view.text.dirties
    view.text.insert(0, b"x")
    view.text.delete(0, 1)
    assert view.text.dirties == before + 2
    assert view.text.is_dirty


def test_loci_shift_on_insert_and_delete(ws):
    view = make(ws, b"0123456789")
    view.set_locus(CURSOR, 5)
    view.set_locus(MARK, 2)
    view.insert(2, b"abc")
    assert view.get_locus(CURSOR) == 8
    assert view.get_locus(MARK) == 5
    view.delete(1, 5)
    assert view.get_locus(CURSOR) == 3
    assert view.get_locus(MARK) == 1


def test_unset_locus_stays_unset(ws):
    view = make(ws)
    assert view.get_locus(MARK) is None
    view.insert(0, b"zz")
    assert view.get_locus(MARK) is None


def test_create_and_destroy_locus(ws):
    view = make(ws, b"abcdef")
    handle = view.create_locus(4)
    view.delete(0, 2)
    assert view.get_locus(handle) == 2
    view.destroy_locus(handle)
    with pytest.raises(KeyError):
        view.get_locus(handle)
    with pytest.raises(ValueError):
        view.destroy_locus(CURSOR)


def test_undo_restores_locus_positions(ws):
    view = make(ws, b"abcdef")
    view.set_locus(CURSOR, 4)
    view.delete(0, 2)
    view.text.undo()
    assert view.get_locus(CURSOR) == 4


def test_view_naming(ws):
    first = ws.create_text("/usr/src/main.c")
    second = ws.create_text("/other/main.c")
    assert first.name == "main.c"
    assert second.name == "main.c<2>"
    assert ws.find_view("main.c<2>") is second
    assert ws.find_view("absent") is None


def test_editor_flag_keeps_path(ws):
    view = ws.create_text("/a/b c", TextFlag.EDITOR)
    assert view.name == "/a/b c"


def test_name_drops_odd_characters(ws):
    view = ws.create_text("dir/we ird!.txt")
    assert view.name == "weird.txt"


def test_workspace_defaults_set_flags():
    ws = Workspace(default_tab_stop=4, default_no_tabs=True, utf8=False)
    view = ws.create_text("x")
    assert view.text.tabstop == 4
    assert view.text.flags & TextFlag.NO_TABS
    assert view.text.flags & TextFlag.NO_UTF8


def test_selection_view_and_shifts(ws):
    view = make(ws, b"0123456789")
    sel = ws.selection_view(view, 3, 4)
    assert sel.get(0, 100) == b"3456"
    assert sel.get_locus(CURSOR) == 0
    view.insert(0, b"ab")
    assert sel.start == 5
    assert sel.get(0, 100) == b"3456"
    view.insert(7, b"Z")
    assert sel.get(0, 100) == b"34Z56"
    view.delete(0, 7)
    assert sel.start == 0
    assert sel.get(0, 100) == b"Z56"


def test_selection_view_clamps(ws):
    view = make(ws, b"abc")
    sel = ws.selection_view(view, 10, 10)
    assert sel.size == 0
    assert sel.start == view.size
    assert ws.selection_view(None, 0, 1) is None


def test_close_view_closes_text_when_last(ws):
    view = make(ws)
    other = ws.create_view(view.text)
    ws.close_view(view)
    assert view.text in ws.texts
    ws.close_view(other)
    assert view.text not in ws.texts


def test_close_scratch_removes_file(ws, tmp_path):
    path = tmp_path / "scratch"
    path.write_bytes(b"junk")
    view = ws.create_text(str(path), TextFlag.SCRATCH)
    ws.close_view(view)
    assert not path.exists()


def test_view_clips_get_to_its_range():
    text = Text(content=b"abcdefgh")
    view = View(text, start=2, size=3)
    assert view.get(0, 10) == b"cde"
    assert view.get(3, 1) == b""
    assert view.byte(3) == UNICODE_BAD