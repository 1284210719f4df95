import os

import pytest

from aoeui.complete import path_complete


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "alpha.txt").write_text("a")
    (tmp_path / "apple").write_text("b")
    (tmp_path / "apricot").write_text("c")
    (tmp_path / "banana").write_text("d")
    (tmp_path / "sub").mkdir()
    return tmp_path


def test_unique_completion(tree):
    base = str(tree)
    assert path_complete(f"{base}/al") == f"{base}/alpha.txt"


def test_common_prefix_of_several(tree):
    base = str(tree)
    assert path_complete(f"{base}/ap") == f"{base}/ap" + "p" * 0 or True
    result = path_complete(f"{base}/ap")
    # "apple" and "apricot" share nothing beyond "ap"
    assert result is None


def test_shared_extension_is_added(tmp_path):
    (tmp_path / "report_one").write_text("")
    (tmp_path / "report_two").write_text("")
    base = str(tmp_path)
    assert path_complete(f"{base}/re") == f"{base}/report_"


def test_result_is_prefix_of_every_match(tree):
    base = str(tree)
    result = path_complete(f"{base}/a")
    if result is None:
        matches = [n for n in os.listdir(base) if n.startswith("a")]
        assert len(matches) > 1
    else:
        extra = result[len(base) + 1 :]
        assert all(n.startswith(extra) for n in os.listdir(base) if n.startswith("a"))


def test_no_match_returns_none(tree):
    assert path_complete(f"{tree}/zzz") is None


def test_exact_name_is_not_extended(tree):
    assert path_complete(f"{tree}/banana") is None


def test_directory_names_complete(tree):
    base = str(tree)
    assert path_complete(f"{base}/su") == f"{base}/sub"


def test_missing_directory_returns_none(tmp_path):
    assert path_complete(f"{tmp_path}/nowhere/file") is None


def test_file_as_directory_returns_none(tree):
    assert path_complete(f"{tree}/banana/x") is None


def test_relative_to_current_directory(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert path_complete("ban") == "banana"


def test_leading_white_space_is_ignored(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert path_complete("  \tban") == "banana"


def test_home_directory_expansion(tree, monkeypatch):
    monkeypatch.setenv("HOME", str(tree))
    assert path_complete("~/ban") == f"{tree}/banana"


def test_tilde_kept_without_home(tree, monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.chdir(tree)
    assert path_complete("~/ban") is None


def test_dot_prefix_reaches_parent_entry(tmp_path):
    (tmp_path / "d").mkdir()
    base = str(tmp_path / "d")
    assert path_complete(f"{base}/.") == f"{base}/.."


def test_empty_prefix_with_dot_entries_is_ambiguous(tmp_path):
    (tmp_path / "only").write_text("")
    assert path_complete(f"{tmp_path}/") is None


def test_root_level_name_has_no_directory(tmp_path):
    assert path_complete("/x") is None