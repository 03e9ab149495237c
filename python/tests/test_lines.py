"""Tests for splitting input lines into fragments."""

from reassembly_core.lines import read_fragment_lines, split_fragments


def test_split_fragments():
    assert split_fragments("abc;def;ghi\n") == ["abc", "def", "ghi"]
    assert split_fragments("abc;;def;\r\n") == ["abc", "def"]
    assert split_fragments("") == []
    assert split_fragments("a b|c d", delimiter="|") == ["a b", "c d"]


def test_split_keeps_inner_whitespace():
    assert split_fragments(" a ; b ") == [" a ", " b "]


def test_read_fragment_lines(tmp_path):
    path = tmp_path / "fragments.txt"
    path.write_text("abcde;cdefg\n\nxyz\n", encoding="utf-8")

    assert list(read_fragment_lines(path)) == [["abcde", "cdefg"], [], ["xyz"]]
