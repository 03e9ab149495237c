"""Tests for choosing the best merge of a round."""

import pytest

from reassembly_core.overlap import Side
from reassembly_core.selection import TieBreak, beats, best_for_anchor, select_best
from reassembly_core.synthetic import shred


def test_no_candidate_below_two_fragments():
    assert select_best([]) is None
    assert select_best(["abc"]) is None


def test_selects_right_overlap():
    best = select_best(["abcde", "cdefg"])

    assert (best.anchor_index, best.partner_index) == (0, 1)
    assert best.overlap.side is Side.RIGHT
    assert best.length == 3


def test_last_tie_break_prefers_later_anchor():
    best = select_best(["abcde", "cdefg"], tie_break=TieBreak.LAST)

    assert (best.anchor_index, best.partner_index) == (1, 0)
    assert best.overlap.side is Side.LEFT
    assert best.length == 3


def test_global_maximum_beats_first_anchor():
    """The first anchor has a three character overlap, a later one has four."""
    fragments = ["xxxxabc", "abcyyyy", "yyyyzzz"]

    assert best_for_anchor(fragments, 0).length == 3
    best = select_best(fragments)
    assert (best.anchor_index, best.partner_index) == (1, 2)
    assert best.overlap.side is Side.RIGHT
    assert best.length == 4


def test_kind_does_not_matter_only_length():
    """A one character containment loses to a three character extension."""
    best = select_best(["xxabcd", "bcdyyy", "x"])

    assert best.overlap.side is Side.RIGHT
    assert best.length == 3
    assert best.overlap.partner == "bcdyyy"


def test_disjoint_fragments_give_zero_length_candidate():
    first = select_best(["abc", "def"])
    last = select_best(["abc", "def"], tie_break="last")

    assert first.length == 0 and first.overlap.side is Side.RIGHT
    assert (first.anchor, first.overlap.partner) == ("abc", "def")
    assert (last.anchor, last.overlap.partner) == ("def", "abc")


def test_duplicate_values_are_compared():
    best = select_best(["a", "a"])

    assert (best.anchor_index, best.partner_index) == (0, 1)
    assert best.overlap.side is Side.FULL
    assert best.length == 1


@pytest.mark.parametrize("tie_break", list(TieBreak))
@pytest.mark.parametrize("seed", range(5))
def test_pruning_does_not_change_selection(tie_break, seed):
    fragments = shred("the quick brown fox jumps over the lazy dog", seed=seed)
    fragments.sort(key=len, reverse=True)

    pruned = select_best(fragments, tie_break=tie_break, prune=True)
    exhaustive = select_best(fragments, tie_break=tie_break, prune=False)
    assert pruned == exhaustive


def test_absent_incumbent_always_loses():
    assert beats(0, None, TieBreak.FIRST)
    assert beats(0, None, TieBreak.LAST)


def test_tie_break_parse():
    assert TieBreak.parse("LAST") is TieBreak.LAST
    assert TieBreak.parse(TieBreak.FIRST) is TieBreak.FIRST
    with pytest.raises(ValueError):
        TieBreak.parse("middle")


if __name__ == "__main__":
    pytest.main([__file__])
