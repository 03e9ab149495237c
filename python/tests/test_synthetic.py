"""Tests for synthetic fragment generation."""

import pytest

from reassembly_core.synthetic import shred

TEXT = "Shall I compare thee to a summer's day?"


@pytest.mark.parametrize("seed", range(5))
def test_fragments_cover_text_in_order(seed):
    fragments = shred(TEXT, min_len=6, max_len=10, min_overlap=2, max_overlap=4, seed=seed, shuffle=False)

    assert TEXT.startswith(fragments[0])
    assert TEXT.endswith(fragments[-1])
    position = 0
    for fragment in fragments:
        found = TEXT.find(fragment, max(position - 4, 0))
        assert found != -1
        position = found + len(fragment)
    assert position == len(TEXT)


def test_shred_is_reproducible():
    assert shred(TEXT, seed=7) == shred(TEXT, seed=7)
    assert sorted(shred(TEXT, seed=7)) == sorted(shred(TEXT, seed=7, shuffle=False))


def test_fragment_lengths_are_bounded():
    fragments = shred(TEXT, min_len=5, max_len=9, seed=1, shuffle=False)

    assert all(len(fragment) <= 9 for fragment in fragments)
    assert all(len(fragment) >= 5 for fragment in fragments[:-1])


def test_empty_text():
    assert shred("") == []


def test_overlap_must_be_shorter_than_fragments():
    with pytest.raises(ValueError):
        shred(TEXT, min_len=3, max_len=6, min_overlap=1, max_overlap=3)
