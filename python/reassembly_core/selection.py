"""Pick the single globally best merge in a set of fragments."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Sequence, Union

from .overlap import Overlap, evaluate


class TieBreak(Enum):
    """Which of several equally long overlaps wins a round.

    Candidates are discovered anchor by anchor in working-set order, and for
    each anchor partner by partner in the same order. ``FIRST`` keeps the
    earliest discovered candidate of maximal length, ``LAST`` the latest.
    """

    FIRST = "first"
    LAST = "last"

    @classmethod
    def parse(cls, value: Union["TieBreak", str]) -> "TieBreak":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown tie-break {value!r}; expected one of: {choices}") from None


class Candidate(NamedTuple):
    anchor_index: int
    partner_index: int
    anchor: str
    overlap: Overlap

    @property
    def length(self) -> int:
        return self.overlap.length


def beats(length: int, incumbent: Optional[Candidate], tie_break: TieBreak) -> bool:
    """Return True when an overlap of ``length`` replaces ``incumbent``.

    An absent incumbent loses to everything, zero-length overlaps included.
    """

    if incumbent is None:
        return True
    if tie_break is TieBreak.FIRST:
        return length > incumbent.length
    return length >= incumbent.length


def best_for_anchor(
    fragments: Sequence[str],
    anchor_index: int,
    *,
    tie_break: TieBreak = TieBreak.FIRST,
    bound: Optional[Candidate] = None,
) -> Optional[Candidate]:
    """Best overlap of ``fragments[anchor_index]`` against every other position.

    When ``bound`` is given, partners whose overlap could not replace it are
    skipped: no overlap is longer than the shorter of the two strings.
    """

    anchor = fragments[anchor_index]
    best: Optional[Candidate] = None
    for partner_index, candidate in enumerate(fragments):
        if partner_index == anchor_index:
            continue
        if bound is not None and not beats(min(len(anchor), len(candidate)), bound, tie_break):
            continue
        overlap = evaluate(anchor, candidate)
        if overlap is None:
            continue
        if beats(overlap.length, best, tie_break):
            best = Candidate(anchor_index, partner_index, anchor, overlap)
    return best


def select_best(
    fragments: Sequence[str],
    *,
    tie_break: Union[TieBreak, str] = TieBreak.FIRST,
    prune: bool = True,
) -> Optional[Candidate]:
    """Return the globally best (anchor, overlap) pair, or None for fewer than
    two fragments.

    Every anchor is scanned before a winner is chosen; overlaps compete on
    length alone, whatever their side.
    """

    if len(fragments) < 2:
        return None
    tie_break = TieBreak.parse(tie_break)

    best: Optional[Candidate] = None
    for anchor_index in range(len(fragments)):
        local = best_for_anchor(
            fragments,
            anchor_index,
            tie_break=tie_break,
            bound=best if prune else None,
        )
        if local is not None and beats(local.length, best, tie_break):
            best = local
    return best
