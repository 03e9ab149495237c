"""Overlap detection between pairs of fragments.

Three relationships are measured between an *anchor* and a *candidate*:

``FULL``
    the candidate is a contiguous substring of the anchor.
``LEFT``
    a suffix of the candidate equals a prefix of the anchor, so the candidate
    can be prepended to the anchor.
``RIGHT``
    a suffix of the anchor equals a prefix of the candidate, so the candidate
    can be appended to the anchor.

Containment is checked first and excludes the other two: a pair where either
string contains the other never gets a LEFT or RIGHT measurement.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Sequence

import numpy as np


class Side(Enum):
    FULL = "full"
    LEFT = "left"
    RIGHT = "right"


class Overlap(NamedTuple):
    """Best relationship found between an anchor and its ``partner``."""

    length: int
    side: Side
    partner: str


def is_full_overlap(anchor: str, candidate: str) -> bool:
    return candidate in anchor


def left_overlap(anchor: str, candidate: str) -> int:
    """Return the longest ``k`` where the last ``k`` characters of the
    candidate equal the first ``k`` characters of the anchor."""

    for k in range(min(len(anchor), len(candidate)), 0, -1):
        if candidate.endswith(anchor[:k]):
            return k
    return 0


def right_overlap(anchor: str, candidate: str) -> int:
    """Return the longest ``k`` where the last ``k`` characters of the
    anchor equal the first ``k`` characters of the candidate."""

    for k in range(min(len(anchor), len(candidate)), 0, -1):
        if anchor.endswith(candidate[:k]):
            return k
    return 0


def evaluate(anchor: str, candidate: str) -> Optional[Overlap]:
    """Measure the single best overlap of ``candidate`` relative to ``anchor``.

    Returns ``None`` when the candidate contains the anchor but not the other
    way round; the reverse pair, with the container as anchor, reports that
    containment as a FULL overlap. When neither string contains the other the
    longer of the RIGHT and LEFT extensions is returned, RIGHT on a tie, so an
    unrelated pair comes back as a zero-length RIGHT overlap (concatenation).
    """

    if is_full_overlap(anchor, candidate):
        return Overlap(len(candidate), Side.FULL, candidate)
    if anchor in candidate:
        return None

    right = right_overlap(anchor, candidate)
    left = left_overlap(anchor, candidate)
    if left > right:
        return Overlap(left, Side.LEFT, candidate)
    return Overlap(right, Side.RIGHT, candidate)


def overlap_matrix(fragments: Sequence[str]) -> np.ndarray:
    """Tabulate ``evaluate`` lengths for every ordered pair of fragments.

    Row ``i`` holds the overlaps measured with ``fragments[i]`` as anchor.
    The diagonal and pairs without a measurement are zero.
    """

    size = len(fragments)
    matrix = np.zeros((size, size), dtype=int)
    for i, anchor in enumerate(fragments):
        for j, candidate in enumerate(fragments):
            if i == j:
                continue
            overlap = evaluate(anchor, candidate)
            if overlap is not None:
                matrix[i, j] = overlap.length
    return matrix
