"""Scoring reassembled lines against the text they were cut from."""

from __future__ import annotations

from typing import Dict, Iterable, Union

import numpy as np
from fastDamerauLevenshtein import damerauLevenshtein as damerau_levenshtein_distance


def edit_distance(assembled: str, reference: str) -> int:
    """Damerau-Levenshtein distance between an assembly and its reference."""

    if not assembled and not reference:
        return 0
    return int(damerau_levenshtein_distance(assembled, reference, similarity=False))


def normalised_edit_distance(assembled: str, reference: str) -> float:
    """Edit distance as a ratio of the reference length.

    Any non-empty assembly of an empty reference scores 1.0.
    """

    if not reference:
        return 1.0 if assembled else 0.0
    return edit_distance(assembled, reference) / len(reference)


def summarise(distances: Iterable[int]) -> Dict[str, Union[int, float]]:
    """Collapse per-line edit distances into count, mean, max and exact matches."""

    values = np.asarray(list(distances), dtype=int)
    if values.size == 0:
        return {"count": 0, "mean": 0.0, "max": 0, "exact": 0}
    return {
        "count": int(values.size),
        "mean": float(values.mean()),
        "max": int(values.max()),
        "exact": int(np.count_nonzero(values == 0)),
    }
