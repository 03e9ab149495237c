"""Cut text into overlapping fragments for testing the assembler."""

from __future__ import annotations

import random
from typing import List, Optional


def shred(
    text: str,
    *,
    min_len: int = 4,
    max_len: int = 8,
    min_overlap: int = 1,
    max_overlap: int = 3,
    seed: Optional[int] = None,
    shuffle: bool = True,
) -> List[str]:
    """Chop ``text`` into consecutive fragments of bounded random length.

    Neighbouring fragments share between ``min_overlap`` and ``max_overlap``
    characters. The final fragment may be shorter than ``min_len`` when the
    text runs out. Fragments come back shuffled unless ``shuffle`` is False.
    """

    if not 0 <= min_overlap <= max_overlap < min_len <= max_len:
        raise ValueError(
            "expected 0 <= min_overlap <= max_overlap < min_len <= max_len, got "
            f"{min_overlap}, {max_overlap}, {min_len}, {max_len}"
        )
    if not text:
        return []

    rng = random.Random(seed)
    fragments: List[str] = []
    start = 0
    while True:
        end = min(len(text), start + rng.randint(min_len, max_len))
        fragments.append(text[start:end])
        if end == len(text):
            break
        start = end - rng.randint(min_overlap, max_overlap)

    if shuffle:
        rng.shuffle(fragments)
    return fragments
