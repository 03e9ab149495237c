"""Fold an anchor and its best overlap partner into one fragment."""

from __future__ import annotations

from .overlap import Overlap, Side


def merge(anchor: str, overlap: Overlap) -> str:
    """Return the fragment produced by merging ``overlap.partner`` into ``anchor``.

    Raises ValueError when the overlap does not actually hold between the two
    strings.
    """

    length, side, partner = overlap
    if length < 0 or length > min(len(anchor), len(partner)):
        raise ValueError(
            f"Overlap length {length} out of range for fragments of length "
            f"{len(anchor)} and {len(partner)}"
        )

    if side is Side.FULL:
        if partner not in anchor:
            raise ValueError(f"{partner!r} is not contained in {anchor!r}")
        return anchor

    if side is Side.LEFT:
        cut = len(partner) - length
        if partner[cut:] != anchor[:length]:
            raise ValueError(f"Suffix of {partner!r} does not match prefix of {anchor!r} over {length}")
        return partner[:cut] + anchor

    if side is Side.RIGHT:
        if anchor[len(anchor) - length:] != partner[:length]:
            raise ValueError(f"Suffix of {anchor!r} does not match prefix of {partner!r} over {length}")
        return anchor + partner[length:]

    raise ValueError(f"Unknown overlap side {side!r}")
