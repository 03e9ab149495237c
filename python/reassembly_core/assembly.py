"""Greedy reassembly of one line of fragments.

Each round the globally best overlapping pair is merged, shrinking the working
set by one fragment, until a single fragment is left.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Iterable, Iterator, List, NamedTuple, Sequence, Tuple, Union

from .merging import merge
from .overlap import Overlap
from .selection import TieBreak, select_best

logger = logging.getLogger(__name__)


class MergeRound(NamedTuple):
    round: int
    anchor: str
    partner: str
    overlap: Overlap
    merged: str
    remaining: int


def initial_working_set(fragments: Iterable[str], *, presort: bool = True) -> List[str]:
    """Copy the fragments into a working list, longest first when ``presort``.

    The sort is stable, so equally long fragments keep their input order.
    """

    working = list(fragments)
    if presort:
        working.sort(key=len, reverse=True)
    return working


def assembly_rounds(
    fragments: Iterable[str],
    *,
    presort: bool = True,
    tie_break: Union[TieBreak, str] = TieBreak.FIRST,
    prune: bool = True,
) -> Iterator[MergeRound]:
    """Yield one :class:`MergeRound` per merge until one fragment remains.

    The pair is removed from the working set and the merged fragment is
    inserted at the front, so ``n`` fragments take at most ``n - 1`` rounds.
    """

    tie_break = TieBreak.parse(tie_break)
    working = initial_working_set(fragments, presort=presort)

    round_number = 0
    while len(working) > 1:
        candidate = select_best(working, tie_break=tie_break, prune=prune)
        merged = merge(candidate.anchor, candidate.overlap)

        for index in sorted((candidate.anchor_index, candidate.partner_index), reverse=True):
            del working[index]
        working.insert(0, merged)

        round_number += 1
        logger.debug(
            "round %d: %s overlap of %d between %r and %r, %d fragments left",
            round_number,
            candidate.overlap.side.value,
            candidate.length,
            candidate.anchor,
            candidate.overlap.partner,
            len(working),
        )
        yield MergeRound(
            round_number,
            candidate.anchor,
            candidate.overlap.partner,
            candidate.overlap,
            merged,
            len(working),
        )


def assemble(
    fragments: Iterable[str],
    *,
    presort: bool = True,
    tie_break: Union[TieBreak, str] = TieBreak.FIRST,
    prune: bool = True,
    do_time: bool = False,
) -> Union[str, Tuple[str, float]]:
    """Reassemble one line of fragments into a single string.

    No fragments give the empty string and a single fragment is returned
    unchanged.
    """

    if do_time:
        start = time.time()

    fragments = list(fragments)
    result = fragments[0] if len(fragments) == 1 else ""
    for step in assembly_rounds(fragments, presort=presort, tie_break=tie_break, prune=prune):
        result = step.merged

    if do_time:
        return result, time.time() - start
    return result


def assemble_lines(
    lines: Iterable[Sequence[str]],
    *,
    threads: int = 1,
    presort: bool = True,
    tie_break: Union[TieBreak, str] = TieBreak.FIRST,
    prune: bool = True,
) -> List[str]:
    """Reassemble each fragment list independently, preserving input order.

    With ``threads`` above one the lines are spread over a thread pool.
    """

    worker = partial(
        assemble,
        presort=presort,
        tie_break=TieBreak.parse(tie_break),
        prune=prune,
    )
    if threads > 1:
        with ThreadPoolExecutor(max_workers=threads) as executor:
            return list(executor.map(worker, lines))
    return [worker(fragments) for fragments in lines]
