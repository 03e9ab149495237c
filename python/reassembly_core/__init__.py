"""Core utilities for greedy fragment reassembly."""

from .overlap import (
    Overlap,
    Side,
    evaluate,
    is_full_overlap,
    left_overlap,
    overlap_matrix,
    right_overlap,
)
from .selection import (
    Candidate,
    TieBreak,
    best_for_anchor,
    select_best,
)
from .merging import merge
from .assembly import (
    MergeRound,
    assemble,
    assemble_lines,
    assembly_rounds,
)
from .lines import (
    read_fragment_lines,
    split_fragments,
)
from .evaluation import (
    edit_distance,
    normalised_edit_distance,
    summarise,
)
from .synthetic import shred

__all__ = [
    "Overlap",
    "Side",
    "evaluate",
    "is_full_overlap",
    "left_overlap",
    "overlap_matrix",
    "right_overlap",
    "Candidate",
    "TieBreak",
    "best_for_anchor",
    "select_best",
    "merge",
    "MergeRound",
    "assemble",
    "assemble_lines",
    "assembly_rounds",
    "read_fragment_lines",
    "split_fragments",
    "edit_distance",
    "normalised_edit_distance",
    "summarise",
    "shred",
]
