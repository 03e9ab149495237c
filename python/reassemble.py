"""Command line entrypoint for greedy fragment reassembly."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from reassembly_core import (
    TieBreak,
    assemble_lines,
    edit_distance,
    normalised_edit_distance,
    overlap_matrix,
    read_fragment_lines,
    summarise,
)

logger = logging.getLogger("reassemble")

METRICS_HEADER = (
    "lines",
    "fragments",
    "mean_edit_distance",
    "mean_normalised_edit_distance",
    "max_edit_distance",
    "exact_lines",
    "assembly_time",
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reassemble each line of overlapping fragments into one string"
    )
    parser.add_argument("input", type=Path, help="Text file with one fragment set per line")
    parser.add_argument(
        "--delimiter",
        default=";",
        help="Separator between fragments on a line",
    )
    parser.add_argument(
        "--tie-break",
        choices=[member.value for member in TieBreak],
        default=TieBreak.FIRST.value,
        help="Which of several equally long overlaps to merge first",
    )
    parser.add_argument(
        "--no-prune",
        action="store_true",
        help="Evaluate every pair even when it cannot beat the current best",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=1,
        help="Worker threads across lines (1 disables threading)",
    )
    parser.add_argument(
        "--output-fasta",
        type=Path,
        help="Optional output FASTA path for the reassembled lines",
    )
    parser.add_argument(
        "--reference",
        type=Path,
        help="Text file with the original lines used to score the reassembly",
    )
    parser.add_argument(
        "--metrics-csv",
        type=Path,
        help="Optional CSV file to append run metrics",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every merge decision",
    )
    args = parser.parse_args(argv)
    if not args.input.is_file():
        parser.error(f"input file {args.input} does not exist")
    if args.threads < 1:
        parser.error("--threads must be at least 1")
    if not args.delimiter:
        parser.error("--delimiter must not be empty")
    return args


def load_reference(reference_path: Path | None) -> List[str] | None:
    if reference_path is None:
        return None
    with reference_path.open("r", encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle]


def write_fasta(lines: Sequence[str], path: Path) -> None:
    records = [
        SeqRecord(Seq(line), id=f"line_{index}", description="")
        for index, line in enumerate(lines, start=1)
    ]
    SeqIO.write(records, path, "fasta")


def record_metrics(
    csv_path: Path,
    *,
    lines: int,
    fragments: int,
    summary: Dict[str, Union[int, float]] | None,
    normalised: Sequence[float],
    assembly_time: float,
) -> None:
    """Append one run to the metrics CSV, writing the header for a new file."""

    if summary is None:
        scores = ("", "", "", "")
    else:
        scores = (
            f"{summary['mean']:.6f}",
            f"{float(np.mean(normalised)) if normalised else 0.0:.6f}",
            str(summary["max"]),
            str(summary["exact"]),
        )
    row = (str(lines), str(fragments), *scores, f"{assembly_time:.6f}")

    is_new = not csv_path.exists() or csv_path.stat().st_size == 0
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with csv_path.open("a", encoding="utf-8") as handle:
        if is_new:
            handle.write(",".join(METRICS_HEADER) + "\n")
        handle.write(",".join(row) + "\n")


def reassemble(args: argparse.Namespace) -> List[str]:
    fragment_lines = list(read_fragment_lines(args.input, args.delimiter))
    reference = load_reference(args.reference)
    if reference is not None and len(reference) != len(fragment_lines):
        raise RuntimeError(
            f"Reference has {len(reference)} lines but input has {len(fragment_lines)}"
        )
    fragment_count = sum(len(fragments) for fragments in fragment_lines)

    if logger.isEnabledFor(logging.DEBUG):
        for number, fragments in enumerate(fragment_lines, start=1):
            logger.debug("line %d overlap lengths:\n%s", number, overlap_matrix(fragments))

    start = time.time()
    assembled = assemble_lines(
        fragment_lines,
        threads=args.threads,
        tie_break=args.tie_break,
        prune=not args.no_prune,
    )
    assembly_time = time.time() - start
    logger.info(
        "Reassembled %d lines from %d fragments in %.3fs",
        len(assembled),
        fragment_count,
        assembly_time,
    )

    for line in assembled:
        print(line)

    if args.output_fasta:
        write_fasta(assembled, args.output_fasta)

    summary = None
    normalised: List[float] = []
    if reference is not None:
        distances = [edit_distance(line, original) for line, original in zip(assembled, reference)]
        normalised = [
            normalised_edit_distance(line, original) for line, original in zip(assembled, reference)
        ]
        for number, distance in enumerate(distances, start=1):
            if distance:
                logger.debug("line %d differs from reference by %d edits", number, distance)
        summary = summarise(distances)
        print(f"Lines scored          : {summary['count']}", file=sys.stderr)
        print(f"Exact reconstructions : {summary['exact']}", file=sys.stderr)
        print(f"Mean edit distance    : {summary['mean']:.3f}", file=sys.stderr)
        print(f"Max edit distance     : {summary['max']}", file=sys.stderr)

    if args.metrics_csv is not None:
        record_metrics(
            args.metrics_csv,
            lines=len(assembled),
            fragments=fragment_count,
            summary=summary,
            normalised=normalised,
            assembly_time=assembly_time,
        )

    return assembled


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    reassemble(args)


if __name__ == "__main__":
    main()
