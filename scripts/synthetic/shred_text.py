#!/usr/bin/env python3
"""Turn each line of a text file into a line of overlapping fragments.

Usage:
    python shred_text.py original.txt fragments.txt [--seed 42]

The output can be fed straight to ``reassemble`` with ``original.txt`` as the
``--reference`` file.
"""

import argparse
from pathlib import Path

from reassembly_core import shred


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cut text lines into overlapping fragments")
    parser.add_argument("text", type=Path, help="Input text, one original per line")
    parser.add_argument("output", type=Path, help="Where to write the fragment lines")
    parser.add_argument("--delimiter", default=";")
    parser.add_argument("--min-len", type=int, default=4)
    parser.add_argument("--max-len", type=int, default=8)
    parser.add_argument("--min-overlap", type=int, default=1)
    parser.add_argument("--max-overlap", type=int, default=3)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main() -> None:
    args = build_parser().parse_args()
    lines = args.text.read_text(encoding="utf-8").splitlines()

    with open(args.output, "w", encoding="utf-8") as handle:
        for number, line in enumerate(lines):
            fragments = shred(
                line,
                min_len=args.min_len,
                max_len=args.max_len,
                min_overlap=args.min_overlap,
                max_overlap=args.max_overlap,
                seed=None if args.seed is None else args.seed + number,
            )
            handle.write(args.delimiter.join(fragments) + "\n")

    print(f"Wrote {len(lines)} fragment lines to {args.output}")


if __name__ == "__main__":
    main()
