"""Reading fragment lines from text files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Union

DEFAULT_DELIMITER = ";"


def split_fragments(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Split one input line into its fragments, dropping empty pieces."""

    line = line.rstrip("\r\n")
    return [piece for piece in line.split(delimiter) if piece]


def read_fragment_lines(
    path: Union[str, Path],
    delimiter: str = DEFAULT_DELIMITER,
) -> Iterator[List[str]]:
    with open(path, "r", encoding="utf-8") as handle:
        for line in handle:
            yield split_fragments(line, delimiter)
