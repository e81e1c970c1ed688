"""Maximum top-to-bottom path sums through number triangles."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path


def _check_shape(rows: Sequence[Sequence[int]]) -> None:
    for index, row in enumerate(rows):
        if len(row) != index + 1:
            raise ValueError(
                f"triangle row {index + 1} has {len(row)} values, expected {index + 1}"
            )


def parse_triangle(text: str) -> list[list[int]]:
    """Parse a triangle given as one whitespace-separated row per non-blank line."""
    try:
        rows = [[int(token) for token in line.split()] for line in text.splitlines() if line.strip()]
    except ValueError as error:
        raise ValueError(f"triangle holds a value that is not an integer: {error}") from None
    _check_shape(rows)
    return rows


def max_path_sum(rows: Sequence[Sequence[int]]) -> int:
    """Return the greatest sum along a path from the apex to the base.

    Each step moves to one of the two adjacent values in the row below.
    An empty triangle has a path sum of 0.
    """
    _check_shape(rows)
    if not rows:
        return 0
    best = list(rows[-1])
    for row in reversed(rows[:-1]):
        best = [value + max(left, right) for value, left, right in zip(row, best, best[1:])]
    return best[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the maximum path sum of a triangle read from a file or standard input."""
    parser = argparse.ArgumentParser(
        prog="solvebook-triangle",
        description="Find the maximum top-to-bottom path sum of a number triangle.",
    )
    parser.add_argument("path", nargs="?", help="triangle file; standard input when omitted")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text() if args.path else sys.stdin.read()
    try:
        rows = parse_triangle(text)
    except ValueError as error:
        parser.error(str(error))
    print(f"total sum={max_path_sum(rows)}")
    return 0