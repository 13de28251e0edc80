"""Ceres word search: finding XMAS and crossed MAS."""

import argparse
import io
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from aoc24.grid import Grid, Index, get_at, iter_pos
from aoc24.util import read_lines

_ALL_DELTAS: Tuple[Index, ...] = (
    (-1, 0),
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)
_DIAGONALS: Tuple[Index, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def parse_wordsearch(text: str) -> Grid[str]:
    """One row of letters per line."""
    return [list(line) for line in read_lines(io.StringIO(text, newline="\n"))]


def _spells(grid: Grid[str], pos: Index, delta: Index, word: Sequence[str]) -> bool:
    row, col = pos
    d_row, d_col = delta
    return all(
        get_at(grid, (row + i * d_row, col + i * d_col)) == char
        for i, char in enumerate(word)
    )


def count_xmas(grid: Grid[str]) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    return sum(
        sum(1 for delta in _ALL_DELTAS if _spells(grid, pos, delta, "XMAS"))
        for pos, char in iter_pos(grid)
        if char == "X"
    )


def _is_x_mas(grid: Grid[str], pos: Index) -> bool:
    row, col = pos
    hits = sum(
        1
        for d_row, d_col in _DIAGONALS
        if _spells(grid, (row - d_row, col - d_col), (d_row, d_col), "MAS")
    )
    return hits == 2


def count_x_mas(grid: Grid[str]) -> int:
    """Number of A cells crossed by two diagonal MAS words."""
    return sum(1 for pos, char in iter_pos(grid) if char == "A" and _is_x_mas(grid, pos))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day04")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 4 part 1"), ("part2", "Day 4 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        grid = parse_wordsearch(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(count_xmas(grid))
    else:
        print(count_x_mas(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())