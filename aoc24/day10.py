"""Hoof It: scoring and rating hiking trails on a topographic map."""

import argparse
import sys
from collections.abc import Iterable
from typing import Dict, FrozenSet, List

from aoc24.grid import Direction, Grid, Index, get_at, iter_pos
from aoc24.util import read_file_lines

_PEAK = 9


def parse_topomap(lines: Iterable[str]) -> Grid[int]:
    """One row of height digits per line; raises ValueError on anything else."""
    grid: Grid[int] = []
    for line in lines:
        row: List[int] = []
        for char in line:
            if char not in "0123456789":
                raise ValueError("not a digit")
            row.append(int(char))
        grid.append(row)
    return grid


def _uphill(grid: Grid[int], pos: Index) -> List[Index]:
    value = grid[pos[0]][pos[1]]
    steps = (direction.apply(pos) for direction in Direction.all_directions())
    return [step for step in steps if get_at(grid, step) == value + 1]


def trailhead_scores(grid: Grid[int]) -> Dict[Index, int]:
    """For every height-0 cell, the number of distinct peaks it can reach."""
    cache: Dict[Index, FrozenSet[Index]] = {}

    def peaks(pos: Index) -> FrozenSet[Index]:
        found = cache.get(pos)
        if found is not None:
            return found
        if grid[pos[0]][pos[1]] == _PEAK:
            found = frozenset({pos})
        else:
            found = frozenset().union(*(peaks(step) for step in _uphill(grid, pos)))
        cache[pos] = found
        return found

    return {pos: len(peaks(pos)) for pos, value in iter_pos(grid) if value == 0}


def trailhead_ratings(grid: Grid[int]) -> Dict[Index, int]:
    """For every height-0 cell, the number of distinct trails to any peak."""
    cache: Dict[Index, int] = {}

    def trails(pos: Index) -> int:
        found = cache.get(pos)
        if found is not None:
            return found
        if grid[pos[0]][pos[1]] == _PEAK:
            found = 1
        else:
            found = sum(trails(step) for step in _uphill(grid, pos))
        cache[pos] = found
        return found

    return {pos: trails(pos) for pos, value in iter_pos(grid) if value == 0}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day10")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 10 part 1"), ("part2", "Day 10 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        grid = parse_topomap(read_file_lines(args.file))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    scores = trailhead_scores(grid) if args.part == "part1" else trailhead_ratings(grid)
    for (row, col), score in scores.items():
        print(f"row {row}, col {col}, score {score}")
    print(sum(scores.values()))
    return 0


if __name__ == "__main__":
    sys.exit(main())