"""Resonant collinearity: antinodes of same-frequency antennas."""

import argparse
import sys
from collections.abc import Iterable
from typing import Dict, Optional, Set

from aoc24.grid import (
    Grid,
    Index,
    copy_default,
    iter_pos,
    reduce_vec,
    scale,
    set_at,
    vec_add,
    vec_sub,
)
from aoc24.parser import (
    map_value,
    take_any,
    take_any_func,
    take_eol,
    take_first,
    take_many1,
    take_or,
)
from aoc24.util import read_file_lines

AntennaMap = Grid[Optional[str]]


def _line_parser():
    space = map_value(take_any("."), lambda _: None)
    antenna = take_any_func(lambda char: char.isascii() and char.isalnum())
    return take_first(take_many1(take_or(space, antenna)), take_eol())


def parse_map(lines: Iterable[str]) -> AntennaMap:
    """Empty cells become None, antennas their frequency character."""
    parse_line = _line_parser()
    grid: AntennaMap = []
    for line in lines:
        result = parse_line(line)
        if result is None:
            raise ValueError("could not parse line")
        grid.append(result[0])
    return grid


def antenna_positions(grid: AntennaMap) -> Dict[str, Set[Index]]:
    """Positions of the antennas grouped by frequency."""
    result: Dict[str, Set[Index]] = {}
    for pos, loc in iter_pos(grid):
        if loc is not None:
            result.setdefault(loc, set()).add(pos)
    return result


def _count(antinodes: Grid[bool]) -> int:
    return sum(1 for row in antinodes for flag in row if flag)


def count_antinodes(grid: AntennaMap) -> int:
    """Cells twice as far from one antenna as from another of its frequency."""
    antinodes = copy_default(grid, False)
    for points in antenna_positions(grid).values():
        for p1 in points:
            for p2 in points:
                if p1 != p2:
                    set_at(antinodes, vec_add(p1, scale(vec_sub(p2, p1), 2)), True)
    return _count(antinodes)


def count_harmonic_antinodes(grid: AntennaMap) -> int:
    """Cells on any grid line through two antennas of one frequency."""
    antinodes = copy_default(grid, False)
    for points in antenna_positions(grid).values():
        for p1 in points:
            for p2 in points:
                if p1 == p2:
                    continue
                delta = reduce_vec(vec_sub(p2, p1))
                cur = p1
                while set_at(antinodes, cur, True):
                    cur = vec_add(cur, delta)
    return _count(antinodes)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day08")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 8 part 1"), ("part2", "Day 8 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        grid = parse_map(read_file_lines(args.file))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(count_antinodes(grid))
    else:
        print(count_harmonic_antinodes(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())