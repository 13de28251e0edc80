"""Guard patrol: walked cells and loop-inducing obstructions."""

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from aoc24.grid import Direction, Grid, Index, copy_default, get_at, iter_pos
from aoc24.parser import map_value, take_any, take_eol, take_first, take_many1, take_or
from aoc24.util import read_file_lines


class Loc(Enum):
    SPACE = "."
    HASH = "#"


@dataclass
class Lab:
    """The lab floor and the guard's starting position."""

    grid: Grid[Loc]
    start: Index


def _line_parser():
    space = map_value(take_any(".^<>v"), lambda _: Loc.SPACE)
    hash_ = map_value(take_any("#"), lambda _: Loc.HASH)
    return take_first(take_many1(take_or(space, hash_)), take_eol())


def parse_input(lines: Iterable[str]) -> Lab:
    """Parse the map; raises ValueError on a bad line or a missing guard."""
    parse_line = _line_parser()
    grid: Grid[Loc] = []
    start = None
    for row, line in enumerate(lines):
        result = parse_line(line)
        if result is None:
            raise ValueError("could not parse line")
        col = line.find("^")
        if col != -1:
            start = (row, col)
        grid.append(result[0])
    if start is None:
        raise ValueError("could not find start")
    return Lab(grid, start)


def fill_visited(lab: Lab) -> Tuple[List[List[int]], bool]:
    """Walk the guard; return direction bits per cell and whether it loops."""
    visited: List[List[int]] = copy_default(lab.grid, 0)
    pos = lab.start
    state = Direction.UP
    while (loc := get_at(lab.grid, pos)) is not None:
        row, col = pos
        if visited[row][col] & state:
            return visited, True
        visited[row][col] |= state
        if loc is Loc.SPACE:
            pos = state.apply(pos)
        else:
            pos = state.apply_inverse(pos)
            state = state.rotate_90_right()
    return visited, False


def _visited_spaces(lab: Lab) -> List[Index]:
    visited, _ = fill_visited(lab)
    return [
        pos
        for pos, loc in iter_pos(lab.grid)
        if loc is Loc.SPACE and visited[pos[0]][pos[1]] != 0
    ]


def count_visited(lab: Lab) -> int:
    """Number of open cells the guard walks over."""
    return len(_visited_spaces(lab))


def count_loop_obstructions(lab: Lab) -> int:
    """Number of walked open cells where a new obstruction makes the guard loop."""
    trial = Lab([list(row) for row in lab.grid], lab.start)
    cycles = 0
    for row, col in _visited_spaces(lab):
        previous = trial.grid[row][col]
        trial.grid[row][col] = Loc.HASH
        _, cycle = fill_visited(trial)
        cycles += cycle
        trial.grid[row][col] = previous
    return cycles


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day06")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 6 part 1"), ("part2", "Day 6 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        lab = parse_input(read_file_lines(args.file))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(count_visited(lab))
    else:
        print(count_loop_obstructions(lab))
    return 0


if __name__ == "__main__":
    sys.exit(main())