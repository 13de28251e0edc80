"""Warehouse woes: a robot pushing boxes around a warehouse."""

import argparse
import heapq
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set, Tuple

from aoc24.grid import Direction, Grid, Index, get_at, iter_pos, set_at
from aoc24.parser import (
    Parser,
    map_value,
    take_any,
    take_eol,
    take_many1,
    take_newline,
    take_separator,
)


class Entry(Enum):
    """A cell of the narrow warehouse."""

    EMPTY = "."
    BOX = "O"
    WALL = "#"
    ROBOT = "@"


class Entry2(Enum):
    """A cell of the widened warehouse."""

    EMPTY = "."
    LBOX = "["
    RBOX = "]"
    WALL = "#"
    ROBOT = "@"


_MOVES = {
    "<": Direction.LEFT,
    ">": Direction.RIGHT,
    "^": Direction.UP,
    "v": Direction.DOWN,
}

_WIDE = {
    Entry.EMPTY: (Entry2.EMPTY, Entry2.EMPTY),
    Entry.BOX: (Entry2.LBOX, Entry2.RBOX),
    Entry.WALL: (Entry2.WALL, Entry2.WALL),
    Entry.ROBOT: (Entry2.ROBOT, Entry2.EMPTY),
}


@dataclass
class ParsedResult:
    """The warehouse map and the robot's moves in order."""

    entries: Grid[Entry] = field(default_factory=list)
    moves: List[Direction] = field(default_factory=list)


def take_result() -> Parser:
    """Parse the map, a blank line and the move lines, filling the whole input."""
    rows = take_separator(take_many1(map_value(take_any(".#@O"), Entry)), take_newline())
    newline = take_newline()
    move_lines = take_separator(
        take_many1(map_value(take_any("<>^v"), _MOVES.__getitem__)), take_newline()
    )
    eol = take_eol()

    def parse(text: str):
        entries, rest = rows(text)
        result = newline(rest)
        if result is None:
            return None
        lines, rest = move_lines(result[1])
        result = eol(rest)
        if result is None:
            return None
        moves = [move for line in lines for move in line]
        return ParsedResult(entries, moves), result[1]

    return parse


def parse_warehouse(text: str) -> ParsedResult:
    """Parse the puzzle input; raises ValueError when it does not fit."""
    result = take_result()(text)
    if result is None:
        raise ValueError("could not parse")
    parsed, rest = result
    if rest:
        raise ValueError("could not parse")
    return parsed


def move_robot(entries: Grid[Entry], pos: Index, direction: Direction) -> Optional[Index]:
    """Push whatever stands at ``pos`` one step; return its new position or None."""
    chain: List[Tuple[Index, Entry]] = []
    cur = pos
    entry = get_at(entries, cur)
    while entry in (Entry.BOX, Entry.ROBOT):
        chain.append((cur, entry))
        cur = direction.apply(cur)
        entry = get_at(entries, cur)
    if entry is not Entry.EMPTY:
        return None
    for cell, value in reversed(chain):
        set_at(entries, direction.apply(cell), value)
        set_at(entries, cell, Entry.EMPTY)
    return direction.apply(pos)


def move_wide(entries: Grid[Entry2], pos: Index, direction: Direction) -> Optional[Index]:
    """Push in the widened warehouse, moving both halves of every box together."""
    visited: Set[Index] = set()
    to_move: List[Tuple[Index, Entry2]] = []
    queued: Set[Index] = {pos}
    heap: List[Index] = [pos]

    def push(target: Index) -> None:
        if target not in queued:
            queued.add(target)
            heapq.heappush(heap, target)

    while heap:
        cur = heapq.heappop(heap)
        queued.discard(cur)
        entry = get_at(entries, cur)
        if entry is None:
            return None
        if cur in visited:
            continue
        visited.add(cur)
        if entry is Entry2.EMPTY:
            continue
        if entry is Entry2.WALL:
            return None
        if not direction.is_horizontal():
            if entry is Entry2.LBOX:
                partner = Direction.RIGHT.apply(cur)
            elif entry is Entry2.RBOX:
                partner = Direction.LEFT.apply(cur)
            else:
                partner = None
            if partner is not None and partner not in visited and partner not in queued:
                push(partner)
        to_move.append((cur, entry))
        push(direction.apply(cur))

    written: Set[Index] = set()
    for cur, entry in to_move:
        target = direction.apply(cur)
        if cur not in written:
            set_at(entries, cur, Entry2.EMPTY)
        set_at(entries, target, entry)
        written.add(target)

    return direction.apply(pos)


def widen(entries: Grid[Entry]) -> Grid[Entry2]:
    """Double every cell horizontally."""
    return [[half for entry in row for half in _WIDE[entry]] for row in entries]


def render_wide(entries: Grid[Entry2]) -> str:
    """The widened warehouse as text, one newline-terminated line per row."""
    return "".join("".join(entry.value for entry in row) + "\n" for row in entries)


def _find_robot(entries: Grid, robot) -> Index:
    for pos, entry in iter_pos(entries):
        if entry is robot:
            return pos
    raise ValueError("could not find robot")


def run_narrow(parsed: ParsedResult) -> int:
    """GPS sum of the boxes after the robot made all its moves."""
    entries = [list(row) for row in parsed.entries]
    cur = _find_robot(entries, Entry.ROBOT)
    for direction in parsed.moves:
        moved = move_robot(entries, cur, direction)
        if moved is not None:
            cur = moved
    return sum(100 * row + col for (row, col), entry in iter_pos(entries) if entry is Entry.BOX)


def run_wide(parsed: ParsedResult, debug: bool = False) -> int:
    """GPS sum of the wide boxes after all moves; prints each state when debugging."""
    entries = widen(parsed.entries)
    cur = _find_robot(entries, Entry2.ROBOT)
    if debug:
        print(render_wide(entries))
    for direction in parsed.moves:
        moved = move_wide(entries, cur, direction)
        if moved is not None:
            cur = moved
        if debug:
            print(render_wide(entries))
    total = sum(
        100 * row + col for (row, col), entry in iter_pos(entries) if entry is Entry2.LBOX
    )
    if debug:
        print(render_wide(entries))
    return total


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day15")
    sub = parser.add_subparsers(dest="part", required=True)
    sub.add_parser("part1", help="Day 15 part 1").add_argument("file")
    part2 = sub.add_parser("part2", help="Day 15 part 2")
    part2.add_argument("file")
    part2.add_argument("--debug", action="store_true")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        parsed = parse_warehouse(Path(args.file).read_text(encoding="utf-8"))
        if args.part == "part1":
            result = run_narrow(parsed)
        else:
            result = run_wide(parsed, args.debug)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())