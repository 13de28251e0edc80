"""RAM run: shortest path through a memory grid as bytes fall."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from aoc24.graph import Graph, add_edge, dijkstras
from aoc24.grid import Direction, Index
from aoc24.parser import (
    Parser,
    map_value,
    take_int,
    take_many1,
    take_newline,
    take_str,
    take_tuple4,
)

DEFAULT_SIZE = 70
_PART1_DROPS = 1024


def take_line() -> Parser:
    """Parse ``x,y`` followed by a newline."""
    return map_value(
        take_tuple4(take_int(), take_str(","), take_int(), take_newline()),
        lambda t: (t[0], t[2]),
    )


def parse_bytes(text: str) -> List[Index]:
    """Parse the falling byte positions; raises ValueError on bad input."""
    result = take_many1(take_line())(text)
    if result is None:
        raise ValueError("could not parse")
    drops, rest = result
    if rest:
        raise ValueError(f"could not parse: {rest}")
    return drops


def run_with_drops(
    drops: Sequence[Index], value: int, size: int = DEFAULT_SIZE
) -> Optional[int]:
    """Steps from corner to corner once the first ``value + 1`` bytes fell.

    Returns None when the exit cannot be reached; raises IndexError when
    ``value`` lies past the last byte.
    """
    if value >= len(drops):
        raise IndexError("drop index out of range")
    blocked = set(drops[:value + 1])
    graph: Graph = {}
    for i in range(size + 1):
        for j in range(size + 1):
            pos = (i, j)
            if pos in blocked:
                continue
            for direction in Direction.all_directions():
                nxt = direction.apply(pos)
                if not (0 <= nxt[0] <= size and 0 <= nxt[1] <= size):
                    continue
                if nxt in blocked:
                    continue
                add_edge(graph, pos, nxt, 1)
    return dijkstras(graph, (0, 0)).get((size, size))


def first_blocking(drops: Sequence[Index], size: int = DEFAULT_SIZE) -> Optional[int]:
    """Index of the first byte after which the exit is unreachable, or None."""
    if not drops:
        raise ValueError("no bytes to drop")
    low, high = 0, len(drops) - 1
    while low < high:
        mid = low + (high - low) // 2
        if run_with_drops(drops, mid, size) is not None:
            low = mid + 1
        else:
            high = mid
    if run_with_drops(drops, low, size) is None:
        return low
    return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day18")
    sub = parser.add_subparsers(dest="part", required=True)
    sub.add_parser("part1", help="Day 18 part 1").add_argument("file")
    part2 = sub.add_parser("part2", help="Day 18 part 2")
    part2.add_argument("file")
    part2.add_argument("--debug", action="store_true")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        drops = parse_bytes(Path(args.file).read_text(encoding="utf-8"))
        if args.part == "part1":
            distance = run_with_drops(drops, _PART1_DROPS)
            if distance is None:
                raise ValueError("could not find")
            print(distance)
            return 0
        found = first_blocking(drops)
        if found is None:
            raise ValueError("could not find")
    except (OSError, ValueError, IndexError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.debug:
        for i, drop in enumerate(drops):
            print(f"i = {i}, {drop}: {run_with_drops(drops, i)}")
            if found == i:
                print(f"found at i = {i}")
    x, y = drops[found]
    print(f"{x},{y}")
    return 0


if __name__ == "__main__":
    sys.exit(main())