"""Race condition: counting cheats that shorten a racetrack run."""

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Set, Tuple

from aoc24.graph import Graph, add_edge, dijkstras, reverse_graph
from aoc24.grid import Direction, Grid, Index, get_at, iter_pos, read_grid, vec_add

_WALL = "#"
_PART1_SECONDS = 2
_PART2_SECONDS = 20
_THRESHOLD = 100


class Shortcut(IntEnum):
    """The phase of a run: before, at either end of, or after the cheat."""

    PRE = 0
    SECOND_FIRST = 1
    SECOND_LAST = 2
    POST = 3


Node = Tuple[Index, Shortcut]


def bounded_distance(distance: int) -> Iterator[Index]:
    """Yield every offset whose Manhattan length is at most ``distance``, once each."""
    for n in range(distance + 1):
        for x in range(-n, n + 1):
            y = n - abs(x)
            yield (x, y)
            if y != 0:
                yield (x, -y)


def magnitude(v: Index) -> int:
    """Manhattan length of an offset."""
    return abs(v[0]) + abs(v[1])


def create_graph(grid: Grid[str], skip_max_distance: int) -> Graph:
    """Graph over (tile, phase) allowing one cheat of up to ``skip_max_distance`` steps."""
    if skip_max_distance < 2:
        raise ValueError("skip_max_distance must be at least 2")

    deltas = [delta for delta in bounded_distance(skip_max_distance) if delta != (0, 0)]
    graph: Graph = {}
    for pos, char in iter_pos(grid):
        if char == "E":
            add_edge(graph, (pos, Shortcut.SECOND_LAST), (pos, Shortcut.POST), 0)
        if char == "S":
            add_edge(graph, (pos, Shortcut.PRE), (pos, Shortcut.SECOND_FIRST), 0)

        if char != _WALL:
            for direction in Direction.all_directions():
                pos2 = direction.apply(pos)
                char2 = get_at(grid, pos2)
                if char2 is None or char2 == _WALL:
                    continue
                add_edge(graph, (pos, Shortcut.PRE), (pos2, Shortcut.PRE), 1)
                add_edge(graph, (pos, Shortcut.PRE), (pos2, Shortcut.SECOND_FIRST), 1)
                add_edge(graph, (pos, Shortcut.SECOND_LAST), (pos2, Shortcut.POST), 1)
                add_edge(graph, (pos, Shortcut.POST), (pos2, Shortcut.POST), 1)

        for delta in deltas:
            pos2 = vec_add(pos, delta)
            char2 = get_at(grid, pos2)
            if char2 is None or char2 == _WALL:
                continue
            add_edge(
                graph,
                (pos, Shortcut.SECOND_FIRST),
                (pos2, Shortcut.SECOND_LAST),
                magnitude(delta),
            )
    return graph


def _find(grid: Grid[str], char: str, what: str) -> Index:
    for pos, value in iter_pos(grid):
        if value == char:
            return pos
    raise ValueError(f"could not find {what}")


def find_start(grid: Grid[str]) -> Node:
    """The start node: the S tile before any cheat."""
    return (_find(grid, "S", "start"), Shortcut.PRE)


def find_end(grid: Grid[str]) -> Node:
    """The end node: the E tile after the cheat."""
    return (_find(grid, "E", "end"), Shortcut.POST)


@dataclass
class RunResult:
    """Cheats grouped by time saved, and the length of the honest run."""

    start: Node
    end: Node
    counts: Dict[int, Set[Tuple[Index, Index]]] = field(default_factory=dict)
    default_distance: int = 0


def run_problem(grid: Grid[str], max_seconds: int) -> RunResult:
    """Find every cheat of at most ``max_seconds`` that shortens the run."""
    graph = create_graph(grid, max_seconds)
    rev_graph = reverse_graph(graph)
    start = find_start(grid)
    end = find_end(grid)

    distance_to_end = dijkstras(rev_graph, end)
    distance_from_start = dijkstras(graph, start)

    default_distance = distance_to_end.get((start[0], Shortcut.POST))
    if default_distance is None:
        raise ValueError("could not find distance")

    deltas = list(bounded_distance(max_seconds))
    counts: Dict[int, Set[Tuple[Index, Index]]] = {}
    for s1, _ in iter_pos(grid):
        d1 = distance_from_start.get((s1, Shortcut.SECOND_FIRST))
        if d1 is None:
            continue
        for delta in deltas:
            s2 = vec_add(s1, delta)
            if get_at(grid, s2) is None:
                continue
            d2 = distance_to_end.get((s2, Shortcut.SECOND_LAST))
            if d2 is None:
                continue
            dist = d1 + d2 + magnitude(delta)
            if dist < default_distance:
                counts.setdefault(default_distance - dist, set()).add((s1, s2))

    return RunResult(start, end, dict(sorted(counts.items())), default_distance)


def count_cheats(result: RunResult, threshold: int = _THRESHOLD) -> int:
    """Number of cheats saving at least ``threshold`` steps."""
    return sum(len(pairs) for saved, pairs in result.counts.items() if saved >= threshold)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day20")
    parser.add_argument("-d", "--debug", action="store_true")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 20 part 1"), ("part2", "Day 20 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    seconds = _PART1_SECONDS if args.part == "part1" else _PART2_SECONDS
    try:
        with open(args.file, encoding="utf-8", newline="\n") as handle:
            grid = read_grid(handle)
        result = run_problem(grid, seconds)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.debug:
        print(f"default: {result.default_distance}")
        print(f"end loc: {result.end}")
        for saved, pairs in result.counts.items():
            print(f"{saved}: {len(pairs)} - {sorted(pairs)}")
    print(count_cheats(result, _THRESHOLD))
    return 0


if __name__ == "__main__":
    sys.exit(main())