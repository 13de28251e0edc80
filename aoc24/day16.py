"""Reindeer maze: cheapest routes when turning costs a thousand steps."""

import argparse
import io
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

from aoc24.graph import Graph, add_edge, dijkstras, rev_all_paths
from aoc24.grid import Direction, Grid, Index, get_at, iter_pos, map_grid, read_grid

Node = Tuple[Index, Direction]

_LOW = -(1 << 63)
_HIGH = (1 << 63) - 1

START_NODE: Node = ((_LOW, _LOW), Direction.UP)
END_NODE: Node = ((_HIGH, _HIGH), Direction.UP)

_STEP_COST = 1
_TURN_COST = 1000


class Item(Enum):
    START = "S"
    END = "E"
    SPACE = "."
    WALL = "#"


@dataclass
class Maze:
    """The maze with its start and end tiles."""

    grid: Grid[Item]
    start: Index
    end: Index

    def create_graph(self) -> Graph:
        """Graph over (tile, facing) with sentinel start and end nodes."""
        graph: Graph = {}
        for pos, item in iter_pos(self.grid):
            for direction in Direction.all_directions():
                node = (pos, direction)
                if item is Item.WALL:
                    graph.setdefault(node, set())
                    continue
                ahead = direction.apply(pos)
                if get_at(self.grid, ahead) not in (Item.WALL, None):
                    add_edge(graph, node, (ahead, direction), _STEP_COST)
                for other in Direction.all_directions():
                    if other != direction:
                        add_edge(graph, node, (pos, other), _TURN_COST)

        add_edge(graph, START_NODE, (self.start, Direction.RIGHT), 0)
        for direction in Direction.all_directions():
            add_edge(graph, (self.end, direction), END_NODE, 0)
        return graph

    def shortest_path(self) -> Optional[int]:
        """Lowest score from the start, facing east, to the end; None if unreachable."""
        return dijkstras(self.create_graph(), START_NODE).get(END_NODE)

    def all_shortest_paths(self) -> Dict[Node, List[Node]]:
        """Predecessor map of every node on some cheapest route."""
        graph = self.create_graph()
        distances = dijkstras(graph, START_NODE)
        return rev_all_paths(graph, distances, START_NODE, END_NODE)


def parse_maze(text: str) -> Maze:
    """Parse the maze; raises ValueError on bad characters or a missing S or E."""
    chars = read_grid(io.StringIO(text, newline="\n"))

    def convert(_pos: Index, char: str) -> Item:
        try:
            return Item(char)
        except ValueError:
            raise ValueError(f"invalid character: {char}") from None

    grid = map_grid(chars, convert)
    start = next((pos for pos, item in iter_pos(grid) if item is Item.START), None)
    if start is None:
        raise ValueError("could not find start position")
    end = next((pos for pos, item in iter_pos(grid) if item is Item.END), None)
    if end is None:
        raise ValueError("could not find end position")
    return Maze(grid, start, end)


def all_nodes_in_paths(paths: Dict[Node, List[Node]]) -> Set[Index]:
    """Tiles lying on any of the given paths, sentinels excluded."""
    result: Set[Index] = set()
    for node, predecessors in paths.items():
        result.update(pred[0] for pred in predecessors)
        result.add(node[0])
    result.discard(END_NODE[0])
    result.discard(START_NODE[0])
    return result


def render_paths(maze: Maze, nodes: Set[Index]) -> str:
    """The maze as text with tiles on cheapest routes shown as O."""
    lines = []
    for row, line in enumerate(maze.grid):
        lines.append(
            "".join(
                "O" if (row, col) in nodes else item.value for col, item in enumerate(line)
            )
            + "\n"
        )
    return "".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day16")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 16 part 1"), ("part2", "Day 16 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        maze = parse_maze(Path(args.file).read_text(encoding="utf-8"))
        if args.part == "part1":
            score = maze.shortest_path()
            if score is None:
                raise ValueError("could not find shortest path")
            print(score)
            return 0
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    nodes = all_nodes_in_paths(maze.all_shortest_paths())
    print(render_paths(maze, nodes))
    print(len(nodes))
    return 0


if __name__ == "__main__":
    sys.exit(main())