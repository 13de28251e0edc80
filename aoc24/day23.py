"""LAN party: triangles and the largest clique in a network map."""

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import FrozenSet, List, Set, Tuple

from aoc24.graph import Graph, add_edge, neighbors
from aoc24.parser import Parser, map_value, take_newline, take_separator, take_str, take_tuple3

Node = str
Edge = Tuple[Node, Node]


def take_node() -> Parser:
    """Parse a two-letter computer name."""

    def parse(text: str):
        head = text[:2]
        if len(head) < 2 or not all(c.isascii() and c.isalpha() for c in head):
            return None
        return head, text[2:]

    return parse


def take_edge() -> Parser:
    """Parse ``ab-cd``."""
    return map_value(
        take_tuple3(take_node(), take_str("-"), take_node()),
        lambda t: (t[0], t[2]),
    )


def parse_edges(text: str) -> List[Edge]:
    """Parse newline separated connections; raises ValueError on leftovers."""
    edges, rest = take_separator(take_edge(), take_newline())(text)
    if rest:
        raise ValueError(f"could not parse file, remaining: {rest}")
    return edges


def build_graph(edges: Iterable[Edge]) -> Graph:
    """An undirected graph with every connection in both directions."""
    graph: Graph = {}
    for n1, n2 in edges:
        add_edge(graph, n1, n2, 1)
        add_edge(graph, n2, n1, 1)
    return graph


def _triangles(graph: Graph, prefix: str) -> Set[Tuple[Node, ...]]:
    result: Set[Tuple[Node, ...]] = set()
    for v in sorted(graph):
        if not v.startswith(prefix):
            continue
        for u, _ in neighbors(graph, v):
            common = graph.get(u, set()) & graph.get(v, set())
            for w, _ in common:
                if w == u or w == v:
                    continue
                result.add(tuple(sorted((u, v, w))))
    return result


def triangles_with_prefix(graph: Graph, prefix: str) -> List[Tuple[Node, ...]]:
    """Sorted triples of connected computers, one of them named with ``prefix``."""
    return sorted(_triangles(graph, prefix))


def maximal_cliques(graph: Graph) -> List[Tuple[Node, ...]]:
    """The largest fully connected groups, grown one member at a time from triangles."""
    cliques: Set[FrozenSet[Node]] = {frozenset(t) for t in _triangles(graph, "")}
    while True:
        grown: Set[FrozenSet[Node]] = set()
        for clique in cliques:
            candidates = {n for member in clique for n, _ in graph.get(member, ())}
            for candidate in sorted(candidates):
                edges = graph.get(candidate)
                if edges is None:
                    continue
                if all((member, 1) in edges for member in clique):
                    grown.add(clique | {candidate})
        if not grown:
            break
        cliques = grown
    return sorted(tuple(sorted(clique)) for clique in cliques)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day23")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 23 part 1"), ("part2", "Day 23 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        graph = build_graph(parse_edges(Path(args.file).read_text(encoding="utf-8")))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        groups = triangles_with_prefix(graph, "t")
        print("\n".join(",".join(group) for group in groups))
        print(len(groups))
    else:
        groups = maximal_cliques(graph)
        print("\n".join(",".join(group) for group in groups))
        print(len(groups[0]) if groups else 0)
    return 0


if __name__ == "__main__":
    sys.exit(main())