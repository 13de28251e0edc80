"""Weighted directed graphs kept as adjacency sets.

A graph maps each node to a set of ``(neighbour, weight)`` pairs. Nodes
must be hashable and mutually orderable; wherever the order of a walk
matters, nodes and edges are visited in sorted order.
"""

import heapq
from collections.abc import Iterator, Mapping
from typing import Any, Dict, List, Set, Tuple

Graph = Dict[Any, Set[Tuple[Any, int]]]
ShortestPaths = Dict[Any, int]
AllPairShortestPaths = Dict[Any, ShortestPaths]


class CycleError(ValueError):
    """Raised when a graph that must be acyclic holds a cycle."""


def dijkstras(graph: Graph, start: Any) -> ShortestPaths:
    """Shortest distance from ``start`` to every node reachable from it."""
    visited: Set[Any] = set()
    distances: ShortestPaths = {start: 0}
    queue: List[Tuple[int, Any]] = [(0, start)]
    while queue:
        dist, cur = heapq.heappop(queue)
        if cur in visited:
            continue
        visited.add(cur)
        for nxt, weight in graph.get(cur, ()):
            new_dist = dist + weight
            known = distances.get(nxt)
            if known is None or known > new_dist:
                distances[nxt] = new_dist
                heapq.heappush(queue, (new_dist, nxt))
    return dict(sorted(distances.items()))


def reachable(graph: Graph, start: Any) -> Set[Any]:
    """Every node reachable from ``start``, ``start`` included."""
    visited: Set[Any] = set()
    stack = [start]
    while stack:
        cur = stack.pop()
        if cur in visited:
            continue
        visited.add(cur)
        stack.extend(node for node, _ in graph.get(cur, ()))
    return visited


def is_fully_connected(graph: Graph) -> bool:
    """True when every node reaches every other node."""
    all_nodes = nodes(graph)
    return all(reachable(graph, node) == all_nodes for node in all_nodes)


def nodes(graph: Graph) -> Set[Any]:
    """Every node that is a key or the target of an edge."""
    result = set(graph)
    for edges in graph.values():
        result.update(node for node, _ in edges)
    return result


def all_pairs_shortest_paths(graph: Graph) -> AllPairShortestPaths:
    """Shortest distances from every node, keyed by source node."""
    return {node: dijkstras(graph, node) for node in sorted(nodes(graph))}


def add_edge(graph: Graph, n1: Any, n2: Any, weight: int) -> bool:
    """Add an edge; return True if it was not already present."""
    edges = graph.setdefault(n1, set())
    edge = (n2, weight)
    if edge in edges:
        return False
    edges.add(edge)
    return True


def remove_edge(graph: Graph, n1: Any, n2: Any, weight: int) -> bool:
    """Remove an edge; return True if it was present."""
    edges = graph.setdefault(n1, set())
    edge = (n2, weight)
    if edge not in edges:
        return False
    edges.remove(edge)
    return True


def reverse_graph(graph: Graph) -> Graph:
    """A graph with every edge turned around."""
    result: Graph = {}
    for node, edges in graph.items():
        for target, weight in edges:
            add_edge(result, target, node, weight)
    return result


def rev_all_paths(
    graph: Graph, distances: Mapping[Any, int], start: Any, end: Any
) -> Dict[Any, List[Any]]:
    """Map each node on a shortest path to its predecessors, walking back from ``end``."""
    reversed_graph = reverse_graph(graph)
    result: Dict[Any, List[Any]] = {}
    stack = [end]
    while stack:
        cur = stack.pop()
        if cur == start:
            result.setdefault(cur, [])
            continue
        candidates = [
            (node, distances[node] + weight)
            for node, weight in neighbors(reversed_graph, cur)
            if node in distances
        ]
        if not candidates:
            continue
        best = min(dist for _, dist in candidates)
        for node, dist in candidates:
            if dist == best:
                result.setdefault(cur, []).append(node)
                stack.append(node)
    return dict(sorted(result.items()))


def all_paths(
    graph: Graph, distances: Mapping[Any, int], start: Any, end: Any
) -> Dict[Any, List[Any]]:
    """Map each node on a shortest path to its successors towards ``end``."""
    result: Dict[Any, List[Any]] = {}
    for node, predecessors in rev_all_paths(graph, distances, start, end).items():
        for pred in predecessors:
            result.setdefault(pred, []).append(node)
    return dict(sorted(result.items()))


def paths_to_vecs(paths: Mapping[Any, List[Any]], start: Any, end: Any) -> List[List[Any]]:
    """Expand a successor map into every full path from ``start`` to ``end``."""
    stack = [(start, [start])]
    result: List[List[Any]] = []
    while stack:
        current, path = stack.pop()
        if current == end:
            result.append(path)
            continue
        for neighbor in paths.get(current, ()):
            stack.append((neighbor, path + [neighbor]))
    return result


def neighbors(graph: Graph, node: Any) -> Iterator[Tuple[Any, int]]:
    """Yield the ``(neighbour, weight)`` edges leaving ``node`` in sorted order."""
    yield from sorted(graph.get(node, ()))


def toposort(graph: Graph) -> List[Any]:
    """Order the nodes so every edge points forwards.

    Raises CycleError when the graph has a cycle.
    """
    result: List[Any] = []
    visiting: Set[Any] = set()
    visited: Set[Any] = set()

    for root in sorted(nodes(graph)):
        if root in visited:
            continue
        visiting.add(root)
        stack = [(root, neighbors(graph, root))]
        while stack:
            node, edges = stack[-1]
            nxt = next(edges, None)
            if nxt is None:
                stack.pop()
                visiting.discard(node)
                visited.add(node)
                result.append(node)
                continue
            target = nxt[0]
            if target in visiting:
                raise CycleError(f"cycle through {target!r}")
            if target not in visited:
                visiting.add(target)
                stack.append((target, neighbors(graph, target)))

    result.reverse()
    return result