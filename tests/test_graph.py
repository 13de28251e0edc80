import pytest

from aoc24.graph import (
    CycleError,
    add_edge,
    all_pairs_shortest_paths,
    all_paths,
    dijkstras,
    is_fully_connected,
    neighbors,
    nodes,
    paths_to_vecs,
    reachable,
    remove_edge,
    rev_all_paths,
    reverse_graph,
    toposort,
)


def _chain():
    graph = {}
    add_edge(graph, "a", "b", 1)
    add_edge(graph, "b", "c", 2)
    add_edge(graph, "a", "c", 5)
    return graph


def _diamond():
    graph = {}
    for n1, n2 in ((0, 1), (0, 2), (1, 3), (2, 3)):
        add_edge(graph, n1, n2, 1)
    return graph


def test_toposort_source_case():
    graph = {}
    for i in range(1, 21):
        add_edge(graph, i, i - 1, 1)
        add_edge(graph, i, i // 2, 1)
    assert toposort(graph) == list(range(20, -1, -1))


def test_toposort_cycle_raises():
    graph = {}
    add_edge(graph, 1, 2, 1)
    add_edge(graph, 2, 1, 1)
    with pytest.raises(CycleError):
        toposort(graph)


def test_add_edge_reports_new_edges():
    graph = {}
    assert add_edge(graph, 1, 2, 3) is True
    assert add_edge(graph, 1, 2, 3) is False
    assert graph == {1: {(2, 3)}}


def test_remove_edge_reports_removal():
    graph = {}
    add_edge(graph, 1, 2, 3)
    assert remove_edge(graph, 1, 2, 3) is True
    assert remove_edge(graph, 1, 2, 3) is False
    assert graph == {1: set()}


def test_dijkstras_prefers_cheaper_route():
    assert dijkstras(_chain(), "a") == {"a": 0, "b": 1, "c": 3}


def test_dijkstras_skips_unreachable():
    assert "a" not in dijkstras(_chain(), "b")


def test_reachable_and_nodes():
    graph = _chain()
    assert reachable(graph, "b") == {"b", "c"}
    assert nodes(graph) == {"a", "b", "c"}


def test_is_fully_connected():
    assert not is_fully_connected(_chain())
    cycle = {}
    add_edge(cycle, 1, 2, 1)
    add_edge(cycle, 2, 3, 1)
    add_edge(cycle, 3, 1, 1)
    assert is_fully_connected(cycle)


def test_reverse_graph_round_trip():
    graph = _chain()
    graph["c"] = {("a", 4)}
    assert reverse_graph(reverse_graph(graph)) == graph
    assert ("a", 1) in reverse_graph(graph)["b"]


def test_neighbors_sorted():
    graph = {}
    add_edge(graph, 0, 5, 1)
    add_edge(graph, 0, 2, 7)
    assert list(neighbors(graph, 0)) == [(2, 7), (5, 1)]
    assert list(neighbors(graph, 9)) == []


def test_all_pairs_shortest_paths_zero_diagonal():
    graph = _diamond()
    apsp = all_pairs_shortest_paths(graph)
    assert set(apsp) == nodes(graph)
    assert all(dist[node] == 0 for node, dist in apsp.items())


def test_all_shortest_paths_in_diamond():
    graph = _diamond()
    distances = dijkstras(graph, 0)
    paths = all_paths(graph, distances, 0, 3)
    assert sorted(paths_to_vecs(paths, 0, 3)) == [[0, 1, 3], [0, 2, 3]]
    rev = rev_all_paths(graph, distances, 0, 3)
    assert rev[3] == [1, 2]
    assert rev[0] == []