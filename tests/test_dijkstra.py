import math

import pytest

from dsalgo.dijkstra import dijkstra


def _example_graph():
    graph = [[] for _ in range(5)]
    graph[0] += [(10, 1), (5, 3)]
    graph[1] += [(1, 2), (2, 3)]
    graph[2] += [(4, 4)]
    graph[3] += [(3, 1), (9, 2), (2, 4)]
    graph[4] += [(6, 0), (7, 2)]
    return graph


def test_example_distances():
    assert dijkstra(0, _example_graph()) == [0, 8, 9, 5, 7]


@pytest.mark.parametrize("source", range(5))
def test_no_edge_can_shorten_a_distance(source):
    graph = _example_graph()
    dist = dijkstra(source, graph)
    assert dist[source] == 0
    for u, edges in enumerate(graph):
        for weight, v in edges:
            assert dist[v] <= dist[u] + weight


def test_unreachable_nodes_are_infinite():
    graph = [[(1, 1)], [], []]
    assert dijkstra(0, graph) == [0, 1, math.inf]


def test_single_node():
    assert dijkstra(0, [[]]) == [0]


def test_bad_source_raises():
    with pytest.raises(IndexError):
        dijkstra(3, [[], []])