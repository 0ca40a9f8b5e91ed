import unittest
from typing import Dict, Hashable

import pytest

from core.dijkstra import ShortestPaths, dijkstra
from core.graph import Adjacency, add_edge, add_undirected_edge
from test.sample_graph import build_random_graph, build_sample_graph, get_reachable_nodes
from utilities.queues import ItemNotFoundError, QueueType


def bellman_ford(adjacency: Adjacency, source: Hashable) -> Dict[Hashable, float]:
    dist = {v: float('inf') for v in adjacency.keys()}
    dist[source] = 0.
    for _ in range(len(adjacency)):
        changed = False
        for u, edges in adjacency.items():
            for v, weight in edges.items():
                if dist[u] + weight < dist.get(v, float('inf')):
                    dist[v] = dist[u] + weight
                    changed = True
        if not changed:
            break
    return dist


def assert_valid_path(adjacency: Adjacency, paths: ShortestPaths, dest: Hashable):
    path = paths.path_to(dest)
    assert path[0] == paths.source
    assert path[-1] == dest
    length = sum(adjacency[u][v] for u, v in zip(path, path[1:]))
    assert length == pytest.approx(paths.distance_to(dest))


class TestSampleGraph(unittest.TestCase):

    def test_shortest_path(self):
        for queue_type in QueueType:
            paths = ShortestPaths(build_sample_graph(), "A", queue_type)
            self.assertEqual(paths.distance_to("C"), 3.)
            self.assertEqual(paths.path_to("C"), ["A", "B", "C"])
            self.assertEqual(paths.distance_to("B"), 1.)
            self.assertEqual(paths.path_to("B"), ["A", "B"])

    def test_source(self):
        for queue_type in QueueType:
            paths = ShortestPaths(build_sample_graph(), "A", queue_type)
            self.assertEqual(paths.distance_to("A"), 0.)
            self.assertEqual(paths.path_to("A"), ["A"])
            self.assertTrue(paths.has_path_to("A"))

    def test_isolated_node(self):
        for queue_type in QueueType:
            paths = ShortestPaths(build_sample_graph(), "A", queue_type)
            self.assertEqual(paths.distance_to("D"), float('inf'))
            self.assertEqual(paths.path_to("D"), ["D"])
            self.assertFalse(paths.has_path_to("D"))

    def test_unknown_nodes(self):
        with self.assertRaises(ItemNotFoundError):
            ShortestPaths(build_sample_graph(), "X")
        paths = ShortestPaths(build_sample_graph(), "A")
        with self.assertRaises(ItemNotFoundError):
            paths.distance_to("X")
        with self.assertRaises(ItemNotFoundError):
            paths.has_path_to("X")
        self.assertEqual(paths.path_to("X"), ["X"])


def test_single_node():
    for queue_type in QueueType:
        paths = ShortestPaths({"A": {}}, "A", queue_type)
        assert paths.distance_to("A") == 0.
        assert paths.path_to("A") == ["A"]
        assert paths.distances() == {"A": 0.}


def test_equal_length_paths():
    graph: Dict[str, Dict[str, float]] = {}
    add_undirected_edge(graph, "S", "P", 1.)
    add_undirected_edge(graph, "P", "X", 3.)
    add_undirected_edge(graph, "S", "Q", 2.)
    add_undirected_edge(graph, "Q", "X", 2.)
    for queue_type in QueueType:
        paths = ShortestPaths(graph, "S", queue_type)
        assert paths.distance_to("X") == 4.
        assert paths.path_to("X") in (["S", "P", "X"], ["S", "Q", "X"])
        assert_valid_path(graph, paths, "X")


def test_longer_path_with_fewer_weight():
    graph: Dict[str, Dict[str, float]] = {}
    add_undirected_edge(graph, "S", "T", 10.)
    add_undirected_edge(graph, "S", "A", 1.)
    add_undirected_edge(graph, "A", "B", 1.)
    add_undirected_edge(graph, "B", "C", 1.)
    add_undirected_edge(graph, "C", "T", 1.)
    for queue_type in QueueType:
        paths = ShortestPaths(graph, "S", queue_type)
        assert paths.distance_to("T") == 4.
        assert paths.path_to("T") == ["S", "A", "B", "C", "T"]


def test_zero_weights():
    graph: Dict[str, Dict[str, float]] = {}
    add_undirected_edge(graph, "A", "B", 0.)
    add_undirected_edge(graph, "B", "C", 0.)
    add_undirected_edge(graph, "A", "C", 1.)
    paths = ShortestPaths(graph, "A")
    assert paths.distance_to("C") == 0.
    assert paths.path_to("C") == ["A", "B", "C"]


def test_directed_graph():
    graph: Dict[str, Dict[str, float]] = {}
    add_edge(graph, "A", "B", 1.)
    add_edge(graph, "C", "A", 1.)
    paths = ShortestPaths(graph, "A")
    assert paths.distance_to("B") == 1.
    assert paths.distance_to("C") == float('inf')
    assert paths.path_to("C") == ["C"]


def test_neighbor_without_adjacency_entry():
    graph = {"A": {"B": 2., "C": 5.}, "B": {"C": 1.}}
    for queue_type in QueueType:
        dist, pred = dijkstra(graph, "A", queue_type)
        assert dist == {"A": 0., "B": 2., "C": 3.}
        assert pred == {"B": "A", "C": "B"}


def test_unreached_node_does_not_become_predecessor():
    # C is unreachable from A, X is only known as a neighbor of C.
    graph = {"A": {}, "C": {"X": 1.}}
    for queue_type in QueueType:
        paths = ShortestPaths(graph, "A", queue_type)
        assert paths.distance_to("X") == float('inf')
        assert not paths.has_path_to("X")
        assert paths.path_to("X") == ["X"]
        assert paths.path_to("C") == ["C"]


def test_distances_is_a_copy():
    paths = ShortestPaths(build_sample_graph(), "A")
    distances = paths.distances()
    distances["C"] = 0.
    assert paths.distance_to("C") == 3.
    assert paths.distances() == {"A": 0., "B": 1., "C": 3., "D": float('inf')}


@pytest.mark.parametrize("directed", [False, True])
def test_random_graphs(directed: bool):
    for seed in range(25):
        graph = build_random_graph(30, 60, seed, directed=directed)
        expected = bellman_ford(graph, 0)
        reachable = get_reachable_nodes(graph, 0)
        heap_paths = ShortestPaths(graph, 0, QueueType.BINARY_HEAP)
        sorted_paths = ShortestPaths(graph, 0, QueueType.SORTED_ARRAY)
        for v in graph.keys():
            assert heap_paths.distance_to(v) == pytest.approx(expected[v])
            assert sorted_paths.distance_to(v) == pytest.approx(expected[v])
            assert heap_paths.has_path_to(v) == (v in reachable)
            if v in reachable:
                assert_valid_path(graph, heap_paths, v)
                assert_valid_path(graph, sorted_paths, v)
            else:
                assert heap_paths.path_to(v) == [v]
                assert sorted_paths.path_to(v) == [v]
