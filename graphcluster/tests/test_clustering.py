"""Tests for the clustering contract, trivial algorithms and components."""

import threading
import time

import networkx as nx
import pytest

from graphcluster.clustering import (
    ClusteringAlgorithm,
    ComponentsClustering,
    EmptyClustering,
    SingletonClustering,
    TogetherClustering,
)
from graphcluster.core.types import Clustering


def as_sets(clustering):
    return sorted((set(c) for c in clustering), key=lambda c: sorted(map(str, c)))


def test_empty(example_graph):
    """Empty clustering has no clusters."""
    clustering = EmptyClustering.Builder().build(example_graph).get_clustering()
    assert len(clustering) == 0


def test_together(example_graph):
    """Together clustering has one cluster with every vertex."""
    clustering = TogetherClustering.Builder().build(example_graph).get_clustering()
    assert len(clustering) == 1
    assert set(clustering.clusters[0]) == {"a", "b", "c", "d", "e"}


@pytest.mark.parametrize("nodes", [[], ["x"]])
def test_together_degenerate(nodes):
    graph = nx.Graph()
    graph.add_nodes_from(nodes)
    clustering = TogetherClustering.Builder().build(graph).get_clustering()
    assert len(clustering) == 1
    assert set(clustering.clusters[0]) == set(nodes)


def test_singleton(example_graph):
    """Singleton clustering has one cluster per vertex."""
    clustering = SingletonClustering.Builder().build(example_graph).get_clustering()
    assert len(clustering) == 5
    assert all(len(c) == 1 for c in clustering)
    assert clustering.is_partition_of(example_graph.nodes())


def test_components(example_graph):
    """Components split the example into {a, b, c} and {d, e}."""
    clustering = ComponentsClustering.Builder().build(example_graph).get_clustering()
    assert as_sets(clustering) == [{"a", "b", "c"}, {"d", "e"}]


def test_components_isolated_vertices(two_triangles):
    clustering = ComponentsClustering.Builder().build(two_triangles).get_clustering()
    assert as_sets(clustering) == [{1, 2, 3}, {4, 5, 6}, {7}]


def test_components_directed_uses_weak_connectivity():
    graph = nx.DiGraph([("a", "b"), ("c", "b"), ("d", "e")])
    clustering = ComponentsClustering.Builder().build(graph).get_clustering()
    assert as_sets(clustering) == [{"a", "b", "c"}, {"d", "e"}]


def test_components_follow_node_order():
    graph = nx.Graph()
    graph.add_nodes_from(["z", "x", "y"])
    graph.add_edge("x", "y")
    clustering = ComponentsClustering.Builder().build(graph).get_clustering()
    assert [set(c) for c in clustering] == [{"z"}, {"x", "y"}]


def test_builder_is_callable(example_graph):
    algorithm = ComponentsClustering.Builder()(example_graph)
    assert isinstance(algorithm, ComponentsClustering)


def test_get_clustering_is_memoized(example_graph):
    """Repeated calls return the very same object."""
    algorithm = ComponentsClustering.Builder().build(example_graph)
    assert algorithm.get_clustering() is algorithm.get_clustering()


class SlowCounting(ClusteringAlgorithm):
    def __init__(self, graph):
        super().__init__(graph)
        self.calls = 0

    def _compute(self):
        self.calls += 1
        time.sleep(0.05)
        return Clustering.of([self.graph.nodes()])


def test_concurrent_first_access_computes_once(example_graph):
    """Concurrent first access runs the computation exactly once."""
    algorithm = SlowCounting(example_graph)
    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(algorithm.get_clustering())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert algorithm.calls == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_clustering_helpers():
    clustering = Clustering.of([["a", "b"], ["c"]])
    assert clustering.number_of_clusters == 2
    assert clustering.is_partition_of(["a", "b", "c"])
    assert not clustering.is_partition_of(["a", "b", "c", "d"])
    assert not Clustering.of([["a", "b"], ["b"]]).is_partition_of(["a", "b"])
    assert clustering.to_labels(["c", "a", "z"]) == [1, 0, -1]
