"""Shared test fixtures: sample graphs and point clusterers."""

from typing import List, Sequence

import networkx as nx
import pytest

from graphcluster.core.random import get_seed, set_seed
from graphcluster.core.types import NodeEmbedding
from graphcluster.points import PointClusterer


class OneGroupClusterer(PointClusterer):
    """Puts all points into a single group."""

    def cluster(self, points: Sequence[NodeEmbedding]) -> List[List[NodeEmbedding]]:
        return [list(points)] if points else []


class RecordingClusterer(PointClusterer):
    """Returns every point as its own group and remembers the input."""

    def __init__(self):
        self.points: List[NodeEmbedding] = []

    def cluster(self, points: Sequence[NodeEmbedding]) -> List[List[NodeEmbedding]]:
        self.points = list(points)
        return [[p] for p in points]


@pytest.fixture
def example_graph():
    """Vertices a..e with edges a-b, a-c (twice) and d-e."""
    graph = nx.MultiGraph()
    graph.add_nodes_from(["a", "b", "c", "d", "e"])
    graph.add_edge("a", "b")
    graph.add_edge("a", "c")
    graph.add_edge("a", "c")
    graph.add_edge("d", "e")
    return graph


@pytest.fixture
def two_blocks():
    """Two 4-cliques joined by one weak edge."""
    graph = nx.Graph()
    for block in (["a1", "a2", "a3", "a4"], ["b1", "b2", "b3", "b4"]):
        for i, u in enumerate(block):
            for v in block[i + 1:]:
                graph.add_edge(u, v, weight=1.0)
    graph.add_edge("a1", "b1", weight=0.1)
    return graph


@pytest.fixture
def two_triangles():
    """Two disconnected triangles and an isolated vertex."""
    graph = nx.Graph()
    graph.add_edges_from([(1, 2), (2, 3), (1, 3)], weight=1.0)
    graph.add_edges_from([(4, 5), (5, 6), (4, 6)], weight=1.0)
    graph.add_node(7)
    return graph


@pytest.fixture
def one_group_clusterer():
    return OneGroupClusterer()


@pytest.fixture
def recording_clusterer():
    return RecordingClusterer()


@pytest.fixture
def restore_seed():
    """Put the global seed back after a test changes it."""
    seed = get_seed()
    yield
    set_seed(seed)
