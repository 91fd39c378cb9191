"""Trivial clusterings: no clusters, one cluster, or one cluster per vertex."""

import networkx as nx

from .base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from ..config.parameters import Parameters
from ..core.types import Clustering
from ..core.registry import get_registry


class EmptyClustering(ClusteringAlgorithm):
    """Returns no clusters at all."""

    hard = False

    class Builder(ClusteringAlgorithmBuilder):
        def build(self, graph: nx.Graph) -> "EmptyClustering":
            return EmptyClustering(graph)

    def _compute(self) -> Clustering:
        return Clustering()


class TogetherClustering(ClusteringAlgorithm):
    """Puts every vertex into a single cluster."""

    class Builder(ClusteringAlgorithmBuilder):
        def build(self, graph: nx.Graph) -> "TogetherClustering":
            return TogetherClustering(graph)

    def _compute(self) -> Clustering:
        return Clustering.of([self.graph.nodes()])


class SingletonClustering(ClusteringAlgorithm):
    """Puts every vertex into its own cluster."""

    class Builder(ClusteringAlgorithmBuilder):
        def build(self, graph: nx.Graph) -> "SingletonClustering":
            return SingletonClustering(graph)

    def _compute(self) -> Clustering:
        return Clustering.of([node] for node in self.graph.nodes())


def _empty(params: Parameters) -> ClusteringAlgorithmBuilder:
    return EmptyClustering.Builder()


def _together(params: Parameters) -> ClusteringAlgorithmBuilder:
    return TogetherClustering.Builder()


def _singleton(params: Parameters) -> ClusteringAlgorithmBuilder:
    return SingletonClustering.Builder()


get_registry("algorithms").register("empty", factory=_empty)
get_registry("algorithms").register("together", factory=_together)
get_registry("algorithms").register("singleton", factory=_singleton)
