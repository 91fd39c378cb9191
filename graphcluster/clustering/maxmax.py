"""MaxMax soft clustering."""

import logging
from typing import Dict, Hashable

import networkx as nx

from .base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from ..config.parameters import Parameters
from ..core.graph import edge_weight, neighbors, require_undirected
from ..core.types import Clustering
from ..core.registry import get_registry

logger = logging.getLogger(__name__)


class MaxMax(ClusteringAlgorithm):
    """
    MaxMax (Hope & Keller, 2013).

    Draws an arc v -> u whenever v is a maximal-weight neighbour of u. A
    vertex reachable from another vertex via these arcs is not a root. Each
    remaining root forms a cluster together with everything reachable from
    it. Clusters may overlap.
    """

    hard = False

    class Builder(ClusteringAlgorithmBuilder):
        def build(self, graph: nx.Graph) -> "MaxMax":
            return MaxMax(graph)

    def __init__(self, graph: nx.Graph):
        super().__init__(require_undirected(graph, "MaxMax"))
        self.digraph = nx.DiGraph()
        self.roots: Dict[Hashable, bool] = {}

    def _compute(self) -> Clustering:
        self.digraph.add_nodes_from(self.graph.nodes())

        for u in self.graph.nodes():
            weights = {v: edge_weight(self.graph, u, v) for v in neighbors(self.graph, u)}
            if not weights:
                continue
            maximum = max(weights.values())
            for v, weight in weights.items():
                if weight == maximum:
                    self.digraph.add_edge(v, u)

        self.roots = {node: True for node in self.graph.nodes()}

        for node in self.graph.nodes():
            if self.roots[node]:
                for descendant in nx.descendants(self.digraph, node):
                    self.roots[descendant] = False

        clusters = [
            {node} | nx.descendants(self.digraph, node)
            for node, root in self.roots.items() if root
        ]

        logger.debug("MaxMax found %d roots", len(clusters))
        return Clustering.of(clusters)


def _maxmax(params: Parameters) -> ClusteringAlgorithmBuilder:
    return MaxMax.Builder()


get_registry("algorithms").register("maxmax", factory=_maxmax)
