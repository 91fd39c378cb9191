"""Connected components clustering."""

import logging

import networkx as nx

from .base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from ..config.parameters import Parameters
from ..core.types import Clustering
from ..core.registry import get_registry

logger = logging.getLogger(__name__)


class ComponentsClustering(ClusteringAlgorithm):
    """
    Connected components clustering.

    Groups vertices that are transitively connected through edges. Edge
    directions are ignored, so directed graphs are split into their weakly
    connected components. Isolated vertices become singleton clusters.
    """

    class Builder(ClusteringAlgorithmBuilder):
        def build(self, graph: nx.Graph) -> "ComponentsClustering":
            return ComponentsClustering(graph)

    def _compute(self) -> Clustering:
        if self.graph.is_directed():
            clusters = list(nx.weakly_connected_components(self.graph))
        else:
            clusters = list(nx.connected_components(self.graph))

        logger.debug("Found %d connected components", len(clusters))
        return Clustering.of(clusters)


def _components(params: Parameters) -> ClusteringAlgorithmBuilder:
    return ComponentsClustering.Builder()


get_registry("algorithms").register("components", factory=_components)
