"""Spectral clustering."""

import logging
from typing import Optional

import networkx as nx

from .base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from ..config.parameters import Parameters
from ..core.errors import ConfigurationError
from ..core.graph import require_undirected, vertex_index_mapping
from ..core.types import Clustering
from ..core.registry import get_registry
from ..embedding import compute_spectral_embedding
from ..points import KMeansClusterer, PointClusterer

logger = logging.getLogger(__name__)


class SpectralClustering(ClusteringAlgorithm):
    """
    Spectral clustering (Shi & Malik, 2000; von Luxburg, 2007).

    Embeds the vertices with the eigenvectors of the graph Laplacian and
    groups the embedded points with a point clusterer. The embedding is
    deterministic for a given graph; any randomness in the result comes from
    the point clusterer.

    Graphs with fewer than two vertices are not embedded: an empty graph
    yields no clusters and a single vertex yields one singleton.
    """

    class Builder(ClusteringAlgorithmBuilder):
        def __init__(
            self,
            clusterer: Optional[PointClusterer] = None,
            k: Optional[int] = None,
            normalized: bool = True,
        ):
            """
            Args:
                clusterer: Point clusterer; defaults to k-means with k groups.
                k: Embedding dimensionality and cluster count hint.
                normalized: Use the normalized Laplacian.
            """
            self.clusterer = clusterer
            self.k = k
            self.normalized = normalized

        def build(self, graph: nx.Graph) -> "SpectralClustering":
            return SpectralClustering(graph, self.clusterer, self.k, self.normalized)

    def __init__(
        self,
        graph: nx.Graph,
        clusterer: Optional[PointClusterer] = None,
        k: Optional[int] = None,
        normalized: bool = True,
    ):
        if k is None:
            raise ConfigurationError("k must be specified")
        if k < 1:
            raise ConfigurationError(f"k must be positive, got {k}")
        super().__init__(require_undirected(graph, "Spectral clustering"))
        self.clusterer = clusterer if clusterer is not None else KMeansClusterer(k)
        self.k = k
        self.normalized = normalized

    def _compute(self) -> Clustering:
        n = self.graph.number_of_nodes()

        if n == 0:
            return Clustering()
        if n == 1:
            return Clustering.of([self.graph.nodes()])

        mapping = vertex_index_mapping(self.graph)
        embeddings = compute_spectral_embedding(self.graph, mapping, self.k, self.normalized)

        groups = self.clusterer.cluster(embeddings)
        logger.debug("Point clusterer returned %d groups", len(groups))

        return Clustering.of(
            [embedding.node for embedding in group]
            for group in groups
        )


def _spectral(params: Parameters) -> ClusteringAlgorithmBuilder:
    params.require("k")
    k = params.get_int("k")
    if k < 1:
        raise ConfigurationError(f"Parameter 'k' of algorithm '{params.algorithm}' must be positive, got {k}")

    return SpectralClustering.Builder(
        clusterer=KMeansClusterer(k, random_state=params.get_int("seed")),
        k=k,
        normalized=params.get_str("normalized", "true").lower() not in ("false", "0", "no"),
    )


get_registry("algorithms").register("spectral", factory=_spectral)
