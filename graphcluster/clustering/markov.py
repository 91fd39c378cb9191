"""Markov Clustering (MCL)."""

import logging
from collections import defaultdict
from typing import Dict, Hashable, List

import networkx as nx
import numpy as np

from .base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from ..config.parameters import Parameters
from ..core.errors import ConfigurationError
from ..core.graph import adjacency_matrix, require_undirected, vertex_index_mapping
from ..core.types import Clustering
from ..core.registry import get_registry

logger = logging.getLogger(__name__)

DEFAULT_E = 2
DEFAULT_R = 2.0
DEFAULT_ITERATIONS = 20


def _normalize_columns(matrix: np.ndarray) -> np.ndarray:
    sums = matrix.sum(axis=0)
    sums[sums == 0] = 1.0
    return matrix / sums


class MarkovClustering(ClusteringAlgorithm):
    """
    Markov Clustering (van Dongen, 2000).

    Alternates expansion (matrix power) and inflation (element-wise power
    followed by column normalization) on the column-stochastic transition
    matrix of the graph with self-loops added, until the matrix stops
    changing. Each vertex is then assigned to the attractor holding the
    largest share of its column, so the result is a partition.
    """

    class Builder(ClusteringAlgorithmBuilder):
        def __init__(self, e: int = DEFAULT_E, r: float = DEFAULT_R, iterations: int = DEFAULT_ITERATIONS):
            """
            Args:
                e: Expansion exponent.
                r: Inflation exponent.
                iterations: Maximum number of expansion/inflation rounds.
            """
            self.e = e
            self.r = r
            self.iterations = iterations

        def build(self, graph: nx.Graph) -> "MarkovClustering":
            return MarkovClustering(graph, self.e, self.r, self.iterations)

    #: Entries below this value are dropped after each inflation.
    prune_threshold = 1e-6
    tolerance = 1e-8

    def __init__(
        self,
        graph: nx.Graph,
        e: int = DEFAULT_E,
        r: float = DEFAULT_R,
        iterations: int = DEFAULT_ITERATIONS,
    ):
        if e < 1:
            raise ConfigurationError(f"MCL expansion must be at least 1, got {e}")
        if r <= 0:
            raise ConfigurationError(f"MCL inflation must be positive, got {r}")
        if iterations < 1:
            raise ConfigurationError("MCL requires at least one iteration")
        super().__init__(require_undirected(graph, "MCL"))
        self.e = e
        self.r = r
        self.iterations = iterations

    def _compute(self) -> Clustering:
        mapping = vertex_index_mapping(self.graph)
        n = len(mapping)

        if n == 0:
            return Clustering()

        matrix = adjacency_matrix(self.graph, mapping).toarray()
        matrix += np.eye(n)
        matrix = _normalize_columns(matrix)

        for step in range(1, self.iterations + 1):
            previous = matrix

            matrix = np.linalg.matrix_power(matrix, self.e)
            matrix = np.power(matrix, self.r)
            matrix[matrix < self.prune_threshold] = 0.0
            matrix = _normalize_columns(matrix)

            if np.allclose(matrix, previous, atol=self.tolerance):
                break

        logger.debug("MCL stopped after %d iterations", step)

        nodes = list(mapping)
        attractors = matrix.argmax(axis=0)

        clusters: Dict[int, List[Hashable]] = defaultdict(list)
        for j, attractor in enumerate(attractors):
            clusters[int(attractor)].append(nodes[j])

        return Clustering.of(clusters.values())


def _markov_clustering(params: Parameters) -> ClusteringAlgorithmBuilder:
    return MarkovClustering.Builder(
        e=params.get_int("e", DEFAULT_E),
        r=params.get_float("r", DEFAULT_R),
        iterations=params.get_int("iterations", DEFAULT_ITERATIONS),
    )


get_registry("algorithms").register("mcl", factory=_markov_clustering)
