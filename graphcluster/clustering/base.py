"""Base clustering algorithm interface."""

import threading
from abc import ABC, abstractmethod
from typing import Optional

import networkx as nx

from ..core.types import Clustering


class ClusteringAlgorithm(ABC):
    """
    Abstract base class for graph clustering algorithms.

    An algorithm instance is bound to one graph. The clustering is computed
    on the first call to ``get_clustering`` and the same object is returned
    afterwards, also when several threads ask for it at once.
    """

    #: Whether the algorithm produces a partition of the vertex set.
    hard: bool = True

    def __init__(self, graph: nx.Graph):
        self.graph = graph
        self._clustering: Optional[Clustering] = None
        self._lock = threading.Lock()

    def get_clustering(self) -> Clustering:
        """Return the clustering of the graph, computing it at most once."""
        if self._clustering is None:
            with self._lock:
                if self._clustering is None:
                    self._clustering = self._compute()
        return self._clustering

    @abstractmethod
    def _compute(self) -> Clustering:
        """
        Cluster the graph.

        Returns:
            Clustering of ``self.graph``.
        """
        raise NotImplementedError


class ClusteringAlgorithmBuilder(ABC):
    """
    Holds the options of one algorithm and binds them to graphs.

    A builder never keeps a reference to the graphs it was applied to, so one
    configured builder can produce independent algorithm instances for many
    graphs.
    """

    @abstractmethod
    def build(self, graph: nx.Graph) -> ClusteringAlgorithm:
        """
        Create an algorithm instance for a graph.

        Raises:
            ConfigurationError: if an option is missing or the graph does not
                meet the algorithm's structural requirements.
        """
        raise NotImplementedError

    def __call__(self, graph: nx.Graph) -> ClusteringAlgorithm:
        return self.build(graph)
