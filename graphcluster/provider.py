"""
Creates clustering algorithms from a name and string parameters.

Algorithms are looked up in the ``algorithms`` registry, which every module
of ``graphcluster.clustering`` populates on import with a factory turning
``Parameters`` into a configured builder.
"""

import logging
from typing import Mapping, Optional

import networkx as nx

from . import clustering  # noqa: F401  populates the algorithm registry
from .clustering.base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from .config.parameters import Parameters
from .core.errors import ConfigurationError
from .core.registry import get_registry

logger = logging.getLogger(__name__)


class AlgorithmProvider:
    """
    Configured factory of clustering algorithms.

    The algorithm name and parameters are resolved once, on construction;
    unknown names and malformed parameters raise ``ConfigurationError``
    before any graph is seen. The provider keeps no graph state: applying
    it to a graph always returns a new, independent algorithm instance.

    Usage:
        provider = AlgorithmProvider("cw", {"mode": "log"})
        clustering = provider(graph).get_clustering()
    """

    def __init__(self, algorithm: str, params: Optional[Mapping[str, str]] = None):
        """
        Args:
            algorithm: Case-insensitive algorithm name.
            params: Parameter values as strings; ``None`` means no parameters.
        """
        if algorithm is None:
            raise ConfigurationError("algorithm is not specified")

        self.algorithm = algorithm.lower()
        self.params = Parameters(self.algorithm, params)

        registry = get_registry("algorithms")
        if self.algorithm not in registry:
            raise ConfigurationError(
                f"Unknown algorithm: {algorithm}. Available: {sorted(registry.list())}"
            )

        self.builder: ClusteringAlgorithmBuilder = registry.create(self.algorithm, params=self.params)
        logger.debug("Resolved algorithm %s with %r", self.algorithm, self.params)

    def apply(self, graph: nx.Graph) -> ClusteringAlgorithm:
        """Bind the configured algorithm to a graph."""
        return self.builder.build(graph)

    def __call__(self, graph: nx.Graph) -> ClusteringAlgorithm:
        return self.apply(graph)

    def __repr__(self) -> str:
        return f"AlgorithmProvider({self.algorithm!r}, {self.params!r})"


def available_algorithms() -> list:
    """Names accepted by ``AlgorithmProvider``."""
    return sorted(get_registry("algorithms").list())
