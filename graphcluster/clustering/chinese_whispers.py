"""Chinese Whispers label propagation."""

import logging
from collections import defaultdict
from typing import Dict, Hashable, List, Optional

import networkx as nx

from .base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from ..config.parameters import Parameters
from ..core.errors import ConfigurationError
from ..core.graph import neighbors, require_undirected
from ..core.random import get_rng, get_seed
from ..core.types import Clustering
from ..core.registry import get_registry
from ..weighting import Weighting, resolve_weighting, top

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 20


class ChineseWhispers(ClusteringAlgorithm):
    """
    Chinese Whispers (Biemann, 2006).

    Every vertex starts in its own class. On each iteration the vertices are
    visited in random order and take the label with the highest total score
    among their neighbours, where each neighbour contributes the value of
    the weighting function. The procedure stops when no label changes or
    after the configured number of iterations.
    """

    class Builder(ClusteringAlgorithmBuilder):
        def __init__(
            self,
            weighting: Weighting = top,
            iterations: int = DEFAULT_ITERATIONS,
            seed: Optional[int] = None,
        ):
            """
            Args:
                weighting: Neighbourhood weighting function.
                iterations: Maximum number of propagation rounds.
                seed: Seed for the vertex visiting order; defaults to the
                    global seed.
            """
            self.weighting = weighting
            self.iterations = iterations
            self.seed = seed

        def build(self, graph: nx.Graph) -> "ChineseWhispers":
            return ChineseWhispers(graph, self.weighting, self.iterations, self.seed)

    def __init__(
        self,
        graph: nx.Graph,
        weighting: Weighting = top,
        iterations: int = DEFAULT_ITERATIONS,
        seed: Optional[int] = None,
    ):
        if weighting is None:
            raise ConfigurationError("Chinese Whispers requires a weighting function")
        if iterations < 1:
            raise ConfigurationError("Chinese Whispers requires at least one iteration")
        super().__init__(require_undirected(graph, "Chinese Whispers"))
        self.weighting = weighting
        self.iterations = iterations
        self.seed = get_seed() if seed is None else seed
        self.steps = 0

    def _compute(self) -> Clustering:
        nodes = list(self.graph.nodes())
        labels: Dict[Hashable, int] = {node: i for i, node in enumerate(nodes)}
        rng = get_rng(self.seed)

        for step in range(1, self.iterations + 1):
            self.steps = step
            changed = False

            for i in rng.permutation(len(nodes)):
                node = nodes[i]
                label = self._choose_label(node, labels)
                if label is not None and label != labels[node]:
                    labels[node] = label
                    changed = True

            if not changed:
                break

        logger.debug("Chinese Whispers stopped after %d iterations", self.steps)

        clusters: Dict[int, List[Hashable]] = defaultdict(list)
        for node in nodes:
            clusters[labels[node]].append(node)

        return Clustering.of(clusters.values())

    def _choose_label(self, node: Hashable, labels: Dict[Hashable, int]) -> Optional[int]:
        """Label with the highest score in the neighbourhood, ties to the smallest."""
        scores: Dict[int, float] = defaultdict(float)
        for neighbor in neighbors(self.graph, node):
            scores[labels[neighbor]] += self.weighting(self.graph, node, neighbor)

        if not scores:
            return None

        return max(sorted(scores), key=lambda label: scores[label])


def _chinese_whispers(params: Parameters) -> ClusteringAlgorithmBuilder:
    return ChineseWhispers.Builder(
        weighting=resolve_weighting(params.get_str("mode")),
        iterations=params.get_int("iterations", DEFAULT_ITERATIONS),
        seed=params.get_int("seed"),
    )


get_registry("algorithms").register("cw", factory=_chinese_whispers)
