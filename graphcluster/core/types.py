"""Core data types shared by clustering algorithms."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Hashable, Iterable, Iterator, List, Tuple

import numpy as np


@dataclass(frozen=True)
class Clustering:
    """
    Result of a clustering algorithm.

    An ordered, immutable collection of clusters; each cluster is a frozenset
    of graph vertices.
    """

    clusters: Tuple[FrozenSet[Hashable], ...] = ()

    @classmethod
    def of(cls, clusters: Iterable[Iterable[Hashable]]) -> "Clustering":
        """Build a clustering from any iterable of vertex collections."""
        return cls(clusters=tuple(frozenset(cluster) for cluster in clusters))

    @property
    def number_of_clusters(self) -> int:
        return len(self.clusters)

    def __len__(self) -> int:
        return len(self.clusters)

    def __iter__(self) -> Iterator[FrozenSet[Hashable]]:
        return iter(self.clusters)

    def is_partition_of(self, vertices: Iterable[Hashable]) -> bool:
        """
        Check that clusters are pairwise disjoint and cover exactly the
        given vertices.
        """
        seen = set()
        for cluster in self.clusters:
            if seen & cluster:
                return False
            seen |= cluster
        return seen == set(vertices)

    def to_labels(self, vertices: Iterable[Hashable]) -> List[int]:
        """
        Cluster index per vertex, parallel to ``vertices``.

        Vertices that belong to no cluster get ``-1``. For overlapping
        clusterings the first cluster containing a vertex wins.
        """
        index: Dict[Hashable, int] = {}
        for cluster_id, cluster in enumerate(self.clusters):
            for vertex in cluster:
                index.setdefault(vertex, cluster_id)
        return [index.get(vertex, -1) for vertex in vertices]


@dataclass(frozen=True, eq=False)
class NodeEmbedding:
    """A graph vertex together with its point in a real vector space."""

    node: Hashable
    point: np.ndarray

    @property
    def dimension(self) -> int:
        return int(self.point.shape[0])
