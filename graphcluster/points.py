"""Clusterers over embedded points."""

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

import numpy as np
from sklearn.cluster import KMeans

from .core.random import get_seed
from .core.types import NodeEmbedding


class PointClusterer(ABC):
    """
    Abstract base class for clustering labeled points.

    Implementations must place every input point into exactly one group.
    """

    @abstractmethod
    def cluster(self, points: Sequence[NodeEmbedding]) -> List[List[NodeEmbedding]]:
        """
        Group points in vector space.

        Args:
            points: Embedded vertices, all of the same dimension.

        Returns:
            List of groups of the input points.
        """
        raise NotImplementedError


class KMeansClusterer(PointClusterer):
    """
    k-means over the point coordinates (scikit-learn).

    The initialization is randomized; results are reproducible for a fixed
    ``random_state``, which defaults to the global seed.
    """

    def __init__(self, n_clusters: int, random_state: Optional[int] = None, n_init: int = 10):
        """
        Initialize k-means clusterer.

        Args:
            n_clusters: Number of groups; capped at the number of points.
            random_state: Seed for centroid initialization.
            n_init: Number of initializations to run.
        """
        self.n_clusters = n_clusters
        self.random_state = get_seed() if random_state is None else random_state
        self.n_init = n_init

    def cluster(self, points: Sequence[NodeEmbedding]) -> List[List[NodeEmbedding]]:
        if not points:
            return []

        coordinates = np.vstack([p.point for p in points])
        model = KMeans(
            n_clusters=min(self.n_clusters, len(points)),
            random_state=self.random_state,
            n_init=self.n_init,
        )
        labels = model.fit_predict(coordinates)

        groups: Dict[int, List[NodeEmbedding]] = defaultdict(list)
        for point, label in zip(points, labels):
            groups[int(label)].append(point)

        return [groups[label] for label in sorted(groups)]
