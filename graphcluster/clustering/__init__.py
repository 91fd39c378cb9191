"""Graph clustering algorithms."""

from .base import ClusteringAlgorithm, ClusteringAlgorithmBuilder
from .trivial import EmptyClustering, TogetherClustering, SingletonClustering
from .connected_components import ComponentsClustering
from .chinese_whispers import ChineseWhispers
from .markov import MarkovClustering
from .markov_external import MarkovClusteringExternal
from .maxmax import MaxMax
from .spectral import SpectralClustering

__all__ = [
    "ClusteringAlgorithm",
    "ClusteringAlgorithmBuilder",
    "EmptyClustering",
    "TogetherClustering",
    "SingletonClustering",
    "ComponentsClustering",
    "ChineseWhispers",
    "MarkovClustering",
    "MarkovClusteringExternal",
    "MaxMax",
    "SpectralClustering",
]
