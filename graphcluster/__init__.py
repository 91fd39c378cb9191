"""
graphcluster: Extensible Graph Clustering Framework

Provides a common interface for graph clustering algorithms, selected and
configured at run time by name, including spectral clustering over a
pluggable point clusterer.
"""

__version__ = "0.1.0"

from .core.types import Clustering, NodeEmbedding
from .core.errors import GraphClusterError, ConfigurationError, NumericalError
from .core.registry import Registry, get_registry

from . import clustering
from . import weighting
from .points import PointClusterer, KMeansClusterer
from .provider import AlgorithmProvider, available_algorithms
