"""Core types, registry, errors, and utilities."""

from .types import Clustering, NodeEmbedding
from .errors import GraphClusterError, ConfigurationError, NumericalError
from .registry import Registry, get_registry
from .random import set_seed, get_seed, get_rng
