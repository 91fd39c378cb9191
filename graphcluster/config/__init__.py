"""Algorithm configuration."""

from .parameters import Parameters
from .schema import ClusteringConfig, load_config, validate_config, to_clustering_config
