"""Configuration schema and validation."""

from typing import Dict, Any, List
from dataclasses import dataclass, field
import yaml


@dataclass
class ClusteringConfig:
    name: str = "components"
    params: Dict[str, str] = field(default_factory=dict)


def load_config(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate configuration, return list of errors."""
    errors = []

    if "clustering" not in config:
        errors.append("Missing 'clustering' section")
    elif not isinstance(config["clustering"], dict):
        errors.append("'clustering' must be a mapping")
    else:
        section = config["clustering"]
        if "name" not in section:
            errors.append("Missing 'clustering.name'")
        if "params" in section and not isinstance(section["params"], dict):
            errors.append("'clustering.params' must be a mapping")

    return errors


def to_clustering_config(config: Dict[str, Any]) -> ClusteringConfig:
    """
    Build the clustering section of a validated configuration.

    YAML scalars are converted back to strings, the form algorithm
    parameters are parsed from.
    """
    section = config["clustering"]
    params = {
        str(key): _to_str(value)
        for key, value in (section.get("params") or {}).items()
    }
    return ClusteringConfig(name=str(section["name"]), params=params)


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
