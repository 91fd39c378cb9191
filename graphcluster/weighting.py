"""
Neighbourhood weighting functions for label propagation.

A weighting is a pure function ``(graph, node, neighbor) -> float`` scoring
how strongly ``neighbor`` votes for its label at ``node``.
"""

import logging
import math
from typing import Callable, Hashable, Optional

import networkx as nx

from .core.errors import ConfigurationError
from .core.graph import edge_weight
from .core.registry import get_registry

logger = logging.getLogger(__name__)

Weighting = Callable[[nx.Graph, Hashable, Hashable], float]

DEFAULT_MODE = "top"


def label(graph: nx.Graph, node: Hashable, neighbor: Hashable) -> float:
    """Every neighbour votes with the same weight."""
    return 1.0


def top(graph: nx.Graph, node: Hashable, neighbor: Hashable) -> float:
    """
    Raw weight of the edge between ``node`` and ``neighbor``.

    Raises:
        KeyError: if the vertices are not adjacent.
    """
    return edge_weight(graph, node, neighbor)


def linear(graph: nx.Graph, node: Hashable, neighbor: Hashable) -> float:
    """Edge weight divided by the degree of the neighbour."""
    return edge_weight(graph, node, neighbor) / graph.degree(neighbor)


def log(graph: nx.Graph, node: Hashable, neighbor: Hashable) -> float:
    """Edge weight divided by the log-degree of the neighbour."""
    return edge_weight(graph, node, neighbor) / math.log1p(graph.degree(neighbor))


_weightings = get_registry("weightings")
_weightings.register("label", factory=label)
_weightings.register("top", factory=top)
_weightings.register("log", factory=log)
_weightings.register("lin", factory=linear)
_weightings.register("linear", factory=linear)


def resolve_weighting(mode: Optional[str] = None) -> Weighting:
    """
    Resolve a weighting mode name to its function.

    Args:
        mode: Case-insensitive mode name; ``None`` selects ``top``.

    Returns:
        The weighting function.

    Raises:
        ConfigurationError: if the mode is unknown.
    """
    key = (mode or DEFAULT_MODE).lower()

    if key == "nolog":  # used in many papers, kept for compatibility
        logger.warning("Please update your configuration: 'nolog' weighting is renamed to 'lin'.")
        key = "linear"

    if key not in _weightings:
        raise ConfigurationError(f"Unknown mode: {mode}")

    return _weightings.get(key)
