"""
Helpers over networkx graphs.

Edge weights are read from the ``weight`` attribute and default to 1.0.
Parallel edges of multigraphs contribute additively.
"""

from typing import Dict, Hashable, List

import networkx as nx
import numpy as np
from scipy import sparse

from .errors import ConfigurationError

WEIGHT = "weight"
DEFAULT_WEIGHT = 1.0


def require_undirected(graph: nx.Graph, algorithm: str) -> nx.Graph:
    """Return the graph, or raise ConfigurationError if it is directed."""
    if graph.is_directed():
        raise ConfigurationError(f"{algorithm} requires an undirected graph")
    return graph


def edge_weight(graph: nx.Graph, u: Hashable, v: Hashable) -> float:
    """
    Weight of the edge between two vertices.

    For multigraphs the weights of all parallel edges are summed.

    Raises:
        KeyError: if no edge connects ``u`` and ``v``.
    """
    if not graph.has_edge(u, v):
        raise KeyError(f"No edge between {u!r} and {v!r}")
    if graph.is_multigraph():
        return float(sum(
            data.get(WEIGHT, DEFAULT_WEIGHT)
            for data in graph[u][v].values()
        ))
    return float(graph[u][v].get(WEIGHT, DEFAULT_WEIGHT))


def neighbors(graph: nx.Graph, node: Hashable) -> List[Hashable]:
    """Distinct neighbours of a vertex, excluding the vertex itself."""
    return [n for n in graph.neighbors(node) if n != node]


def vertex_index_mapping(graph: nx.Graph) -> Dict[Hashable, int]:
    """Stable vertex to index bijection following vertex iteration order."""
    return {node: i for i, node in enumerate(graph.nodes())}


def adjacency_matrix(graph: nx.Graph, mapping: Dict[Hashable, int]) -> sparse.csr_matrix:
    """
    Symmetric weighted adjacency matrix in ``mapping`` order.

    Parallel edges are summed; self-loops are ignored.
    """
    n = len(mapping)
    rows: List[int] = []
    cols: List[int] = []
    data: List[float] = []

    for u, v, weight in graph.edges(data=WEIGHT, default=DEFAULT_WEIGHT):
        if u == v:
            continue
        i, j = mapping[u], mapping[v]
        rows.extend((i, j))
        cols.extend((j, i))
        data.extend((weight, weight))

    # duplicate coordinates are summed on conversion
    matrix = sparse.coo_matrix(
        (np.asarray(data, dtype=float), (np.asarray(rows, dtype=int), np.asarray(cols, dtype=int))),
        shape=(n, n),
    )
    return matrix.tocsr()
