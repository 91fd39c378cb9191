"""
Spectral embedding of graph vertices.

Builds the graph Laplacian from the weighted adjacency matrix and maps each
vertex to its row in the eigenvectors of the k smallest non-trivial
eigenvalues.
"""

import logging
from typing import Dict, Hashable, List

import networkx as nx
import numpy as np
from scipy import linalg
from scipy import sparse
from scipy.sparse import csgraph
from scipy.sparse.linalg import eigsh, ArpackError

from .core.errors import NumericalError
from .core.graph import adjacency_matrix
from .core.types import NodeEmbedding

logger = logging.getLogger(__name__)

#: Graphs up to this many vertices are decomposed with a dense solver.
DENSE_LIMIT = 1000

#: Shift for the sparse solver; below 0 so that ``L - SHIFT * I`` is positive definite.
SHIFT = -1e-3


def laplacian(graph: nx.Graph, mapping: Dict[Hashable, int], normalized: bool = True) -> np.ndarray:
    """
    Laplacian of the graph in ``mapping`` order.

    Args:
        graph: Undirected weighted graph.
        mapping: Vertex to row index.
        normalized: Use the symmetric normalized Laplacian
            ``I - D^-1/2 A D^-1/2`` instead of ``D - A``.
    """
    adjacency = adjacency_matrix(graph, mapping)
    return csgraph.laplacian(adjacency, normed=normalized)


def _smallest_eigenvectors(matrix, count: int) -> np.ndarray:
    n = matrix.shape[0]

    if n <= DENSE_LIMIT or count >= n - 1:
        dense = matrix.toarray() if hasattr(matrix, "toarray") else np.asarray(matrix)
        _, vectors = linalg.eigh(dense, subset_by_index=[0, count - 1])
        return vectors

    # shift-invert around SHIFT finds the eigenvalues nearest 0; a seeded
    # start vector keeps ARPACK deterministic and off the null space
    v0 = np.random.default_rng(0).uniform(-1.0, 1.0, n)
    values, vectors = eigsh(sparse.csc_matrix(matrix, dtype=float), k=count, sigma=SHIFT, which="LM", v0=v0)
    order = np.argsort(values)
    return vectors[:, order]


def compute_spectral_embedding(
    graph: nx.Graph,
    mapping: Dict[Hashable, int],
    k: int,
    normalized: bool = True,
) -> List[NodeEmbedding]:
    """
    Embed graph vertices into a k-dimensional space.

    Args:
        graph: Undirected weighted graph; parallel edges are summed.
        mapping: Vertex to index bijection defining the row order.
        k: Embedding dimensionality.
        normalized: Use the normalized Laplacian.

    Returns:
        One NodeEmbedding per vertex, in ``mapping`` order.

    Raises:
        NumericalError: if ``k`` is not below the number of vertices or the
            eigen-decomposition fails.
    """
    n = len(mapping)

    if k < 1:
        raise NumericalError(f"Embedding dimension must be positive, got {k}")
    if k >= n:
        raise NumericalError(
            f"Cannot compute {k} non-trivial eigenvectors for a graph with {n} vertices"
        )

    matrix = laplacian(graph, mapping, normalized=normalized)

    try:
        vectors = _smallest_eigenvectors(matrix, k + 1)
    except (linalg.LinAlgError, ArpackError, RuntimeError) as e:
        raise NumericalError(f"Eigen-decomposition failed: {e}") from e

    # the first eigenvector belongs to the trivial eigenvalue 0
    vectors = vectors[:, 1:k + 1]
    logger.debug("Computed %d-dimensional embedding of %d vertices", k, n)

    return [NodeEmbedding(node=node, point=vectors[i].copy()) for node, i in mapping.items()]
