"""
Input validation utilities for graphs and distance matrices.

Provides centralized validation functions for vertex counts, edge
endpoints, completeness, connectivity and distance matrices. Raises
descriptive exceptions on invalid input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np
import scipy.sparse

from .preprocessing import is_connected

if TYPE_CHECKING:
    from .types import Graph


class ValidationError(ValueError):
    """Base exception for graph validation errors."""

    pass


class InvalidGraphError(ValidationError):
    """Raised when a graph cannot be constructed from the given parameters."""

    pass


class InvalidEdgeError(ValidationError):
    """Raised when an edge references vertices outside the graph."""

    pass


class NotCompleteError(ValidationError):
    """Raised when a complete graph is required but edges are missing."""

    pass


class DisconnectedGraphError(ValidationError):
    """Raised when a connected graph is required."""

    pass


class InvalidDistanceMatrixError(ValidationError):
    """Raised when a distance matrix is not real, symmetric and non-negative."""

    pass


def validate_num_nodes(num_nodes: int) -> int:
    """
    Validate a vertex count.

    Args:
        num_nodes: Number of vertices

    Returns:
        Validated vertex count

    Raises:
        InvalidGraphError: If num_nodes is negative
    """
    if num_nodes < 0:
        raise InvalidGraphError(f"num_nodes must be >= 0, got {num_nodes}")
    return num_nodes


def validate_vertex(v: int, num_nodes: int) -> int:
    """
    Validate that a vertex index lies in [0, num_nodes).

    Raises:
        InvalidEdgeError: If v is out of bounds
    """
    if v < 0 or v >= num_nodes:
        raise InvalidEdgeError(f"vertex {v} out of bounds [0, {num_nodes})")
    return v


def validate_complete(graph: Graph) -> None:
    """
    Validate that an undirected graph is complete.

    Self-loops are not counted, so a loop cannot stand in for a missing edge.

    Raises:
        NotCompleteError: If the number of non-loop edges differs from N(N-1)/2
    """
    n = graph.num_nodes
    m = sum(1 for u, v in graph.edges() if u != v)
    expected = n * (n - 1) // 2
    if m != expected:
        raise NotCompleteError(
            f"the graph is not complete. It should have {expected} edges "
            f"but it has {m}."
        )


def validate_connected(graph: Graph) -> None:
    """
    Validate that a graph is connected.

    Raises:
        DisconnectedGraphError: If the graph has more than one component
    """
    if not is_connected(graph):
        raise DisconnectedGraphError("the graph is not connected.")


def validate_distance_matrix(distmx: Any, num_nodes: int) -> np.ndarray:
    """
    Validate a distance matrix for a graph on num_nodes vertices.

    Sparse matrices are converted to dense arrays first.

    Args:
        distmx: Square matrix (array-like or scipy.sparse matrix)
        num_nodes: Expected matrix dimension

    Returns:
        The matrix as a dense numpy array

    Raises:
        InvalidDistanceMatrixError: If the matrix has the wrong shape, is not
            real-valued, is not symmetric or has negative elements
    """
    if scipy.sparse.issparse(distmx):
        arr = distmx.toarray()
    else:
        arr = np.asarray(distmx)

    if arr.shape != (num_nodes, num_nodes):
        raise InvalidDistanceMatrixError(
            f"distmx must have shape ({num_nodes}, {num_nodes}), got {arr.shape}"
        )
    # bool, signed/unsigned int, float
    if arr.dtype.kind not in "biuf":
        raise InvalidDistanceMatrixError(f"the dtype of distmx is not real, got {arr.dtype}")
    if not np.array_equal(arr, arr.T):
        raise InvalidDistanceMatrixError("distmx is not symmetric.")
    if np.any(arr < 0):
        raise InvalidDistanceMatrixError("distmx has negative elements.")

    return arr


__all__ = [
    "ValidationError",
    "InvalidGraphError",
    "InvalidEdgeError",
    "NotCompleteError",
    "DisconnectedGraphError",
    "InvalidDistanceMatrixError",
    "validate_num_nodes",
    "validate_vertex",
    "validate_complete",
    "validate_connected",
    "validate_distance_matrix",
]
