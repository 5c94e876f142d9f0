"""
Graph types used across the package.

This module provides the graph model consumed by the planarity test and
the PMFG builder:
- Graph: simple undirected graph on vertices 0..n-1 with optional weights
- DiGraph: directed counterpart, reducible to its undirected skeleton
- GraphStructureWarning: warning for tolerated input anomalies
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

import numpy as np

from .validation import validate_num_nodes, validate_vertex

if TYPE_CHECKING:
    from typing_extensions import Self


class GraphStructureWarning(UserWarning):
    """Warning issued when graph input contains tolerated anomalies."""

    pass


class Graph:
    """
    Simple undirected graph.

    Vertices are the integers 0..num_nodes-1. At most one edge joins any
    pair of vertices; a self-loop is stored once and appears once in its
    vertex's neighbor list. Edges may carry a weight.

    Example:
        g = Graph(3, [(0, 1), (1, 2)])
        g.add_edge(2, 0, weight=0.5)
        g.has_edge(0, 2)  # True
    """

    is_directed = False

    def __init__(
        self,
        num_nodes: int = 0,
        edges: Iterable[tuple[int, int]] = (),
    ) -> None:
        """
        Initialize graph with num_nodes vertices and the given edges.

        Args:
            num_nodes: Number of vertices
            edges: Edge tuples; repeated edges are ignored with a warning

        Raises:
            InvalidGraphError: If num_nodes is negative
            InvalidEdgeError: If an edge references a missing vertex
        """
        validate_num_nodes(num_nodes)
        self._adj: list[list[int]] = [[] for _ in range(num_nodes)]
        # edge key -> weight (None for unweighted)
        self._edges: dict[tuple[int, int], Optional[float]] = {}

        for u, v in edges:
            if not self.add_edge(u, v):
                warnings.warn(
                    f"Duplicate edge ({u}, {v}) ignored.",
                    GraphStructureWarning,
                    stacklevel=2,
                )

    # -------------------------------------------------------------------
    # Size
    # -------------------------------------------------------------------

    @property
    def num_nodes(self) -> int:
        """Number of vertices."""
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        """Number of edges (self-loops included)."""
        return len(self._edges)

    def nodes(self) -> range:
        return range(len(self._adj))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(num_nodes={self.num_nodes}, num_edges={self.num_edges})"

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------

    def _key(self, u: int, v: int) -> tuple[int, int]:
        return (u, v) if u <= v else (v, u)

    def neighbors(self, v: int) -> list[int]:
        """Return the neighbors of v in insertion order."""
        validate_vertex(v, self.num_nodes)
        return list(self._adj[v])

    def degree(self, v: int) -> int:
        validate_vertex(v, self.num_nodes)
        return len(self._adj[v])

    def has_edge(self, u: int, v: int) -> bool:
        return self._key(u, v) in self._edges

    def edges(self) -> Iterator[tuple[int, int]]:
        """
        Iterate over edges.

        Each undirected edge is yielded once as (min, max), ordered by the
        smaller endpoint and then by insertion.
        """
        for u, neighbors in enumerate(self._adj):
            for v in neighbors:
                if u <= v:
                    yield (u, v)

    def weight(self, u: int, v: int) -> float:
        """
        Return the weight of edge (u, v).

        Unweighted edges have weight 1.0.

        Raises:
            KeyError: If the edge does not exist
        """
        key = self._key(u, v)
        if key not in self._edges:
            raise KeyError(f"no edge ({u}, {v})")
        w = self._edges[key]
        return 1.0 if w is None else w

    def weight_matrix(self) -> np.ndarray:
        """Return a dense (n, n) matrix of edge weights, 0.0 where no edge exists."""
        n = self.num_nodes
        mat = np.zeros((n, n), dtype=float)
        for (u, v), w in self._edges.items():
            value = 1.0 if w is None else w
            mat[u, v] = value
            if not self.is_directed:
                mat[v, u] = value
        return mat

    # -------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------

    def add_node(self) -> int:
        """Add a vertex and return its index."""
        self._adj.append([])
        return len(self._adj) - 1

    def add_edge(self, u: int, v: int, weight: Optional[float] = None) -> bool:
        """
        Add edge (u, v).

        Returns:
            True if the edge was added, False if it already existed.

        Raises:
            InvalidEdgeError: If u or v is not a vertex
        """
        n = self.num_nodes
        validate_vertex(u, n)
        validate_vertex(v, n)
        key = self._key(u, v)
        if key in self._edges:
            return False
        self._edges[key] = weight
        self._adj[u].append(v)
        if u != v:
            self._adj[v].append(u)
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        """
        Remove edge (u, v).

        Returns:
            True if the edge was removed, False if it did not exist.
        """
        key = self._key(u, v)
        if key not in self._edges:
            return False
        del self._edges[key]
        self._adj[u].remove(v)
        if u != v:
            self._adj[v].remove(u)
        return True

    # -------------------------------------------------------------------
    # Copies
    # -------------------------------------------------------------------

    def copy(self) -> Self:
        """Return an independent copy of this graph."""
        g = type(self)(self.num_nodes)
        for u, v in self.edges():
            g.add_edge(u, v, self._edges[self._key(u, v)])
        return g

    def simple_copy(self) -> Graph:
        """
        Return an undirected copy without self-loops.

        For directed graphs this is the undirected skeleton: antiparallel
        arcs collapse into one edge, keeping the weight of the first arc.
        """
        g = Graph(self.num_nodes)
        for u, v in self.edges():
            if u != v:
                g.add_edge(u, v, self._edges[self._key(u, v)])
        return g


class DiGraph(Graph):
    """
    Simple directed graph.

    At most one arc runs from u to v; the arcs (u, v) and (v, u) may both
    exist. neighbors() returns successors.
    """

    is_directed = True

    def __init__(
        self,
        num_nodes: int = 0,
        edges: Iterable[tuple[int, int]] = (),
    ) -> None:
        self._pred: list[list[int]] = [[] for _ in range(num_nodes)]
        super().__init__(num_nodes, edges)

    def _key(self, u: int, v: int) -> tuple[int, int]:
        return (u, v)

    def predecessors(self, v: int) -> list[int]:
        validate_vertex(v, self.num_nodes)
        return list(self._pred[v])

    def degree(self, v: int) -> int:
        """Return in-degree plus out-degree of v."""
        validate_vertex(v, self.num_nodes)
        return len(self._adj[v]) + len(self._pred[v])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate over arcs as (source, target), ordered by source."""
        for u, successors in enumerate(self._adj):
            for v in successors:
                yield (u, v)

    def add_node(self) -> int:
        self._pred.append([])
        return super().add_node()

    def add_edge(self, u: int, v: int, weight: Optional[float] = None) -> bool:
        n = self.num_nodes
        validate_vertex(u, n)
        validate_vertex(v, n)
        if (u, v) in self._edges:
            return False
        self._edges[(u, v)] = weight
        self._adj[u].append(v)
        self._pred[v].append(u)
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        if (u, v) not in self._edges:
            return False
        del self._edges[(u, v)]
        self._adj[u].remove(v)
        self._pred[v].remove(u)
        return True

    def to_undirected(self) -> Graph:
        """Return the undirected skeleton, keeping self-loops."""
        g = Graph(self.num_nodes)
        for u, v in self.edges():
            g.add_edge(u, v, self._edges[(u, v)])
        return g


__all__ = [
    "Graph",
    "DiGraph",
    "GraphStructureWarning",
]
