"""Planarity testing module using the LR-planarity algorithm.

Provides a linear-time planarity oracle for undirected and directed graphs.
Based on the Left-Right planarity algorithm of de Fraysseix and
Rosenstiehl, as presented by Brandes.

Public API:
    is_planar(graph) -> bool
    check_planarity(graph) -> PlanarityResult
"""

from __future__ import annotations

from ..types import Graph
from ._lr_planarity import lr_planarity_test
from ._types import PlanarityResult


def is_planar(graph: Graph) -> bool:
    """Test whether a graph is planar.

    This is the simple boolean API. For the rejection reason and the DFS
    roots, use ``check_planarity`` instead.

    Args:
        graph: Graph or DiGraph. Directed graphs are tested as their
            undirected skeleton.

    Returns:
        True if the graph is planar, False otherwise.
    """
    return check_planarity(graph).is_planar


def check_planarity(graph: Graph) -> PlanarityResult:
    """Test planarity and return detailed results.

    Preprocessing:
    - Directed graphs are reduced to their undirected skeleton.
    - Self-loops are removed (they do not affect planarity).
    - Graphs with more than 3V - 6 edges (V > 2) are rejected before any
      traversal.

    The input graph is never modified.

    Args:
        graph: Graph or DiGraph.

    Returns:
        PlanarityResult with is_planar flag, rejection reason and DFS roots.

    Raises:
        TypeError: If graph is not a Graph or DiGraph.
    """
    if not isinstance(graph, Graph):
        raise TypeError(f"expected Graph or DiGraph, got {type(graph).__name__}")

    return lr_planarity_test(graph.simple_copy())


__all__ = [
    "is_planar",
    "check_planarity",
    "PlanarityResult",
]
