"""
Graph preprocessing utilities.

Helpers for checking a graph before it is handed to the planarity test or
the PMFG builder:
- Connected component detection
- Connectivity checks

Arcs of a directed graph are followed both ways, so the components of a
DiGraph are its weakly connected components.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Graph


# =============================================================================
# Connected Components
# =============================================================================


def _incident(graph: Graph, v: int) -> list[int]:
    if graph.is_directed:
        return graph.neighbors(v) + graph.predecessors(v)  # type: ignore[attr-defined]
    return graph.neighbors(v)


def connected_components(graph: Graph) -> list[list[int]]:
    """
    Split the vertices of a graph into connected components.

    Args:
        graph: Graph or DiGraph

    Returns:
        One list per component, each in breadth-first order from its
        smallest vertex. Components are sorted by that smallest vertex.

    Example:
        >>> from lrplanarity import Graph
        >>> connected_components(Graph(4, [(0, 1), (2, 3)]))
        [[0, 1], [2, 3]]
    """
    label = [-1] * graph.num_nodes
    components: list[list[int]] = []

    for seed in graph.nodes():
        if label[seed] >= 0:
            continue
        label[seed] = len(components)
        members = [seed]
        frontier: deque[int] = deque(members)

        while frontier:
            for w in _incident(graph, frontier.popleft()):
                if label[w] < 0:
                    label[w] = label[seed]
                    members.append(w)
                    frontier.append(w)

        components.append(members)

    return components


def is_connected(graph: Graph) -> bool:
    """
    Check whether every vertex is reachable from every other.

    Graphs with zero or one vertex are connected.
    """
    if graph.num_nodes <= 1:
        return True
    return len(connected_components(graph)) == 1


__all__ = [
    "connected_components",
    "is_connected",
]
