"""Internal data structures for LR-planarity testing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

# Edge type: oriented edge tuple (source, target); None is the absent edge
Edge = Optional[tuple[int, int]]

# Reasons reported for a non-planar verdict
EDGE_BOUND = "edge_bound"
CONFLICT = "conflict"


@dataclass
class PlanarityResult:
    """Result of a planarity test.

    Attributes:
        is_planar: Whether the graph is planar.
        reason: Why the graph was rejected: ``"edge_bound"`` when the edge
            count exceeds 3V - 6, ``"conflict"`` when the LR test found a
            left-right contradiction. None for planar graphs.
        roots: Roots of the DFS forest, one per connected component.
            Empty when the edge-count bound rejected the graph before any
            traversal.
    """

    is_planar: bool
    reason: Optional[str] = None
    roots: list[int] = field(default_factory=list)


@dataclass
class Interval:
    """An interval of back edges in the LR-planarity algorithm.

    low and high are back edge tuples (v, w) where v is a descendant
    and w is an ancestor. The edges between them are chained through
    ``ref``. None means the interval is empty.
    """

    low: Edge = None
    high: Edge = None

    def empty(self) -> bool:
        return self.low is None and self.high is None


@dataclass(eq=False)
class ConflictPair:
    """A left/right interval pair on the constraint stack.

    Pairs are compared by identity: the stack bottom recorded for an edge
    is the pair object that was on top when the edge was entered.
    """

    left: Interval = field(default_factory=Interval)
    right: Interval = field(default_factory=Interval)

    def empty(self) -> bool:
        return self.left.empty() and self.right.empty()

    def swap(self) -> None:
        self.left, self.right = self.right, self.left
