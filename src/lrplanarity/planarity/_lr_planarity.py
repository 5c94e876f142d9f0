"""Left-right planarity test on per-edge lowpoints.

Based on the left-right criterion of de Fraysseix and Rosenstiehl, as
presented in Brandes, U. (2009), "The Left-Right Planarity Test".

Lowpoints and nesting depths are kept per oriented edge. Intervals store
back-edge references. The constraint stack tracks which back edges must go
to the same side, or to opposite sides, of the DFS tree path.

Both depth-first passes run on explicit frame stacks, so the traversal
depth is not limited by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Optional

from ..types import Graph
from ._types import CONFLICT, EDGE_BOUND, ConflictPair, Edge, Interval, PlanarityResult

# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def lr_planarity_test(graph: Graph) -> PlanarityResult:
    """Run LR-planarity on a simple undirected graph (no self-loops)."""
    n = graph.num_nodes
    m = graph.num_edges
    if n > 2 and m > 3 * n - 6:
        return PlanarityResult(is_planar=False, reason=EDGE_BOUND)

    state = _LRState(graph)
    state.orient()
    state.order_adjacency()

    if not state.test():
        return PlanarityResult(is_planar=False, reason=CONFLICT, roots=list(state.roots))

    return PlanarityResult(is_planar=True, roots=list(state.roots))


# ---------------------------------------------------------------------------
# Algorithm state
# ---------------------------------------------------------------------------

# Stack frame types for iterative DFS in the testing pass
_ENTER = 0  # walk ordered_adj[v] from idx onwards
_INTEGRATE = 1  # integrate return edges of the edge at idx in ordered_adj[v]


class _LRState:
    def __init__(self, graph: Graph) -> None:
        n = graph.num_nodes
        self.n = n
        self.adj: list[list[int]] = [graph.neighbors(v) for v in range(n)]
        self.roots: list[int] = []

        # Orientation outputs (per vertex)
        self.height: list[int] = [-1] * n
        self.parent_edge: list[Edge] = [None] * n
        self.out_adj: list[list[int]] = [[] for _ in range(n)]

        # Orientation outputs (per oriented edge)
        self.lowpt: dict[tuple[int, int], int] = {}
        self.lowpt2: dict[tuple[int, int], int] = {}
        self.nesting_depth: dict[tuple[int, int], int] = {}

        self.ordered_adj: list[list[int]] = [[] for _ in range(n)]

        # Testing data
        self.S: list[ConflictPair] = []
        self.stack_bottom: dict[tuple[int, int], Optional[ConflictPair]] = {}
        self.lowpt_edge: dict[tuple[int, int], tuple[int, int]] = {}
        self.ref: dict[tuple[int, int], Edge] = {}
        self.side: dict[tuple[int, int], int] = {}

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------

    def _is_tree_edge(self, e: tuple[int, int]) -> bool:
        return self.parent_edge[e[1]] == e

    def _conflicting(self, iv: Interval, b: tuple[int, int]) -> bool:
        if iv.empty():
            return False
        assert iv.high is not None
        return self.lowpt[iv.high] > self.lowpt[b]

    def _lowest(self, cp: ConflictPair) -> int:
        """Return the lowest lowpoint of a conflict pair's intervals."""
        if cp.left.empty():
            assert cp.right.low is not None
            return self.lowpt[cp.right.low]
        if cp.right.empty():
            assert cp.left.low is not None
            return self.lowpt[cp.left.low]
        assert cp.left.low is not None and cp.right.low is not None
        return min(self.lowpt[cp.left.low], self.lowpt[cp.right.low])

    # -------------------------------------------------------------------
    # Orientation pass
    # -------------------------------------------------------------------

    def orient(self) -> None:
        """Orient every edge and compute lowpoints and nesting depths.

        Each unvisited vertex, in ascending order, becomes the root of a new
        DFS tree.
        """
        next_idx = [0] * self.n
        # True while v waits for the subtree behind adj[v][next_idx[v]]
        descending = [False] * self.n

        for root in range(self.n):
            if self.height[root] != -1:
                continue
            self.height[root] = 0
            self.roots.append(root)

            stack: list[int] = [root]
            while stack:
                v = stack[-1]
                descended = False

                while next_idx[v] < len(self.adj[v]):
                    w = self.adj[v][next_idx[v]]
                    vw = (v, w)

                    if descending[v]:
                        descending[v] = False
                    else:
                        # An edge is oriented once it has a lowpoint
                        if vw in self.lowpt or (w, v) in self.lowpt:
                            next_idx[v] += 1
                            continue

                        self.out_adj[v].append(w)
                        self.lowpt[vw] = self.height[v]
                        self.lowpt2[vw] = self.height[v]

                        if self.height[w] == -1:
                            # Tree edge
                            self.parent_edge[w] = vw
                            self.height[w] = self.height[v] + 1
                            descending[v] = True
                            stack.append(w)
                            descended = True
                            break

                        # Back edge
                        self.lowpt[vw] = self.height[w]

                    self._finish_edge(vw)
                    next_idx[v] += 1

                if not descended:
                    stack.pop()

    def _finish_edge(self, vw: tuple[int, int]) -> None:
        """Assign the nesting depth of vw and fold its lowpoints into the parent edge."""
        v = vw[0]
        self.nesting_depth[vw] = 2 * self.lowpt[vw]
        if self.lowpt2[vw] < self.height[v]:
            # Chordal
            self.nesting_depth[vw] += 1

        e = self.parent_edge[v]
        if e is None:
            return
        if self.lowpt[vw] < self.lowpt[e]:
            self.lowpt2[e] = min(self.lowpt[e], self.lowpt2[vw])
            self.lowpt[e] = self.lowpt[vw]
        elif self.lowpt[vw] > self.lowpt[e]:
            self.lowpt2[e] = min(self.lowpt2[e], self.lowpt[vw])
        else:
            self.lowpt2[e] = min(self.lowpt2[e], self.lowpt2[vw])

    def order_adjacency(self) -> None:
        """Sort each vertex's outgoing edges by nesting depth.

        The sort is stable, so edges with equal nesting depth keep the order
        in which they were oriented.
        """
        for v in range(self.n):
            self.ordered_adj[v] = sorted(
                self.out_adj[v],
                key=lambda w, _v=v: self.nesting_depth[(_v, w)],  # type: ignore[misc]
            )

    # -------------------------------------------------------------------
    # Testing pass
    # -------------------------------------------------------------------

    def test(self) -> bool:
        """Run the testing pass from every root; False on the first conflict."""
        for root in self.roots:
            if not self._test_tree(root):
                return False
        return True

    def _test_tree(self, root: int) -> bool:
        stack: list[tuple[int, int, int]] = [(_ENTER, root, 0)]

        while stack:
            ftype, v, idx = stack[-1]

            if ftype == _ENTER:
                if idx >= len(self.ordered_adj[v]):
                    # v exhausted, hand its parent edge back
                    stack.pop()
                    e = self.parent_edge[v]
                    if e is not None:
                        self._remove_back_edges(e)
                    continue

                w = self.ordered_adj[v][idx]
                ei = (v, w)
                self.stack_bottom[ei] = self.S[-1] if self.S else None

                # Advance to next edge; integrate after processing ei
                stack[-1] = (_ENTER, v, idx + 1)
                stack.append((_INTEGRATE, v, idx))

                if self._is_tree_edge(ei):
                    stack.append((_ENTER, w, 0))
                else:
                    # Back edge
                    self.lowpt_edge[ei] = ei
                    self.S.append(ConflictPair(left=Interval(), right=Interval(low=ei, high=ei)))

            else:
                stack.pop()
                w = self.ordered_adj[v][idx]
                ei = (v, w)

                if self.lowpt[ei] < self.height[v]:
                    # ei has a return edge; v is not a root here
                    e = self.parent_edge[v]
                    assert e is not None
                    if idx == 0:
                        self.lowpt_edge[e] = self.lowpt_edge[ei]
                    elif not self._add_constraints(ei, e):
                        return False

        return True

    def _add_constraints(self, ei: tuple[int, int], e: tuple[int, int]) -> bool:
        cp = ConflictPair()

        # Merge return edges of ei into cp.right
        sb = self.stack_bottom[ei]
        while self.S and self.S[-1] is not sb:
            q = self.S.pop()
            if not q.left.empty():
                q.swap()
            if not q.left.empty():
                return False
            assert q.right.low is not None
            if self.lowpt[q.right.low] > self.lowpt[e]:
                # Merge intervals
                if cp.right.empty():
                    cp.right.high = q.right.high
                else:
                    assert cp.right.low is not None
                    self.ref[cp.right.low] = q.right.high
                cp.right.low = q.right.low
            else:
                # Align
                self.ref[q.right.low] = self.lowpt_edge[e]

        # Merge conflicting return edges of earlier siblings into cp.left
        while self.S and (
            self._conflicting(self.S[-1].left, ei) or self._conflicting(self.S[-1].right, ei)
        ):
            q = self.S.pop()
            if self._conflicting(q.right, ei):
                q.swap()
            if self._conflicting(q.right, ei):
                return False
            # Merge interval below lowpt(ei) into cp.right
            if cp.right.low is not None:
                self.ref[cp.right.low] = q.right.high
            else:
                cp.right.high = q.right.high
            if q.right.low is not None:
                cp.right.low = q.right.low

            if cp.left.empty():
                cp.left.high = q.left.high
            else:
                assert cp.left.low is not None
                self.ref[cp.left.low] = q.left.high
            cp.left.low = q.left.low

        if not cp.empty():
            self.S.append(cp)

        return True

    def _trim_back_edges(self, u: int) -> None:
        """Drop or shorten the conflict pairs whose back edges end at u."""
        # Drop entire conflict pairs
        while self.S and self._lowest(self.S[-1]) == self.height[u]:
            pair = self.S.pop()
            if pair.left.low is not None:
                self.side[pair.left.low] = -1

        if not self.S:
            return

        # One more conflict pair to consider
        pair = self.S.pop()

        # Trim left interval
        while pair.left.high is not None and pair.left.high[1] == u:
            pair.left.high = self.ref.get(pair.left.high)
        if pair.left.high is None and pair.left.low is not None:
            # Just emptied
            self.ref[pair.left.low] = pair.right.low
            self.side[pair.left.low] = -1
            pair.left.low = None

        # Trim right interval
        while pair.right.high is not None and pair.right.high[1] == u:
            pair.right.high = self.ref.get(pair.right.high)
        if pair.right.high is None and pair.right.low is not None:
            # Just emptied
            self.ref[pair.right.low] = pair.left.low
            self.side[pair.right.low] = -1
            pair.right.low = None

        self.S.append(pair)

    def _remove_back_edges(self, e: tuple[int, int]) -> None:
        u = e[0]
        self._trim_back_edges(u)

        # Side of e is the side of its highest return edge
        if self.lowpt[e] < self.height[u]:
            top = self.S[-1]
            hl = top.left.high
            hr = top.right.high
            if hl is not None and (hr is None or self.lowpt[hl] > self.lowpt[hr]):
                self.ref[e] = hl
            else:
                self.ref[e] = hr
