from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from graphworks.errors import DisconnectedGraphError
from graphworks.graph.edges import WeightedEdge


@dataclass(frozen=True)
class SpanningTree:
    """
    Result of prim_mst.

    edges:        tree edges in the order they were chosen
    total_weight: sum of their weights
    vertices:     saturated vertex set in the order vertices joined the tree
    """

    edges: Tuple[WeightedEdge, ...]
    total_weight: int
    vertices: Tuple[int, ...]


def _min_incident(edges: Sequence[WeightedEdge], saturated: Set[int]) -> Optional[int]:
    """
    Index of the lightest edge with exactly one endpoint in *saturated*.

    Ties go to the first such edge in *edges*.  None if no edge qualifies.
    """
    best: Optional[int] = None
    best_w = 0
    for idx, e in enumerate(edges):
        if (e.u in saturated) == (e.v in saturated):
            continue
        if best is None or e.w < best_w:
            best = idx
            best_w = e.w
    return best


def prim_mst(edges: Sequence[WeightedEdge], vertex_count: int) -> SpanningTree:
    """
    Minimum spanning tree by Prim's algorithm with a linear edge scan.

    The tree grows from edges[0].u.  Each round adds the lightest edge that
    leaves the saturated vertex set, so the run costs O(V * E).

    An empty edge list or vertex_count <= 1 gives an empty tree.  Raises
    DisconnectedGraphError when no edge leaves the saturated set before the
    tree has vertex_count - 1 edges.
    """
    if not edges or vertex_count <= 1:
        return SpanningTree(edges=(), total_weight=0, vertices=())

    start = edges[0].u
    order: List[int] = [start]
    saturated: Set[int] = {start}
    tree: List[WeightedEdge] = []
    total = 0

    while len(tree) < vertex_count - 1:
        idx = _min_incident(edges, saturated)
        if idx is None:
            raise DisconnectedGraphError(vertex_count, len(tree), tuple(order))

        e = edges[idx]
        new_vertex = e.v if e.u in saturated else e.u
        saturated.add(new_vertex)
        order.append(new_vertex)
        tree.append(e)
        total += e.w

    return SpanningTree(edges=tuple(tree), total_weight=total, vertices=tuple(order))
