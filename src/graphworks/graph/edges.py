from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import networkx as nx


@dataclass(frozen=True)
class WeightedEdge:
    """
    One undirected weighted edge.

    u, v: unordered endpoints ((u, v) and (v, u) name the same edge)
    w:    integer weight
    """

    u: int
    v: int
    w: int

    def endpoints(self) -> tuple[int, int]:
        return (self.u, self.v)

    def other(self, x: int) -> int:
        """Endpoint opposite to *x*."""
        if x == self.u:
            return self.v
        if x == self.v:
            return self.u
        raise ValueError(f"vertex {x} is not an endpoint of {self.format()}")

    def format(self) -> str:
        return f"<{self.u}, {self.v}> weight[{self.w}]"


def edges_from_matrix(matrix: Sequence[Sequence[int]]) -> List[WeightedEdge]:
    """
    Edge list of a square weight matrix.

    Reads row j, column i for i >= j (upper triangle including the diagonal)
    and keeps non-zero cells as WeightedEdge(u=i, v=j, w=value), in row-major
    order.  Cells below the diagonal are ignored; the matrix is taken to be
    symmetric.
    """
    n = len(matrix)
    for j, row in enumerate(matrix):
        if len(row) != n:
            raise ValueError(f"weight matrix is not square: row {j} has {len(row)} entries, expected {n}")

    edges: List[WeightedEdge] = []
    for j in range(n):
        row = matrix[j]
        for i in range(j, n):
            w = row[i]
            if w != 0:
                edges.append(WeightedEdge(i, j, int(w)))
    return edges


def edges_to_nx(edges: Sequence[WeightedEdge], vertex_count: Optional[int] = None) -> nx.Graph:
    """
    Build a weighted NetworkX Graph from an edge list.

    If *vertex_count* is given, vertices 0..vertex_count-1 are added even when
    isolated.
    """
    G = nx.Graph()
    if vertex_count is not None:
        G.add_nodes_from(range(vertex_count))
    G.add_weighted_edges_from((e.u, e.v, e.w) for e in edges)
    return G
