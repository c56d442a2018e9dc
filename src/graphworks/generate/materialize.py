from __future__ import annotations

from typing import List, Sequence

from graphworks.combinatorics.colex import Combination
from graphworks.graph.slots import edge_slot_count, slot_pairs

Matrix = List[List[int]]


def combination_to_matrix(vertex_count: int, combination: Sequence[int]) -> Matrix:
    """
    Adjacency matrix of the graph whose edge slots are *combination*.

    Returns a vertex_count x vertex_count list of 0/1 rows, symmetric with a
    zero diagonal.  Slot t is the pair slot_pairs(vertex_count)[t].

    Raises ValueError if the ordinals are not strictly increasing or fall
    outside 0..edge_slot_count(vertex_count)-1.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")
    n_slots = edge_slot_count(vertex_count)
    prev = -1
    for t in combination:
        if t <= prev or t >= n_slots:
            raise ValueError(
                f"combination {tuple(combination)} is not a strictly increasing "
                f"subset of 0..{n_slots - 1}"
            )
        prev = t

    pairs = slot_pairs(vertex_count)
    adj = [[0] * vertex_count for _ in range(vertex_count)]
    for t in combination:
        k, i = pairs[t]
        adj[i][k] = 1
        adj[k][i] = 1
    return adj


def matrix_to_combination(matrix: Sequence[Sequence[int]]) -> Combination:
    """
    Edge-slot combination of a 0/1 adjacency matrix.

    Walks the strict lower triangle column by column, the same order that
    numbers the slots, and collects the ordinals of non-zero cells.
    """
    n = len(matrix)
    out: List[int] = []
    t = 0
    for k in range(n):
        for i in range(k + 1, n):
            if matrix[i][k]:
                out.append(t)
            t += 1
    return tuple(out)


def render_matrix(matrix: Sequence[Sequence[int]]) -> List[str]:
    """Rows of the matrix as strings of '0'/'1' without separators."""
    return ["".join("1" if x else "0" for x in row) for row in matrix]


def format_generated_graph(matrix: Sequence[Sequence[int]]) -> str:
    """
    Text block for one generated graph: the vertex count, one 0/1 line per
    row, then a blank line.
    """
    lines = [str(len(matrix))]
    lines.extend(render_matrix(matrix))
    return "\n".join(lines) + "\n\n"
