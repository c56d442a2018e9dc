"""Exhaustive generation of labelled simple graphs.

For each vertex count v = 2..N and each edge count e = 1..triangle_number(v-1)
every e-subset of the edge slots is enumerated in reverse colex order and
turned into an adjacency matrix.  Each v therefore contributes all
2**triangle_number(v-1) - 1 labelled graphs with at least one edge.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TextIO

from graphworks.combinatorics.colex import Combination, reverse_colex_combinations
from graphworks.errors import InvalidVertexCount
from graphworks.graph.slots import edge_slot_count
from .materialize import Matrix, combination_to_matrix, format_generated_graph

ProgressFn = Callable[[int, int, int], None]


@dataclass(frozen=True)
class GeneratedGraph:
    vertex_count: int
    edge_count: int
    combination: Combination
    matrix: Matrix


def graph_count(vertex_count: int) -> int:
    """Number of labelled graphs with at least one edge on *vertex_count* vertices."""
    return 2 ** edge_slot_count(vertex_count) - 1


def graphs_for_vertex_count(vertex_count: int) -> Iterator[GeneratedGraph]:
    """
    Yield every graph with >= 1 edge on *vertex_count* vertices.

    Graphs come grouped by edge count (ascending), each group in reverse
    colex order of its edge-slot combination.  Fewer than 2 vertices yields
    nothing.
    """
    n_slots = edge_slot_count(vertex_count)
    for e in range(1, n_slots + 1):
        for comb in reverse_colex_combinations(n_slots, e):
            yield GeneratedGraph(vertex_count, e, comb, combination_to_matrix(vertex_count, comb))


def _check_max_vertices(max_vertices: object) -> int:
    if isinstance(max_vertices, bool) or not isinstance(max_vertices, int):
        raise InvalidVertexCount(max_vertices)
    if max_vertices <= 2:
        raise InvalidVertexCount(max_vertices)
    return max_vertices


def _generate(max_vertices: int) -> Iterator[GeneratedGraph]:
    for v in range(2, max_vertices + 1):
        yield from graphs_for_vertex_count(v)


def generate_graphs(max_vertices: int) -> Iterator[GeneratedGraph]:
    """
    Yield every graph with >= 1 edge on 2..max_vertices vertices.

    Raises InvalidVertexCount immediately (not on first iteration) unless
    max_vertices is an integer > 2.
    """
    return _generate(_check_max_vertices(max_vertices))


def write_generated_graphs(
    stream: TextIO,
    max_vertices: int,
    *,
    progress: Optional[ProgressFn] = None,
) -> int:
    """
    Write every generated graph to *stream* in the plain text matrix format.

    progress, if given, is called as progress(vertex_count, edge_count, n)
    after each finished (vertex_count, edge_count) group of n graphs.

    Returns the total number of graphs written.
    """
    graphs = generate_graphs(max_vertices)

    total = 0
    group_key: Optional[tuple[int, int]] = None
    group_size = 0
    for g in graphs:
        key = (g.vertex_count, g.edge_count)
        if key != group_key:
            if group_key is not None and progress is not None:
                progress(group_key[0], group_key[1], group_size)
            group_key = key
            group_size = 0
        stream.write(format_generated_graph(g.matrix))
        group_size += 1
        total += 1

    if group_key is not None and progress is not None:
        progress(group_key[0], group_key[1], group_size)
    return total
