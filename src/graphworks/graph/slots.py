"""Edge-slot universe of the simple undirected graphs on a fixed vertex set.

For V vertices there are triangle_number(V-1) possible edges ("slots").
Slot ordinals follow the column-major walk over the strict lower triangle of
the adjacency matrix: for each column k = 0..V-1, rows i = k+1..V-1.  Written
as pairs (k, i) with k < i this is plain lexicographic order.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, Tuple

Pair = Tuple[int, int]


def triangle_number(k: int) -> int:
    """Return k(k+1)/2, or 0 for k <= 0."""
    if k <= 0:
        return 0
    return k * (k + 1) // 2


def edge_slot_count(vertex_count: int) -> int:
    """Number of possible edges of a simple graph on *vertex_count* vertices."""
    return triangle_number(vertex_count - 1)


@lru_cache(maxsize=None)
def slot_pairs(vertex_count: int) -> tuple[Pair, ...]:
    """Ordinal -> (k, i) with 0 <= k < i < vertex_count."""
    pairs: list[Pair] = []
    for k in range(vertex_count):
        for i in range(k + 1, vertex_count):
            pairs.append((k, i))
    return tuple(pairs)


@lru_cache(maxsize=None)
def _slot_index_table(vertex_count: int) -> Dict[Pair, int]:
    return {p: t for t, p in enumerate(slot_pairs(vertex_count))}


def slot_index(vertex_count: int, a: int, b: int) -> int:
    """
    Ordinal of the undirected pair {a, b}.

    Raises ValueError for a loop or an endpoint outside 0..vertex_count-1.
    """
    if a == b:
        raise ValueError(f"no edge slot for loop ({a}, {b})")
    pair = (a, b) if a < b else (b, a)
    try:
        return _slot_index_table(vertex_count)[pair]
    except KeyError:
        raise ValueError(f"pair {pair} outside vertex range 0..{vertex_count - 1}") from None
