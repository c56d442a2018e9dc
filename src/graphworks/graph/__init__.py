from .edges import WeightedEdge, edges_from_matrix, edges_to_nx
from .slots import triangle_number, edge_slot_count, slot_pairs, slot_index

__all__ = [
    "WeightedEdge",
    "edges_from_matrix",
    "edges_to_nx",
    "triangle_number",
    "edge_slot_count",
    "slot_pairs",
    "slot_index",
]
