from .layouts import base_layout
from .draw import draw_spanning_tree, draw_adjacency

__all__ = [
    "base_layout",
    "draw_spanning_tree",
    "draw_adjacency",
]
