from .prim import SpanningTree, prim_mst

__all__ = [
    "SpanningTree",
    "prim_mst",
]
