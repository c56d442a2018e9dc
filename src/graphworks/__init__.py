"""
graphworks: Prim minimum spanning trees over weight matrices, and exhaustive
generation of labelled simple graphs via reverse colex edge-slot combinations.
"""

__version__ = "0.2.0"

from .errors import (
    GraphWorksError,
    InvalidCombinationParameters,
    InvalidVertexCount,
    DisconnectedGraphError,
    UnreadableInputError,
    MissingInputError,
    MalformedInputError,
)
from .graph.edges import WeightedEdge, edges_from_matrix, edges_to_nx
from .graph.slots import triangle_number, edge_slot_count, slot_pairs, slot_index
from .combinatorics.colex import reverse_colex_combinations, combination_count
from .generate.materialize import (
    combination_to_matrix,
    matrix_to_combination,
    render_matrix,
    format_generated_graph,
)
from .generate.driver import (
    GeneratedGraph,
    graph_count,
    graphs_for_vertex_count,
    generate_graphs,
    write_generated_graphs,
)
from .mst.prim import SpanningTree, prim_mst

# Text files
from .io.text import (
    parse_weight_matrix,
    load_weight_matrix,
    read_graph,
    parse_generated_graphs,
    write_generated_graphs_file,
    format_edge_list,
    format_spanning_tree,
)

__all__ = [
    "__version__",
    # Errors
    "GraphWorksError",
    "InvalidCombinationParameters",
    "InvalidVertexCount",
    "DisconnectedGraphError",
    "UnreadableInputError",
    "MissingInputError",
    "MalformedInputError",
    # Edge model
    "WeightedEdge",
    "edges_from_matrix",
    "edges_to_nx",
    "triangle_number",
    "edge_slot_count",
    "slot_pairs",
    "slot_index",
    # Combinations
    "reverse_colex_combinations",
    "combination_count",
    # Generation
    "combination_to_matrix",
    "matrix_to_combination",
    "render_matrix",
    "format_generated_graph",
    "GeneratedGraph",
    "graph_count",
    "graphs_for_vertex_count",
    "generate_graphs",
    "write_generated_graphs",
    # MST
    "SpanningTree",
    "prim_mst",
    # IO
    "parse_weight_matrix",
    "load_weight_matrix",
    "read_graph",
    "parse_generated_graphs",
    "write_generated_graphs_file",
    "format_edge_list",
    "format_spanning_tree",
]
