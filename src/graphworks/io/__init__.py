from .text import (
    GRAPHWORKS_INPUT,
    GRAPHWORKS_OUTPUT,
    parse_weight_matrix,
    load_weight_matrix,
    read_graph,
    parse_generated_graphs,
    write_generated_graphs_file,
    format_edge_list,
    format_spanning_tree,
)

__all__ = [
    "GRAPHWORKS_INPUT",
    "GRAPHWORKS_OUTPUT",
    "parse_weight_matrix",
    "load_weight_matrix",
    "read_graph",
    "parse_generated_graphs",
    "write_generated_graphs_file",
    "format_edge_list",
    "format_spanning_tree",
]
