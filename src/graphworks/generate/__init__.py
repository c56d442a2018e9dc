from .materialize import (
    Matrix,
    combination_to_matrix,
    matrix_to_combination,
    render_matrix,
    format_generated_graph,
)
from .driver import (
    GeneratedGraph,
    graph_count,
    graphs_for_vertex_count,
    generate_graphs,
    write_generated_graphs,
)

__all__ = [
    "Matrix",
    "combination_to_matrix",
    "matrix_to_combination",
    "render_matrix",
    "format_generated_graph",
    "GeneratedGraph",
    "graph_count",
    "graphs_for_vertex_count",
    "generate_graphs",
    "write_generated_graphs",
]
