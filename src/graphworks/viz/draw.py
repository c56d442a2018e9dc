from __future__ import annotations

from typing import Optional, Sequence

import networkx as nx
import matplotlib.pyplot as plt

from graphworks.graph.edges import WeightedEdge, edges_to_nx
from graphworks.mst.prim import SpanningTree
from .layouts import base_layout


def draw_spanning_tree(
    edges: Sequence[WeightedEdge],
    tree: SpanningTree,
    vertex_count: int,
    *,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 1.2,
    tree_width: float = 3.0,
    save_path: Optional[str] = None,
):
    """
    Draw the weighted graph with its spanning tree edges highlighted.

    If save_path is set, saves a PNG there and closes the figure; otherwise
    shows it.  Returns the layout used.
    """
    G = edges_to_nx(edges, vertex_count)
    pos = base_layout(G, seed=seed)
    tree_pairs = [(e.u, e.v) for e in tree.edges]

    fig, ax = plt.subplots(figsize=(7, 7))
    ax.set_title(f"|V|={vertex_count}  |E|={G.number_of_edges()}  MST weight={tree.total_weight}")
    ax.set_axis_off()

    nx.draw_networkx_nodes(G, pos, ax=ax, node_size=node_size)
    nx.draw_networkx_labels(G, pos, ax=ax)
    nx.draw_networkx_edges(G, pos, ax=ax, width=edge_width, style="dashed", alpha=0.5)
    nx.draw_networkx_edges(G, pos, ax=ax, edgelist=tree_pairs, width=tree_width)
    nx.draw_networkx_edge_labels(
        G,
        pos,
        ax=ax,
        edge_labels={(u, v): w for u, v, w in G.edges(data="weight")},
    )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return pos


def draw_adjacency(
    matrix: Sequence[Sequence[int]],
    *,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 1.2,
    save_path: Optional[str] = None,
):
    """
    Draw one generated graph from its 0/1 adjacency matrix.

    Same save/show behaviour as draw_spanning_tree.
    """
    n = len(matrix)
    G = nx.Graph()
    G.add_nodes_from(range(n))
    G.add_edges_from((k, i) for k in range(n) for i in range(k + 1, n) if matrix[i][k])
    pos = base_layout(G, seed=seed)

    fig, ax = plt.subplots(figsize=(5, 5))
    ax.set_title(f"|V|={n}  |E|={G.number_of_edges()}")
    ax.set_axis_off()
    nx.draw_networkx(G, pos=pos, ax=ax, node_size=node_size, width=edge_width)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return pos
