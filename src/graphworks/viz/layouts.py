from __future__ import annotations

import networkx as nx


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable layout:
      - circular_layout for a handful of vertices (keeps labelled graphs
        from the same vertex count visually aligned)
      - planar_layout if planar
      - otherwise spring_layout
    """
    if G.number_of_nodes() <= 6:
        return nx.circular_layout(G)
    is_planar, _ = nx.check_planarity(G)
    if is_planar:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)
