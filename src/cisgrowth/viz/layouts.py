from __future__ import annotations

import networkx as nx

from cisgrowth.gadgets.gadget import Gadget


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable base layout:
      - planar_layout if planar and succeeds
      - otherwise spring_layout
    """
    try:
        is_planar, _ = nx.check_planarity(G)
        if is_planar:
            return nx.planar_layout(G)
    except nx.NetworkXException:
        pass
    return nx.spring_layout(G, seed=seed, iterations=300)


def gadget_layout(gadget: Gadget, seed: int = 7, iterations: int = 200):
    """
    Layout with the left link nodes pinned on the left edge and the right
    link nodes on the right edge, so chained copies read left to right.

    Link node i of a side is placed at height i, the rest float freely.
    """
    G = gadget.graph
    h = gadget.half
    pos = {}
    for i, v in enumerate(gadget.left_side):
        pos[v] = (-1.0, 1.0 - 2.0 * i / max(h - 1, 1))
    for i, v in enumerate(gadget.right_side):
        pos[v] = (1.0, 1.0 - 2.0 * i / max(h - 1, 1))

    if G.number_of_nodes() == len(pos):
        return pos
    return nx.spring_layout(
        G,
        seed=seed,
        pos=pos,
        fixed=list(pos),
        iterations=iterations,
    )
