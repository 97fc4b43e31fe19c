from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from cisgrowth.gadgets.four_link import FourLinkGadget
from cisgrowth.gadgets.gadget import Gadget
from .layouts import base_layout, gadget_layout

LEFT_COLOR = "tab:red"
RIGHT_COLOR = "tab:blue"
INNER_COLOR = "lightgray"


def link_labels(gadget: Gadget) -> dict:
    """a, b, c, d for four-link gadgets; u0.. (left) and v0.. (right) otherwise."""
    if isinstance(gadget, FourLinkGadget):
        return dict(zip(gadget.link_nodes, "abcd"))
    labels = {v: f"u{i}" for i, v in enumerate(gadget.left_side)}
    labels.update({v: f"v{i}" for i, v in enumerate(gadget.right_side)})
    return labels


def draw_gadget(
    gadget: Gadget,
    *,
    ax=None,
    seed: int = 7,
    pinned: bool = True,
    node_size: int = 300,
    edge_width: float = 1.2,
    show_ids: bool = False,
    save_path: str | None = None,
):
    """
    Draw a gadget with left link nodes red and right link nodes blue.

    With *pinned* the link nodes are fixed on the left and right edges;
    otherwise a planar or spring layout is used.  If *save_path* is set the
    figure is written there and closed.

    Returns the matplotlib Axes.
    """
    G = gadget.graph
    pos = gadget_layout(gadget, seed=seed) if pinned else base_layout(G, seed=seed)

    fig = None
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_axis_off()

    left = set(gadget.left_side)
    right = set(gadget.right_side)
    colors = [
        LEFT_COLOR if v in left else RIGHT_COLOR if v in right else INNER_COLOR
        for v in G.nodes()
    ]

    labels = link_labels(gadget)
    if show_ids:
        labels = {v: labels.get(v, str(v)) for v in G.nodes()}

    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        node_color=colors,
        node_size=node_size,
        width=edge_width,
        labels=labels,
        font_weight="bold",
    )

    est = gadget.growth_estimate()
    title = f"|V|={G.number_of_nodes()}  |E|={G.number_of_edges()}"
    if est is not None:
        title += f"  base={est.base:.4f}"
    ax.set_title(title)

    if save_path:
        (fig or ax.figure).savefig(save_path, dpi=200)
        plt.close(fig or ax.figure)

    return ax
