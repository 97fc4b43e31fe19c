from __future__ import annotations

from typing import Hashable, Sequence

import networkx as nx

from cisgrowth.gadgets.gadget import Gadget


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph on 0..n-1.
    """
    s = strip_graph6_header(g6)
    G = nx.from_graph6_bytes(s.encode("ascii"))
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    return G


def graph_to_g6(graph: nx.Graph) -> str:
    """graph6 string of *graph*, nodes numbered in iteration order."""
    H = nx.convert_node_labels_to_integers(graph, ordering="default")
    return nx.to_graph6_bytes(H, header=False).decode("ascii").strip()


def gadget_to_g6(gadget: Gadget) -> tuple[str, tuple[int, ...]]:
    """
    Serialise a gadget as (graph6, link node indices).

    Indices refer to the gadget's node iteration order, which is also the
    vertex order of the graph6 string.
    """
    index = {v: i for i, v in enumerate(gadget.graph)}
    return graph_to_g6(gadget.graph), tuple(index[v] for v in gadget.link_nodes)


def g6_to_gadget(g6: str, link_nodes: Sequence[Hashable], cls: type = Gadget) -> Gadget:
    """Inverse of gadget_to_g6: *cls* built on the parsed graph."""
    return cls(g6_to_nx(g6), link_nodes)


def adjacency_matrix_string(graph: nx.Graph) -> str:
    """0/1 adjacency matrix as a nested-list string, rows in node order."""
    nodes = list(graph)
    rows = [[1 if graph.has_edge(u, v) else 0 for v in nodes] for u in nodes]
    return str(rows)
