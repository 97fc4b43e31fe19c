from __future__ import annotations

from typing import Hashable, List, Tuple

import networkx as nx


def adjacency_bitsets(graph: nx.Graph) -> Tuple[List[Hashable], List[int]]:
    """Index the nodes of *graph* and return (nodes, adj).

    nodes[i] is the label of node i (graph iteration order) and adj[i] has
    bit j set iff nodes[i] ~ nodes[j].  Self-loops are ignored.
    """
    nodes = list(graph.nodes())
    index = {v: i for i, v in enumerate(nodes)}
    adj = [0] * len(nodes)
    for u, v in graph.edges():
        if u == v:
            continue
        iu, iv = index[u], index[v]
        adj[iu] |= 1 << iv
        adj[iv] |= 1 << iu
    return nodes, adj


def reachable_mask(adj: List[int], start: int, within: int) -> int:
    """Nodes of *within* reachable from the nodes of *start* inside *within*."""
    seen = start & within
    frontier = seen
    while frontier:
        lsb = frontier & -frontier
        frontier ^= lsb
        u = lsb.bit_length() - 1
        new = adj[u] & within & ~seen
        seen |= new
        frontier |= new
    return seen


def is_connected_mask(adj: List[int], mask: int) -> bool:
    """Check whether the subgraph induced by the node mask is connected.

    Semantics for degenerate cases:
      - empty mask  -> True  (vacuously connected)
      - single node -> True
    """
    if mask & (mask - 1) == 0:
        return True
    start = mask & -mask
    return reachable_mask(adj, start, mask) == mask


def mask_to_nodes(mask: int, nodes: List[Hashable]) -> frozenset:
    """Translate a node mask back to node labels."""
    out = []
    while mask:
        lsb = mask & -mask
        out.append(nodes[lsb.bit_length() - 1])
        mask ^= lsb
    return frozenset(out)
